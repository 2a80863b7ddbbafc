"""Default endpoint and reminder settings."""

DEFAULT_BASE_URL = "https://road-noise.samwarnick.com"
DEFAULT_USER_AGENT = "roadnoise/0.1.0"

# Local hours at which the rating prompt fires every day.
DEFAULT_REMINDER_HOURS: list[int] = [7, 13, 21]
DEFAULT_REMINDER_TITLE = "How's the road noise?"
