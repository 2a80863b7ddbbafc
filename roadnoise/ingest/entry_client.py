"""Road noise entry endpoint client.

The endpoint exposes a single origin: GET returns the full entry history,
POST with a bearer key and a plain-text level appends one entry.
"""

import json
import logging

import httpx

from roadnoise.config.defaults import DEFAULT_BASE_URL, DEFAULT_USER_AGENT
from roadnoise.ingest.decoding import decode_entries, decode_entry
from roadnoise.ingest.errors import AuthError, DecodeError, TransportError
from roadnoise.models.entry import NoiseEntry, NoiseLevel

logger = logging.getLogger(__name__)


class EntryClient:
    def __init__(
        self,
        api_key: str = "",
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    async def fetch_all(self) -> list[NoiseEntry]:
        """Fetch the full entry history, newest first.

        Server order is not trusted; entries are re-sorted by timestamp
        descending, ties keeping their payload order.
        """
        resp = await self._send("GET")
        entries = decode_entries(self._json(resp))
        entries.sort(key=lambda e: e.timestamp, reverse=True)
        logger.debug("Fetched %d entries from %s", len(entries), self.base_url)
        return entries

    async def post_entry(self, level: int) -> NoiseEntry:
        """Record a new rating and return the entry the endpoint created."""
        level = NoiseLevel(level)
        if not self.api_key:
            raise AuthError("No API key configured")
        resp = await self._send(
            "POST",
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "text/plain; charset=utf-8",
            },
            content=str(int(level)).encode("utf-8"),
        )
        entry = decode_entry(self._json(resp))
        logger.info("Posted level %d, entry %s", level, entry.id)
        return entry

    async def _send(
        self,
        method: str,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ) -> httpx.Response:
        all_headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        all_headers.update(headers or {})
        try:
            async with httpx.AsyncClient(**self._client_options()) as client:
                resp = await client.request(
                    method, self.base_url, headers=all_headers, content=content,
                )
        except httpx.RequestError as e:
            logger.error("Entry endpoint request failed: %s %s -> %s", method, self.base_url, e)
            raise TransportError(f"Request failed: {e}") from e

        if method != "GET" and resp.status_code in (401, 403):
            logger.error("Entry endpoint rejected credential: %d", resp.status_code)
            raise AuthError(f"HTTP {resp.status_code}: credential rejected", resp.status_code)
        if resp.status_code >= 300:
            logger.error(
                "Entry endpoint %d: %s %s -> %s",
                resp.status_code, method, self.base_url, resp.text,
            )
            raise TransportError(f"HTTP {resp.status_code}: {resp.text}", resp.status_code)
        return resp

    def _client_options(self) -> dict[str, float]:
        if self.timeout is None:
            return {}
        return {"timeout": self.timeout}

    @staticmethod
    def _json(resp: httpx.Response) -> object:
        try:
            return resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"Response is not valid JSON: {e}", resp.status_code) from e
