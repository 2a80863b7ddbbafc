"""CLI entry point for the road noise log."""

import argparse
import asyncio
import logging
from pathlib import Path

from roadnoise.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from roadnoise.config.schema import RoadNoiseConfig
from roadnoise.ingest.entry_client import EntryClient
from roadnoise.models.entry import NoiseLevel
from roadnoise.notifications.actions import PromptAction
from roadnoise.notifications.daemon import ReminderDaemon
from roadnoise.notifications.schedule import PromptSchedule
from roadnoise.reporting.formatters import (
    format_entry_line,
    format_history_json,
    format_history_text,
)
from roadnoise.storage import settings_repo
from roadnoise.storage.database import connect
from roadnoise.store.entry_store import EntryStore

DEFAULT_CONFIG = "config/roadnoise.yaml"
DEFAULT_DB = "data/settings.db"
DEFAULT_LOG = "logs/reminders.log"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="roadnoise",
        description="Log road noise ratings against current weather",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=DEFAULT_DB, help="Settings DB path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # history
    history_p = sub.add_parser("history", help="Show entries grouped by day")
    history_p.add_argument("--json", action="store_true", help="JSON output")

    # log
    log_p = sub.add_parser("log", help="Record a noise rating")
    log_p.add_argument("level", type=int, choices=[lvl.value for lvl in NoiseLevel])

    # levels
    sub.add_parser("levels", help="List noise levels")

    # key set / show / clear
    key_p = sub.add_parser("key", help="Manage the write key")
    key_sub = key_p.add_subparsers(dest="key_command")
    key_set_p = key_sub.add_parser("set", help="Store the write key")
    key_set_p.add_argument("value", help="Key value")
    key_sub.add_parser("show", help="Show the stored key, masked")
    key_sub.add_parser("clear", help="Remove the stored key")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    # remind
    remind_p = sub.add_parser("remind", help="Prompt for ratings at scheduled hours")
    remind_p.add_argument("--once", action="store_true", help="Exit after one prompt")
    remind_p.add_argument("--log-file", default=DEFAULT_LOG, help="Reminder log path")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "history":
        return _cmd_history(config, args)
    elif args.command == "log":
        return _cmd_log(config, args)
    elif args.command == "levels":
        return _cmd_levels()
    elif args.command == "key":
        return _cmd_key(args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "remind":
        return _cmd_remind(config, args)
    else:
        parser.print_help()
        return 1


def build_store(config: RoadNoiseConfig, db_path: str | Path) -> EntryStore:
    """Wire a store to the configured endpoint using the stored write key."""
    conn = connect(db_path)
    key = settings_repo.get_key(conn)
    conn.close()
    client = EntryClient(
        api_key=key,
        base_url=config.api.base_url,
        user_agent=config.api.user_agent,
        timeout=config.api.timeout_seconds,
    )
    return EntryStore(client, tz=config.display.tzinfo())


def _cmd_history(config, args) -> int:
    store = build_store(config, args.db)
    asyncio.run(store.refresh())
    if args.json:
        print(format_history_json(store.grouped))
    else:
        print(format_history_text(store.grouped, store.tz))
    return 0


def _cmd_log(config, args) -> int:
    store = build_store(config, args.db)
    entry = asyncio.run(store.submit(args.level))
    if entry is None:
        print("Submission failed; nothing was recorded")
        return 1
    print(format_entry_line(entry, store.tz))
    return 0


def _cmd_levels() -> int:
    for level in NoiseLevel:
        print(f"{level.value}  {level.label:<16} {level.color}")
    return 0


def _cmd_key(args) -> int:
    conn = connect(args.db)
    try:
        if args.key_command == "set":
            if not args.value.strip():
                print("Error: key must not be empty")
                return 1
            settings_repo.set_key(conn, args.value)
            print("Key saved")
            return 0
        elif args.key_command == "show":
            key = settings_repo.get_key(conn)
            print(_mask(key) if key else "Key: (not set)")
            return 0
        elif args.key_command == "clear":
            removed = settings_repo.clear_key(conn)
            print("Key cleared" if removed else "No key stored")
            return 0
        else:
            print("Use: key set VALUE | key show | key clear")
            return 1
    finally:
        conn.close()


def _mask(key: str) -> str:
    visible = key[-4:] if len(key) > 8 else ""
    return f"Key: {'*' * 8}{visible}"


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
        except (KeyError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        save_config(new_config, args.config)
        print(f"Set {key.strip()} = {get_config_value(new_config, key.strip())}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_remind(config, args) -> int:
    if not config.reminders.enabled:
        print("Reminders are disabled (reminders.enabled=false)")
        return 1
    store = build_store(config, args.db)
    daemon = ReminderDaemon(
        store,
        PromptSchedule.from_config(config.reminders),
        prompt=console_prompt,
        title=config.reminders.title,
        tz=config.display.tzinfo(),
        log_file=Path(args.log_file),
    )
    times = ", ".join(f"{h:02d}:{daemon.schedule.minute:02d}" for h in daemon.schedule.hours)
    print(f"Reminders at {times}")
    try:
        asyncio.run(daemon.run(once=args.once))
    except KeyboardInterrupt:
        print()
    stats = daemon.stats
    print(f"Stopped: {stats['prompts']} prompts, {stats['submitted']} recorded")
    return 0


def console_prompt(title: str, actions: list[PromptAction]) -> str | None:
    """Ask on the terminal; a blank answer or EOF dismisses the prompt."""
    print(f"\n{title}")
    for action in actions:
        print(f"  {action.identifier}) {action.title}")
    try:
        answer = input("Level (blank to skip): ").strip()
    except EOFError:
        return None
    return answer or None
