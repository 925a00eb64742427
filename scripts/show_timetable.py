"""Print a room's weekly timetable as a table or JSON.

Standalone CLI over the same selection logic as the web page.

Run with: python scripts/show_timetable.py --level 1
Room:     python scripts/show_timetable.py --level 1 --room 1/10
JSON:     python scripts/show_timetable.py --level 4 --json
Rooms:    python scripts/show_timetable.py --level 4 --list-rooms

Exit codes:
  0 = success (table or JSON on stdout)
  1 = error (message on stderr)
"""

import argparse
import json
import os
import sys

from dotenv import load_dotenv

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.timetable.config import get_config  # noqa: E402
from src.timetable.logging import setup_logging  # noqa: E402
from src.timetable.pages.table import format_grid_table  # noqa: E402
from src.timetable.rooms import is_placeholder  # noqa: E402
from src.timetable.state import TimetableState  # noqa: E402


def _log(msg: str) -> None:
    """Write diagnostic messages to stderr so stdout stays clean for JSON."""
    print(msg, file=sys.stderr)


def _parse_args() -> argparse.Namespace:
    config = get_config()
    parser = argparse.ArgumentParser(
        description="Print a room's weekly class timetable.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--level",
        type=str,
        default=config.default_class_level,
        help=f"Class level 1-6 (default: {config.default_class_level}).",
    )
    parser.add_argument(
        "--room",
        type=str,
        default=None,
        help="Room, e.g. 1/2 (default: first room of the level).",
    )
    parser.add_argument(
        "--source",
        type=str,
        default=config.schedule_source,
        help=f"Path or URL of schedule.json (default: {config.schedule_source}).",
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--json",
        action="store_true",
        help="Output the room's entries as JSON.",
    )
    output_group.add_argument(
        "--list-rooms",
        action="store_true",
        help="List the rooms of the level, one per line.",
    )
    return parser.parse_args()


def main(args: argparse.Namespace) -> int:
    config = get_config()
    # stdout is reserved for the table / JSON
    setup_logging(
        json_output=config.log_json, log_level="WARNING", stream=sys.stderr
    )

    state = TimetableState(default_level=args.level)
    state.load(args.source, timeout=config.fetch_timeout)
    state.select(level=args.level, room=args.room)

    if args.list_rooms:
        for option in state.room_options:
            if not is_placeholder(option):
                print(option.value)
        return 0

    if is_placeholder(state.selected_room):
        _log(f"No rooms found for level {args.level}")
        return 1
    if args.room and state.selected_room.value != args.room:
        _log(f"Room {args.room} not found; showing {state.selected_room.value}")

    if args.json:
        output = {
            "room": state.selected_room.value,
            "program": state.program_name,
            "entries": [e.model_dump(mode="json") for e in state.filtered_entries],
        }
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        _log(f"ห้อง {state.current_room_display} {state.program_name}".rstrip())
        print(format_grid_table(state.grid))
    return 0


if __name__ == "__main__":
    args = _parse_args()
    try:
        sys.exit(main(args))
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
