"""Room option derivation for the room dropdown.

Room identifiers look like "<level>/<section>" ("1/1", "1/10", "6/3").
Options for a level are ordered by the numeric section, so "1/2" comes
before "1/10".
"""

from collections.abc import Iterable

from src.timetable.logging import get_logger
from src.timetable.models import ClassLevel, RoomOption, ScheduleEntry

log = get_logger(__name__)

# Shown before any room has been chosen
PROMPT_ROOM = RoomOption(id=0, display_name="กรุณาเลือก", value="")

# Sole option when a level has no rooms in the dataset
PLACEHOLDER_ROOM = RoomOption(id=0, display_name="ไม่พบข้อมูลห้องเรียน", value="")


def level_value(level: ClassLevel) -> str:
    """Return the room prefix for a class level ("ม.3" -> "3")."""
    return level.value or level.display_name.replace("ม.", "")


def section_sort_key(room: str) -> tuple[int, int, str, str]:
    """Sort key ordering rooms by numeric section.

    Sections that are not integers go after the numeric ones, lexically.
    The full room string breaks ties ("1/01" vs "1/1").
    """
    parts = room.split("/")
    section = parts[1] if len(parts) > 1 else ""
    try:
        return (0, int(section), "", room)
    except ValueError:
        return (1, 0, section, room)


def derive_room_options(
    entries: Iterable[ScheduleEntry], level: str
) -> list[RoomOption]:
    """Build the room dropdown options for a class level.

    Args:
        entries: Full schedule dataset.
        level: Class level value, e.g. "1".

    Returns:
        Options for every distinct room starting with "<level>/", ordered by
        section number and numbered from 1, or [PLACEHOLDER_ROOM] if the
        level has no rooms.
    """
    prefix = f"{level}/"
    rooms = {entry.room for entry in entries if entry.room.startswith(prefix)}

    if not rooms:
        log.info("rooms_not_found", class_level=level)
        return [PLACEHOLDER_ROOM]

    ordered = sorted(rooms, key=section_sort_key)
    log.debug("rooms_derived", class_level=level, rooms=ordered)
    return [
        RoomOption(id=index, display_name=room, value=room)
        for index, room in enumerate(ordered, start=1)
    ]


def is_placeholder(option: RoomOption) -> bool:
    return not option.value


def default_room(options: list[RoomOption]) -> RoomOption:
    """The room auto-selected after a level change."""
    return options[0] if options else PLACEHOLDER_ROOM
