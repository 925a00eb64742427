"""Schedule filtering and grid layout for a selected room."""

from collections.abc import Iterable, Sequence

from src.timetable.logging import get_logger
from src.timetable.models import DAYS, PERIODS, Day, Period, ScheduleEntry

log = get_logger(__name__)

Grid = dict[Day, dict[int, ScheduleEntry | None]]


def filter_by_room(entries: Iterable[ScheduleEntry], room: str) -> list[ScheduleEntry]:
    """Return the entries whose room equals ``room``, in dataset order."""
    return [entry for entry in entries if entry.room == room]


def program_name(entries: Sequence[ScheduleEntry]) -> str:
    """Program of the first entry, or "" when there are none."""
    return entries[0].program if entries else ""


def build_grid(
    entries: Iterable[ScheduleEntry],
    days: Sequence[Day] = DAYS,
    periods: Sequence[Period] = PERIODS,
) -> Grid:
    """Lay entries out as day -> period number -> entry.

    Every (day, period) cell is present; empty cells hold None. When several
    entries share a cell the first one wins and the rest are not shown.
    """
    grid: Grid = {day: {period.num: None for period in periods} for day in days}

    shadowed = 0
    for entry in entries:
        row = grid.get(entry.day)
        if row is None or entry.period not in row:
            continue
        if row[entry.period] is None:
            row[entry.period] = entry
        else:
            shadowed += 1

    if shadowed:
        log.debug("grid_cells_shadowed", count=shadowed)
    return grid
