"""Plain-text rendering of a room's timetable for the terminal."""

from collections.abc import Sequence

from src.timetable.filtering import Grid
from src.timetable.models import DAYS, PERIODS, Day, Period, ScheduleEntry


def _cell_text(entry: ScheduleEntry | None) -> str:
    if entry is None:
        return "-"
    parts = [entry.subject_id]
    if entry.room_id:
        parts.append(entry.room_id)
    if entry.teacher_name:
        parts.append(entry.teacher_name)
    return " / ".join(parts)


def format_grid_table(
    grid: Grid,
    days: Sequence[Day] = DAYS,
    periods: Sequence[Period] = PERIODS,
) -> str:
    """Format a timetable grid as a human-readable table.

    Columns: Day | 1 | 2 | ... one column per period.
    """
    headers = ["Day", *(str(period.num) for period in periods)]

    rows = []
    for day in days:
        row = grid.get(day, {})
        rows.append(
            [day.value, *(_cell_text(row.get(period.num)) for period in periods)]
        )

    if all(cell == "-" for row in rows for cell in row[1:]):
        return "(no classes scheduled)"

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    header_line = " | ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    separator = "-+-".join("-" * w for w in widths)

    row_lines = []
    for row in rows:
        row_lines.append(
            " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row))
        )

    return "\n".join([header_line, separator, *row_lines])
