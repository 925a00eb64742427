"""HTML rendering of the timetable page.

Layout:
  header            app title + school name
  selection panel   GET form with the class level and room dropdowns
  timetable         table, one row per day, one column per period
                    cell: subject_id / room_id / "ครู <teacher_name>", or "-"
  footer            "© <year> <app title>"

If the selected room has no entries an empty-state message is shown instead
of the table; if no room is selected (placeholder) nothing is shown.
"""

from datetime import date
from html import escape

from src.timetable.models import DAYS, PERIODS, ScheduleEntry
from src.timetable.rooms import level_value
from src.timetable.state import TimetableState

_STYLE = """
body { font-family: sans-serif; margin: 2rem; background: #1f2937; color: #f9fafb; }
header h1 { margin: 0 0 1rem; }
form.selection { display: flex; gap: 1rem; align-items: end; margin-bottom: 1.5rem; }
form.selection label { display: flex; flex-direction: column; font-size: .9rem; }
.timetable { background: #fff; color: #1f2937; border-radius: .75rem; padding: 1rem; }
.timetable table { border-collapse: collapse; width: 100%; table-layout: fixed; }
.timetable th, .timetable td { border: 1px solid #d1d5db; padding: .5rem; text-align: center; }
.timetable td { height: 6rem; vertical-align: middle; }
.timetable .day { background: #e5e7eb; font-weight: 600; }
.timetable .time { font-size: .75rem; border-top: 1px solid #d1d5db; padding-top: .25rem; }
.timetable .teacher { font-size: .85rem; font-weight: 300; }
.timetable .free { color: #9ca3af; }
.empty { background: #fff; color: #1f2937; border-radius: .75rem; padding: 2rem; text-align: center; }
footer { margin-top: 2rem; text-align: center; color: rgba(255,255,255,.6); font-size: .85rem; }
"""


def _document(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="th">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>{_STYLE}</style>\n"
        "</head>\n"
        f"<body>\n{body}\n</body>\n"
        "</html>\n"
    )


def render_loading(title: str) -> str:
    return _document(title, '<div class="loading">กำลังโหลด...</div>')


def render_header(app_title: str) -> str:
    return f"<header><h1>ตารางเรียน | {escape(app_title)}</h1></header>"


def render_selection_panel(state: TimetableState) -> str:
    """Dropdowns for class level and room, submitted as a GET form."""
    current_level = level_value(state.selected_class_level)
    level_options = "".join(
        '<option value="{value}"{selected}>{name}</option>'.format(
            value=escape(level_value(level)),
            selected=" selected" if level_value(level) == current_level else "",
            name=escape(level.display_name),
        )
        for level in state.class_levels
    )
    room_options = "".join(
        '<option value="{value}"{selected}>{name}</option>'.format(
            value=escape(option.value),
            selected=" selected" if option == state.selected_room else "",
            name=escape(option.display_name),
        )
        for option in state.room_options
    )

    parts = [
        '<form class="selection" method="get" action="/">',
        f'<label>ระดับชั้น<select name="level">{level_options}</select></label>',
        f'<label>ห้อง<select name="room">{room_options}</select></label>',
        '<button type="submit">แสดงตาราง</button>',
    ]
    if state.current_room_display:
        summary = f"ห้อง {state.current_room_display}"
        if state.program_name:
            summary += f" {state.program_name}"
        parts.append(f'<span class="current">{escape(summary)}</span>')
    parts.append("</form>")
    return "".join(parts)


def _render_cell(entry: ScheduleEntry | None) -> str:
    if entry is None:
        return '<td class="free">-</td>'

    lines = [f'<div class="subject">{escape(entry.subject_id)}</div>']
    if entry.room_id:
        lines.append(f'<div class="room">{escape(entry.room_id)}</div>')
    if entry.teacher_name:
        lines.append(f'<div class="teacher">ครู {escape(entry.teacher_name)}</div>')
    return f"<td>{''.join(lines)}</td>"


def render_timetable(state: TimetableState, school_name: str) -> str:
    """The day x period table, or the empty-state message."""
    room = state.current_room_display
    if not room:
        return ""

    if not state.filtered_entries:
        return (
            '<section class="empty">'
            "<h3>ไม่พบข้อมูลตารางเรียน</h3>"
            f"<p>ไม่พบข้อมูลตารางเรียนสำหรับ {escape(room)}</p>"
            "</section>"
        )

    grid = state.grid
    head = "".join(
        f'<th><div>คาบที่ {period.num}</div><div class="time">{escape(period.time)}</div></th>'
        for period in PERIODS
    )
    rows = "".join(
        f'<tr><td class="day">{escape(day.thai)}</td>'
        + "".join(_render_cell(grid[day][period.num]) for period in PERIODS)
        + "</tr>"
        for day in DAYS
    )
    caption = f"ห้อง {room} {state.program_name}".rstrip()

    return (
        '<section class="timetable">'
        f"<h2>{escape(school_name)}</h2>"
        f'<p class="caption">{escape(caption)}</p>'
        "<table>"
        f'<thead><tr><th class="day">วัน/คาบ</th>{head}</tr></thead>'
        f"<tbody>{rows}</tbody>"
        "</table>"
        "</section>"
    )


def render_footer(app_title: str, year: int | None = None) -> str:
    year = year or date.today().year
    return f"<footer><p>© {year} {escape(app_title)}</p></footer>"


def render_page(
    state: TimetableState,
    *,
    school_name: str,
    app_title: str,
    year: int | None = None,
) -> str:
    """Render the full page for the state's current selection."""
    if state.loading:
        return render_loading(app_title)

    body = "\n".join(
        [
            render_header(app_title),
            render_selection_panel(state),
            render_timetable(state, school_name),
            render_footer(app_title, year),
        ]
    )
    return _document(app_title, body)
