from src.timetable.models import RoomOption
from src.timetable.pages.table import format_grid_table
from src.timetable.pages.timetable import render_page
from src.timetable.state import TimetableState

from conftest import make_entry


def _render(state: TimetableState) -> str:
    return render_page(
        state, school_name="รร.ทดสอบ", app_title="ระบบจัดการตารางเรียน", year=2025
    )


def test_page_shows_grid_for_selected_room(sample_entries):
    html = _render(TimetableState.from_entries(sample_entries))

    assert "รร.ทดสอบ" in html
    assert "ห้อง 1/1 วิทย์-คณิต" in html
    assert "วัน/คาบ" in html
    assert "คาบที่ 10" in html
    assert "16:00-16:50" in html
    assert "จันทร์" in html and "ศุกร์" in html
    assert "ท21101" in html
    assert "ครู สมศรี ใจงาม" in html
    assert '<div class="room">521</div>' in html


def test_page_hides_shadowed_duplicate(sample_entries):
    html = _render(TimetableState.from_entries(sample_entries))

    assert "ส21101" not in html


def test_selection_panel_marks_current_choices(sample_entries):
    state = TimetableState.from_entries(sample_entries)
    state.select(level="1", room="1/10")

    html = _render(state)

    assert '<option value="1" selected>ม.1</option>' in html
    assert '<option value="1/10" selected>1/10</option>' in html
    assert '<option value="1/2">1/2</option>' in html


def test_footer_shows_year_and_title(sample_entries):
    html = _render(TimetableState.from_entries(sample_entries))

    assert "© 2025 ระบบจัดการตารางเรียน" in html


def test_room_without_entries_shows_empty_message(sample_entries):
    state = TimetableState.from_entries(sample_entries)
    state.change_room(RoomOption(id=9, display_name="1/9", value="1/9"))

    html = _render(state)

    assert "ไม่พบข้อมูลตารางเรียนสำหรับ 1/9" in html
    assert "<table>" not in html


def test_placeholder_room_shows_no_timetable():
    html = _render(TimetableState.from_entries([]))

    assert "ไม่พบข้อมูลห้องเรียน" in html
    assert "<table>" not in html
    assert "ไม่พบข้อมูลตารางเรียนสำหรับ" not in html


def test_loading_state_renders_loading_page():
    html = _render(TimetableState())

    assert "กำลังโหลด" in html
    assert "<form" not in html


def test_values_are_html_escaped():
    state = TimetableState.from_entries(
        [make_entry(teacher_name="<script>alert(1)</script>")]
    )

    html = _render(state)

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_text_table_lists_days_and_cells(sample_entries):
    state = TimetableState.from_entries(sample_entries)

    table = format_grid_table(state.grid)
    lines = table.splitlines()

    assert lines[0].startswith("Day")
    assert lines[0].rstrip().endswith("10")
    assert len(lines) == 2 + 5
    assert lines[2].startswith("Monday")
    assert "ท21101 / 521 / สมศรี ใจงาม" in lines[2]
    assert lines[6].startswith("Friday")


def test_text_table_for_empty_grid():
    state = TimetableState.from_entries([])

    assert format_grid_table(state.grid) == "(no classes scheduled)"


def test_numeric_room_id_is_displayed():
    state = TimetableState.from_entries([make_entry(room_id=521)])

    html = _render(state)

    assert '<div class="room">521</div>' in html
