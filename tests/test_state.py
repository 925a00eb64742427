from structlog.testing import capture_logs

from src.timetable.models import CLASS_LEVELS, RoomOption
from src.timetable.rooms import PLACEHOLDER_ROOM, PROMPT_ROOM
from src.timetable.state import TimetableState


def test_initial_state_is_loading():
    state = TimetableState()

    assert state.loading is True
    assert state.selected_class_level == CLASS_LEVELS[0]
    assert state.selected_room == PROMPT_ROOM
    assert state.room_options == []
    assert state.current_room_display == ""


def test_load_selects_first_room_of_default_level(schedule_file):
    state = TimetableState()
    state.load(str(schedule_file))

    assert state.loading is False
    assert [o.value for o in state.room_options] == ["1/1", "1/2", "1/10"]
    assert state.selected_room.value == "1/1"
    assert state.current_room_display == "1/1"
    assert state.program_name == "วิทย์-คณิต"


def test_failed_load_leaves_loading_with_no_data(tmp_path):
    state = TimetableState()

    with capture_logs() as logs:
        state.load(str(tmp_path / "missing.json"))

    assert state.loading is False
    assert state.entries == []
    assert state.room_options == [PLACEHOLDER_ROOM]
    assert state.current_room_display == ""
    assert state.filtered_entries == []
    assert any(log["event"] == "schedule_load_failed" for log in logs)


def test_change_class_level_auto_selects_first_room(sample_entries):
    state = TimetableState.from_entries(sample_entries)

    state.change_class_level(CLASS_LEVELS[1])

    assert state.selected_class_level.value == "2"
    assert [o.value for o in state.room_options] == ["2/1"]
    assert state.selected_room.value == "2/1"
    assert [e.subject_id for e in state.filtered_entries] == ["ศ21101"]


def test_change_to_level_without_rooms_shows_placeholder(sample_entries):
    state = TimetableState.from_entries(sample_entries)

    state.change_class_level(CLASS_LEVELS[5])

    assert state.room_options == [PLACEHOLDER_ROOM]
    assert state.selected_room == PLACEHOLDER_ROOM
    assert state.current_room_display == ""
    assert state.filtered_entries == []
    assert state.program_name == ""


def test_change_room_updates_display_and_filter(sample_entries):
    state = TimetableState.from_entries(sample_entries)

    state.change_room(state.room_options[2])

    assert state.current_room_display == "1/10"
    assert [e.subject_id for e in state.filtered_entries] == ["ค21101"]


def test_grid_shows_first_entry_for_duplicate_cell(sample_entries):
    state = TimetableState.from_entries(sample_entries)

    assert state.grid[state.filtered_entries[0].day][1].subject_id == "ท21101"


def test_default_level_is_configurable(sample_entries):
    state = TimetableState.from_entries(sample_entries, default_level="2")

    assert state.selected_class_level.display_name == "ม.2"
    assert state.selected_room.value == "2/1"


def test_select_by_values(sample_entries):
    state = TimetableState.from_entries(sample_entries)

    state.select(level="1", room="1/2")

    assert state.selected_room.value == "1/2"
    assert state.program_name == "ทั่วไป"


def test_select_unknown_room_keeps_first_room(sample_entries):
    state = TimetableState.from_entries(sample_entries)

    state.select(level="1", room="2/1")

    assert state.selected_room.value == "1/1"


def test_select_unknown_level_falls_back_to_first_level(sample_entries):
    state = TimetableState.from_entries(sample_entries)
    state.change_class_level(CLASS_LEVELS[1])

    state.select(level="9")

    assert state.selected_class_level == CLASS_LEVELS[0]
    assert state.selected_room.value == "1/1"


def test_room_outside_dataset_filters_to_nothing(sample_entries):
    state = TimetableState.from_entries(sample_entries)

    state.change_room(RoomOption(id=9, display_name="1/9", value="1/9"))

    assert state.current_room_display == "1/9"
    assert state.filtered_entries == []
