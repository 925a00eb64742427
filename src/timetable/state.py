"""TimetableState - the page controller.

Holds the loaded dataset and the current selection, and propagates
selection changes:

  class level -> room options -> selected room -> filtered entries

Each change recomputes what depends on it synchronously; nothing here
runs in the background.
"""

from collections.abc import Sequence

from src.timetable.filtering import Grid, build_grid, filter_by_room, program_name
from src.timetable.loader import fetch_schedule
from src.timetable.logging import get_logger
from src.timetable.models import CLASS_LEVELS, ClassLevel, RoomOption, ScheduleEntry
from src.timetable.rooms import (
    PROMPT_ROOM,
    default_room,
    derive_room_options,
    is_placeholder,
    level_value,
)

log = get_logger(__name__)


class TimetableState:
    """Selection state for one view of the timetable."""

    def __init__(
        self,
        entries: Sequence[ScheduleEntry] = (),
        *,
        class_levels: Sequence[ClassLevel] = CLASS_LEVELS,
        default_level: str | None = None,
    ) -> None:
        self.entries: list[ScheduleEntry] = list(entries)
        self.loading = True
        self.class_levels: list[ClassLevel] = list(class_levels)
        self.selected_class_level: ClassLevel = self._find_level(default_level)
        self.room_options: list[RoomOption] = []
        self.selected_room: RoomOption = PROMPT_ROOM
        self.current_room_display = ""

    @classmethod
    def from_entries(
        cls, entries: Sequence[ScheduleEntry], **kwargs
    ) -> "TimetableState":
        """Build a state over an already loaded dataset."""
        state = cls(entries, **kwargs)
        state._finish_loading()
        return state

    def load(self, source: str, *, timeout: float = 10.0) -> None:
        """Fetch the dataset once and compute room options.

        A failed fetch is logged by the loader and leaves the dataset empty.
        """
        self.entries = fetch_schedule(source, timeout=timeout)
        self._finish_loading()

    def _finish_loading(self) -> None:
        self.loading = False
        self._update_room_options(level_value(self.selected_class_level) or "1")
        log.debug(
            "timetable_state_ready",
            entries=len(self.entries),
            class_level=self.selected_class_level.display_name,
        )

    def _find_level(self, value: str | None) -> ClassLevel:
        for level in self.class_levels:
            if value is not None and level_value(level) == value:
                return level
        return self.class_levels[0]

    def _update_room_options(self, level: str) -> None:
        self.room_options = derive_room_options(self.entries, level)
        room = default_room(self.room_options)
        self.selected_room = room
        self.current_room_display = "" if is_placeholder(room) else room.display_name

    def change_class_level(self, level: ClassLevel) -> None:
        """Select a class level and auto-select its first room."""
        self.selected_class_level = level
        self._update_room_options(level_value(level))

    def change_room(self, room: RoomOption) -> None:
        self.selected_room = room
        self.current_room_display = room.display_name

    def select(self, level: str | None = None, room: str | None = None) -> None:
        """Apply a selection given as raw values (e.g. from a query string).

        Unknown levels fall back to the first class level; unknown rooms
        keep the auto-selected first room of the level.
        """
        if level is not None:
            self.change_class_level(self._find_level(level))
        if room:
            for option in self.room_options:
                if option.value == room:
                    self.change_room(option)
                    break
            else:
                log.debug("room_not_in_level", room=room, class_level=level)

    @property
    def filtered_entries(self) -> list[ScheduleEntry]:
        return filter_by_room(self.entries, self.selected_room.key)

    @property
    def program_name(self) -> str:
        return program_name(self.filtered_entries)

    @property
    def grid(self) -> Grid:
        return build_grid(self.filtered_entries)
