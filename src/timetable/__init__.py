"""Weekly class timetable viewer.

Loads the pre-generated schedule.json once and renders a day x period grid
for a selected class level and room.
"""

from src.timetable.models import RoomOption, ScheduleEntry
from src.timetable.rooms import derive_room_options
from src.timetable.filtering import filter_by_room
from src.timetable.state import TimetableState

__all__ = [
    "ScheduleEntry",
    "RoomOption",
    "TimetableState",
    "derive_room_options",
    "filter_by_room",
]
