"""Pydantic models for schedule data.

All data structures use Pydantic v2 for validation, serialization, and type safety.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Day(str, Enum):
    """School day. Values match the ``day`` field of schedule.json."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"

    @property
    def thai(self) -> str:
        return DAY_TH[self]


DAY_TH: dict[Day, str] = {
    Day.MONDAY: "จันทร์",
    Day.TUESDAY: "อังคาร",
    Day.WEDNESDAY: "พุธ",
    Day.THURSDAY: "พฤหัส",
    Day.FRIDAY: "ศุกร์",
}

DAYS: list[Day] = list(Day)


class ScheduleEntry(BaseModel):
    """One lesson in a room's weekly timetable.

    Loaded in bulk from the pre-generated schedule.json and never mutated.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    room: str  # "<level>/<section>", e.g. "1/10"
    program: str  # e.g. "ห้องเรียนพิเศษวิทย์-คณิต"
    day: Day
    period: int  # 1-10; numeric strings such as "3" are accepted
    subject_id: str  # e.g. "ท21101"
    room_id: str | None = None  # physical classroom, e.g. "521" (numbers accepted)
    teacher_name: str | None = None


class RoomOption(BaseModel):
    """Entry of the room dropdown."""

    model_config = ConfigDict(frozen=True)

    id: int
    display_name: str
    value: str

    @property
    def key(self) -> str:
        """Room identifier used for filtering (falls back to the display name)."""
        return self.value or self.display_name


class ClassLevel(BaseModel):
    """Entry of the class level dropdown (ม.1 - ม.6)."""

    model_config = ConfigDict(frozen=True)

    id: int
    display_name: str
    value: str = ""


class Period(BaseModel):
    """A fixed daily time slot."""

    model_config = ConfigDict(frozen=True)

    num: int
    time: str  # "08:30-09:20"


CLASS_LEVELS: list[ClassLevel] = [
    ClassLevel(id=n, display_name=f"ม.{n}", value=str(n)) for n in range(1, 7)
]

PERIODS: list[Period] = [
    Period(num=1, time="08:30-09:20"),
    Period(num=2, time="09:20-10:10"),
    Period(num=3, time="10:10-11:00"),
    Period(num=4, time="11:00-11:50"),
    Period(num=5, time="11:50-12:40"),
    Period(num=6, time="12:40-13:30"),
    Period(num=7, time="13:30-14:20"),
    Period(num=8, time="14:20-15:10"),
    Period(num=9, time="15:10-16:00"),
    Period(num=10, time="16:00-16:50"),
]
