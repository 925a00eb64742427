"""Shared fixtures for timetable tests."""

import json

import pytest

from src.timetable.models import ScheduleEntry


def make_entry(
    room: str = "1/1",
    day: str = "Monday",
    period: int = 1,
    subject_id: str = "ท21101",
    program: str = "ทั่วไป",
    **kwargs,
) -> ScheduleEntry:
    return ScheduleEntry(
        room=room,
        program=program,
        day=day,
        period=period,
        subject_id=subject_id,
        **kwargs,
    )


SAMPLE_RECORDS = [
    {"room": "1/10", "program": "ทั่วไป", "day": "Monday", "period": 1,
     "subject_id": "ค21101"},
    {"room": "1/1", "program": "วิทย์-คณิต", "day": "Monday", "period": 1,
     "subject_id": "ท21101", "room_id": "521", "teacher_name": "สมศรี ใจงาม"},
    {"room": "1/1", "program": "วิทย์-คณิต", "day": "Monday", "period": 1,
     "subject_id": "ส21101", "room_id": "523"},
    {"room": "1/1", "program": "วิทย์-คณิต", "day": "Tuesday", "period": "2",
     "subject_id": "ว21101"},
    {"room": "1/2", "program": "ทั่วไป", "day": "Friday", "period": 10,
     "subject_id": "พ21101", "teacher_name": "อนันต์ แข็งแรง"},
    {"room": "10/1", "program": "ทั่วไป", "day": "Monday", "period": 1,
     "subject_id": "อ21101"},
    {"room": "2/1", "program": "ทั่วไป", "day": "Wednesday", "period": 3,
     "subject_id": "ศ21101"},
]


@pytest.fixture
def sample_records() -> list[dict]:
    return [dict(record) for record in SAMPLE_RECORDS]


@pytest.fixture
def sample_entries() -> list[ScheduleEntry]:
    return [ScheduleEntry.model_validate(record) for record in SAMPLE_RECORDS]


@pytest.fixture
def schedule_file(tmp_path, sample_records):
    path = tmp_path / "schedule.json"
    path.write_text(json.dumps(sample_records, ensure_ascii=False), encoding="utf-8")
    return path
