"""Schedule loader - reads the pre-generated schedule.json once at startup.

The source is either a local path (default ``public/schedule.json``) or an
http(s) URL pointing at the same static file on a web host. The payload is a
JSON array of objects:

  [
    {"room": "1/1", "program": "ทั่วไป", "day": "Monday", "period": 1,
     "subject_id": "ท21101", "room_id": "521", "teacher_name": "สมชาย ใจดี"},
    ...
  ]

read_schedule() raises on failure; fetch_schedule() is the variant used by the
page controller, which logs the failure and returns an empty list.
"""

import json
from pathlib import Path
from typing import Any

import requests
from pydantic import ValidationError

from src.timetable.errors import (
    ScheduleFetchError,
    ScheduleFormatError,
    ScheduleLoadError,
)
from src.timetable.logging import get_logger
from src.timetable.models import ScheduleEntry

log = get_logger(__name__)

_URL_SCHEMES = ("http://", "https://")


def is_url(source: str) -> bool:
    return source.lower().startswith(_URL_SCHEMES)


def _fetch_url(url: str, timeout: float) -> Any:
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise ScheduleFetchError(f"Failed to fetch {url}: {e}") from e

    try:
        return resp.json()
    except ValueError as e:
        raise ScheduleFormatError(f"{url} did not return JSON: {e}") from e


def _read_file(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScheduleFetchError(f"Failed to read {path}: {e}") from e

    try:
        return json.loads(text)
    except ValueError as e:
        raise ScheduleFormatError(f"{path} is not valid JSON: {e}") from e


def parse_entries(payload: Any) -> list[ScheduleEntry]:
    """Validate a decoded schedule.json payload.

    Records that fail validation are skipped with a warning; the rest of
    the dataset is kept in its original order.

    Raises:
        ScheduleFormatError: If the payload is not a JSON array.
    """
    if not isinstance(payload, list):
        raise ScheduleFormatError(
            f"Expected a JSON array of entries, got {type(payload).__name__}"
        )

    entries: list[ScheduleEntry] = []
    for index, item in enumerate(payload):
        try:
            entries.append(ScheduleEntry.model_validate(item))
        except ValidationError as e:
            log.warning(
                "schedule_entry_skipped",
                index=index,
                errors=e.error_count(),
                detail=e.errors(include_url=False)[0]["msg"],
            )

    skipped = len(payload) - len(entries)
    if skipped:
        log.warning("schedule_entries_invalid", skipped=skipped, kept=len(entries))
    return entries


def read_schedule(source: str, *, timeout: float = 10.0) -> list[ScheduleEntry]:
    """Load and validate the schedule dataset.

    Args:
        source: Local path or http(s) URL of the schedule JSON.
        timeout: Request timeout in seconds (URL sources only).

    Returns:
        List of ScheduleEntry in dataset order.

    Raises:
        ScheduleFetchError: If the file or URL cannot be read.
        ScheduleFormatError: If the content is not a JSON array.
    """
    if is_url(source):
        payload = _fetch_url(source, timeout)
    else:
        payload = _read_file(Path(source))

    entries = parse_entries(payload)
    log.info("schedule_loaded", source=source, entries=len(entries))
    return entries


def fetch_schedule(source: str, *, timeout: float = 10.0) -> list[ScheduleEntry]:
    """Load the schedule, logging and swallowing any load failure.

    Returns:
        The loaded entries, or an empty list if loading failed.
    """
    try:
        return read_schedule(source, timeout=timeout)
    except ScheduleLoadError as e:
        log.error(
            "schedule_load_failed",
            source=source,
            error=str(e),
            type=type(e).__name__,
        )
        return []
