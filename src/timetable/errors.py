"""Error hierarchy for schedule loading.

The loader raises these; the page controller catches ScheduleLoadError,
logs it and carries on with an empty dataset.
"""


class ScheduleError(Exception):
    """Base exception for all timetable errors."""

    pass


class ScheduleLoadError(ScheduleError):
    """The schedule dataset could not be loaded."""

    pass


class ScheduleFetchError(ScheduleLoadError):
    """The schedule resource could not be read.

    Examples: missing file, connection refused, 404 from the static host.
    """

    pass


class ScheduleFormatError(ScheduleLoadError):
    """The schedule resource was read but is not a JSON array of entries."""

    pass
