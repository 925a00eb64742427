"""Viewer configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class ViewerConfig(BaseSettings):
    """Viewer configuration loaded from environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # Schedule dataset (pre-generated, read once at startup)
    schedule_source: str = Field(
        default="public/schedule.json",
        description="Path or http(s) URL of the schedule JSON array",
    )
    fetch_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds when the schedule source is a URL",
    )

    # HTTP server
    host: str = Field(
        default="127.0.0.1",
        description="Interface the timetable server binds to",
    )
    port: int = Field(
        default=8000,
        description="Port the timetable server listens on",
    )

    # Page content
    school_name: str = Field(
        default="รร.ปทุมเทพวิทยาคาร",
        description="School name shown above the timetable",
    )
    app_title: str = Field(
        default="ระบบจัดการตารางเรียน",
        description="Application title used in the header and footer",
    )
    default_class_level: str = Field(
        default="1",
        description="Class level selected when the page opens",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_config: ViewerConfig | None = None


def get_config() -> ViewerConfig:
    """Get the viewer configuration singleton.

    Returns:
        ViewerConfig: Viewer configuration instance
    """
    global _config
    if _config is None:
        _config = ViewerConfig()
    return _config
