import pytest

from src.timetable import config as config_module
from src.timetable.config import ViewerConfig, get_config

_ENV_VARS = [
    "SCHEDULE_SOURCE",
    "FETCH_TIMEOUT",
    "HOST",
    "PORT",
    "SCHOOL_NAME",
    "APP_TITLE",
    "DEFAULT_CLASS_LEVEL",
    "LOG_JSON",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_config", None)


def test_defaults():
    config = ViewerConfig(_env_file=None)

    assert config.schedule_source == "public/schedule.json"
    assert config.port == 8000
    assert config.default_class_level == "1"
    assert config.log_json is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SCHEDULE_SOURCE", "https://school.example/schedule.json")
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("log_json", "true")

    config = ViewerConfig(_env_file=None)

    assert config.schedule_source == "https://school.example/schedule.json"
    assert config.port == 9090
    assert config.log_json is True


def test_env_file_is_read(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DEFAULT_CLASS_LEVEL=4\nUNRELATED=1\n", encoding="utf-8")

    config = ViewerConfig(_env_file=str(env_file))

    assert config.default_class_level == "4"


def test_get_config_is_singleton():
    assert get_config() is get_config()
