"""Tests for settings loading."""

from datetime import date

import pytest
from pydantic import ValidationError

from recipe_finder.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "RECIPE_FINDER_TODAY",
        "RECIPE_FINDER_NO_MATCH_MESSAGE",
        "RECIPE_FINDER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.no_match_message == "no match available"
    assert settings.csv_delimiter == ","
    assert settings.log_level == "WARNING"
    assert settings.today is None


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RECIPE_FINDER_TODAY", "2016-01-31")
    monkeypatch.setenv("RECIPE_FINDER_NO_MATCH_MESSAGE", "Order Takeout")
    monkeypatch.setenv("RECIPE_FINDER_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.today == date(2016, 1, 31)
    assert settings.no_match_message == "Order Takeout"
    assert settings.log_level == "DEBUG"


def test_today_accepts_use_by_date_format(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RECIPE_FINDER_TODAY", "31/01/2016")

    assert Settings(_env_file=None).today == date(2016, 1, 31)


@pytest.mark.parametrize("value", ["31/02/2016", "1/1/2016"])
def test_today_rejects_invalid_use_by_date(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    monkeypatch.setenv("RECIPE_FINDER_TODAY", value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_log_level_must_be_known(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RECIPE_FINDER_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
