import io
import logging

import pytest

from scramble.settings import Settings


def test_defaults() -> None:
    settings = Settings()

    assert settings["app_name"] == "Hyperspeedcube"
    assert settings.log_level() == logging.WARNING


def test_read_yaml_overrides() -> None:
    settings = Settings()

    settings.read_yaml(io.StringIO("app_name: Cubes\nlog_level: debug\n"))

    assert settings["app_name"] == "Cubes"
    assert settings.log_level() == logging.DEBUG


def test_read_yaml_ignores_unknown_keys() -> None:
    settings = Settings()

    settings.read_yaml(io.StringIO("colour: blue\n"))

    assert settings["colour"] is None
    assert "colour" not in settings.dump_yaml()


def test_empty_yaml_keeps_defaults() -> None:
    settings = Settings()

    settings.read_yaml(io.StringIO(""))

    assert settings["app_name"] == "Hyperspeedcube"


def test_non_table_yaml_rejected() -> None:
    with pytest.raises(ValueError):
        Settings().read_yaml(io.StringIO("- a\n- b\n"))


def test_bad_log_level() -> None:
    settings = Settings()
    settings["log_level"] = "LOUD"

    with pytest.raises(ValueError):
        settings.log_level()
