import os, sys
import importlib
import logging

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from bowling_tracker import config


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(value):
        if value is None:
            monkeypatch.delenv("BOWLING_VALIDATE_ROLLS", raising=False)
        else:
            monkeypatch.setenv("BOWLING_VALIDATE_ROLLS", value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.delenv("BOWLING_VALIDATE_ROLLS", raising=False)
    importlib.reload(config)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, False),
        ("", False),
        ("1", True),
        ("true", True),
        (" Yes ", True),
        ("on", True),
        ("0", False),
        ("FALSE", False),
        ("off", False),
    ],
)
def test_validate_rolls_flag(reload_config, value, expected):
    assert reload_config(value).VALIDATE_ROLLS is expected


def test_invalid_flag_warns_and_defaults(reload_config, caplog):
    with caplog.at_level(logging.WARNING, logger="bowling_tracker.config"):
        cfg = reload_config("maybe")
    assert cfg.VALIDATE_ROLLS is False
    assert "BOWLING_VALIDATE_ROLLS is not a valid boolean" in caplog.text


def test_pin_constants():
    assert config.MAX_SCORED_FRAMES == 10
    assert config.ALL_PINS == 10
