import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from bowling_tracker import config  # noqa: E402


@pytest.fixture(autouse=True)
def default_validation(monkeypatch):
    """Keep engine states unvalidated unless a test opts in via config."""
    monkeypatch.setattr(config, "VALIDATE_ROLLS", False)
    yield
