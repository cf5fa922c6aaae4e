"""Pytest configuration.

The repository uses a flat `src/` layout without an installed package. This conftest ensures tests
can import from the `src.*` namespace when running `pytest` locally, and provides the reference
moments most moment tests resolve against.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure `import src...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def morning() -> datetime:
    """Friday 1 March 2024, 08:00."""

    return datetime(2024, 3, 1, 8, 0, 0)


@pytest.fixture
def evening() -> datetime:
    """Friday 1 March 2024, 18:00."""

    return datetime(2024, 3, 1, 18, 0, 0)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep settings tests independent of the developer's environment and `.env` file."""

    for name in (
            "TIMEINPUT_LOCALE",
            "TIMEINPUT_SHORT_DATE_PATTERN",
            "TIMEINPUT_DAYTIME_BIAS",
            "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
