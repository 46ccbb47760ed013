"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest
import structlog


def pytest_sessionstart() -> None:
    """Put src and the project root on sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    for import_root in (project_root / "src", project_root):
        if str(import_root) not in sys.path:
            sys.path.insert(0, str(import_root))


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Drop logging config bound to a previous test's captured stderr."""
    yield
    structlog.reset_defaults()
