"""Global test configuration: shared fixtures.

This conftest provides:

1. **Settings-file factory**: ``write_settings`` writes TOML content to a
   per-test ``settings.toml`` under ``tmp_path`` and returns its path, so
   config and CLI tests never touch the real ``config/`` directory.

2. **Input-file factory**: ``write_input`` writes raw bytes to a per-test
   file for ``batch`` command tests, including deliberately invalid UTF-8.

3. **Logger isolation**: ``_restore_stderr_level`` resets the stderr
   handler after each test, since ``--verbose`` changes it globally.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from wpslugify.logging import handler

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def write_settings(tmp_path: Path) -> Callable[[str], Path]:
    """Factory fixture: returns a callable that writes a settings file.

    Usage::

        def test_something(write_settings):
            path = write_settings("[slug]\\nmax_words = 3\\n")
    """

    def _factory(content: str, name: str = "settings.toml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _factory


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[[bytes], Path]:
    """Factory fixture: returns a callable that writes raw bytes to an input file.

    Usage::

        def test_something(write_input):
            path = write_input("Hello World\\n".encode())
            bad = write_input(b"\\xff\\xfe", name="bad.txt")
    """

    def _factory(content: bytes, name: str = "titles.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _factory


@pytest.fixture(autouse=True)
def _restore_stderr_level() -> Iterator[None]:
    """Restore the stderr handler level after each test."""
    level = handler.level
    try:
        yield
    finally:
        handler.setLevel(level)
