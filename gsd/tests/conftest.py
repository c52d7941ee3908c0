"""Shared test fixtures for the GSD dispatcher test suite."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture
def gsd_root(tmp_path: Path) -> Path:
    """Return an empty GSD root directory."""
    root = tmp_path / "gsd-root"
    root.mkdir()
    return root


@pytest.fixture
def write_doc(gsd_root: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes a document under gsd_root.

    Content is stored as UTF-8 bytes with line endings untouched.
    """

    def _write(relative: str, content: str) -> Path:
        path = gsd_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write

