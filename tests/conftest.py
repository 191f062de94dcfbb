"""Shared fixtures: build route trees on disk."""

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

WriteRoutes: TypeAlias = Callable[[dict[str, str]], Path]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def write_routes(tmp_path: Path) -> WriteRoutes:
    """Write ``{relative path: source}`` under ``tmp_path / "routes"``.

    Returns the routes directory.
    """

    def _write(files: dict[str, str]) -> Path:
        root = tmp_path / "routes"
        root.mkdir(exist_ok=True)
        for relative, source in files.items():
            file = root / relative
            file.parent.mkdir(parents=True, exist_ok=True)
            file.write_text(source, encoding="utf-8")
        return root

    return _write
