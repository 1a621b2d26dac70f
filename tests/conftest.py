from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from goat.config.paths import reset_paths


@pytest.fixture(autouse=True)
def isolate_state_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Keep debug logs out of the real XDG state directory."""
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    reset_paths()
    try:
        yield
    finally:
        reset_paths()


@pytest.fixture
def anyio_backend() -> str:
    """Textual runs on asyncio only."""
    return "asyncio"
