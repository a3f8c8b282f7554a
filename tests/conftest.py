# ==============================================================================
# CONFTEST - Pytest Fixtures
# ==============================================================================

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from result_core import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> Iterator[None]:
    """Reload settings for every test, starting from a clean environment."""
    # .env 는 현재 디렉터리에서 읽히므로 빈 임시 디렉터리에서 실행한다.
    # Settings read .env from the cwd; run from an empty directory.
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RESULT_CORE_TRACE_CAPTURES", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
