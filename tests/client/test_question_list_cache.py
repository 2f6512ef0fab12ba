from __future__ import annotations

import pytest

from app.client.cache import QuestionListCache
from app.client.errors import QuestionsApiError
from tests.game.quiz_fixtures import _pool


class _Fetcher:
    def __init__(self) -> None:
        self.calls = 0
        self.pool = _pool(2)
        self.error: Exception | None = None

    async def __call__(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.pool)


@pytest.mark.asyncio
async def test_get_fetches_once_and_reuses_snapshot() -> None:
    fetcher = _Fetcher()
    cache = QuestionListCache(fetcher)

    assert cache.is_loaded is False
    assert cache.snapshot == ()
    first = await cache.get()
    second = await cache.get()

    assert first == second
    assert fetcher.calls == 1
    assert cache.is_loaded is True


@pytest.mark.asyncio
async def test_invalidate_forces_next_get_to_refetch() -> None:
    fetcher = _Fetcher()
    cache = QuestionListCache(fetcher)
    await cache.get()

    fetcher.pool = _pool(3)
    cache.invalidate()
    refreshed = await cache.get()

    assert fetcher.calls == 2
    assert len(refreshed) == 3


@pytest.mark.asyncio
async def test_failed_refresh_keeps_previous_snapshot() -> None:
    fetcher = _Fetcher()
    cache = QuestionListCache(fetcher)
    before = await cache.get()

    fetcher.error = QuestionsApiError("Failed to fetch questions", status_code=500)
    with pytest.raises(QuestionsApiError):
        await cache.refresh()

    assert cache.snapshot == before
