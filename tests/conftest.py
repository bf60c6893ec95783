"""
Shared fixtures.

The app is exercised through httpx's ASGITransport, which skips the
lifespan, so no pool is ever opened. `fake_db` replaces `core.db.fetch_one`
and `core.db.fetch_all` with a scripted stand-in.
"""

from __future__ import annotations

import os
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("LOG_LEVEL", "WARNING")

from core import db  # noqa: E402


class FakeDB:
    """
    Records every (sql, args) call and answers with queued results in order.

    A queued exception instance is raised instead of returned. With nothing
    queued, fetch_one answers None and fetch_all answers [].
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._results: list[Any] = []

    def queue(self, *results: Any) -> None:
        self._results.extend(results)

    def _next(self) -> Any:
        if not self._results:
            return None
        result = self._results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        self.calls.append((sql, args))
        return self._next()

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self.calls.append((sql, args))
        result = self._next()
        return [] if result is None else result

    @property
    def last_sql(self) -> str:
        return " ".join(self.calls[-1][0].split())

    @property
    def last_args(self) -> tuple[Any, ...]:
        return self.calls[-1][1]


@pytest.fixture
def fake_db(monkeypatch) -> FakeDB:
    fake = FakeDB()
    monkeypatch.setattr(db, "fetch_one", fake.fetch_one)
    monkeypatch.setattr(db, "fetch_all", fake.fetch_all)
    return fake


@pytest_asyncio.fixture
async def client():
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
