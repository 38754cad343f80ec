"""Unit tests for DefaultHeaderRepository and catalog seeding."""

from contextlib import asynccontextmanager

import pytest

from webman.domain.services import DEFAULT_HEADERS
from webman.infrastructure.persistence.database import _seed_default_headers
from webman.infrastructure.persistence.repositories import DefaultHeaderRepository


class _SessionProvider:
    """Stands in for DatabaseManager, handing out the test session."""

    def __init__(self, session):
        self._session = session

    @asynccontextmanager
    async def session(self):
        yield self._session


@pytest.mark.asyncio
async def test_create_many_assigns_ids(db_session):
    repo = DefaultHeaderRepository(db_session)

    models = await repo.create_many(DEFAULT_HEADERS[:2])

    assert [m.name for m in models] == ["Accept", "Content-Type"]
    assert len({m.id for m in models}) == 2
    assert await repo.count() == 2


@pytest.mark.asyncio
async def test_seed_populates_empty_table(db_session):
    await _seed_default_headers(_SessionProvider(db_session))

    rows = await DefaultHeaderRepository(db_session).list_all()
    assert sorted(r.name for r in rows) == sorted(h.name for h in DEFAULT_HEADERS)


@pytest.mark.asyncio
async def test_seed_is_skipped_when_table_has_rows(db_session):
    provider = _SessionProvider(db_session)

    await _seed_default_headers(provider)
    await _seed_default_headers(provider)

    assert await DefaultHeaderRepository(db_session).count() == len(DEFAULT_HEADERS)
