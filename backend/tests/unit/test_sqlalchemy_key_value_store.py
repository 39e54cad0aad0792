"""Unit tests for the SQLAlchemy-backed key/value store on in-memory SQLite."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.infrastructure.database.base import Base
from app.infrastructure.database.models import StorageItemModel  # noqa: F401
from app.infrastructure.database.repositories import SQLAlchemyKeyValueStore
from app.infrastructure.storage.repositories import StoredUserRepository


async def _session_factory():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return engine, async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.mark.asyncio
async def test_set_and_get_item():
    engine, factory = await _session_factory()
    try:
        async with factory() as session:
            store = SQLAlchemyKeyValueStore(session)

            assert await store.get_item("hawk_users") is None
            await store.set_item("hawk_users", "[]")
            await store.set_item("hawk_users", '[{"id": "u"}]')
            assert await store.get_item("hawk_users") == '[{"id": "u"}]'
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_collections_survive_a_new_session():
    engine, factory = await _session_factory()
    try:
        async with factory() as session:
            users = StoredUserRepository(SQLAlchemyKeyValueStore(session))
            user = await users.get_by_id("user-1")
            user.phone = "+1 555 0000"
            await users.update(user)
            await session.commit()

        async with factory() as session:
            users = StoredUserRepository(SQLAlchemyKeyValueStore(session))
            assert (await users.get_by_id("user-1")).phone == "+1 555 0000"
    finally:
        await engine.dispose()
