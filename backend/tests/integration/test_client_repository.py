"""Integration tests for SQLAlchemyClientRepository on SQLite."""

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine

from client_registry.domain.entities import Client
from client_registry.domain.exceptions import DuplicateEntityError
from client_registry.infrastructure.database import build_session_factory
from client_registry.infrastructure.database.repositories import SQLAlchemyClientRepository


def _client(tax_id: str = "11222333000181", **extra) -> Client:
    return Client(tax_id=tax_id, legal_name="Acme Ltda", **extra)


@pytest.mark.asyncio
async def test_create_assigns_id_and_lists(engine: AsyncEngine):
    async with build_session_factory(engine)() as session:
        repo = SQLAlchemyClientRepository(session)
        first = await repo.create(_client(city="Campinas"))
        second = await repo.create(_client("11222333000262"))
        await session.commit()

        clients = await repo.get_all()

    assert first.id is not None and second.id is not None
    assert first.id != second.id
    assert [c.tax_id for c in clients] == ["11222333000181", "11222333000262"]
    assert clients[0].city == "Campinas"


@pytest.mark.asyncio
async def test_duplicate_tax_id_raises_domain_error(engine: AsyncEngine):
    factory = build_session_factory(engine)
    async with factory() as session:
        await SQLAlchemyClientRepository(session).create(_client())
        await session.commit()

    async with factory() as session:
        with pytest.raises(DuplicateEntityError) as exc_info:
            await SQLAlchemyClientRepository(session).create(_client())
    assert exc_info.value.value == "11222333000181"

    async with factory() as session:
        clients = await SQLAlchemyClientRepository(session).get_all()
    assert len(clients) == 1


@pytest.mark.asyncio
async def test_update_applies_only_given_changes(engine: AsyncEngine):
    async with build_session_factory(engine)() as session:
        repo = SQLAlchemyClientRepository(session)
        created = await repo.create(_client(city="Campinas", region="SP"))
        await session.commit()

        updated = await repo.update(created.id, {"trade_name": "Acme", "region": None})
        await session.commit()

    assert updated is not None
    assert updated.trade_name == "Acme"
    assert updated.region is None
    assert updated.city == "Campinas"
    assert updated.legal_name == "Acme Ltda"


@pytest.mark.asyncio
async def test_update_to_existing_tax_id_is_a_conflict(engine: AsyncEngine):
    factory = build_session_factory(engine)
    async with factory() as session:
        repo = SQLAlchemyClientRepository(session)
        await repo.create(_client())
        other = await repo.create(_client("11222333000262"))
        await session.commit()

    async with factory() as session:
        with pytest.raises(DuplicateEntityError):
            await SQLAlchemyClientRepository(session).update(
                other.id, {"tax_id": "11222333000181"}
            )


@pytest.mark.asyncio
async def test_update_and_delete_missing_rows(engine: AsyncEngine):
    async with build_session_factory(engine)() as session:
        repo = SQLAlchemyClientRepository(session)
        assert await repo.update(404, {"trade_name": "x"}) is None
        assert await repo.delete(404) is False
        assert await repo.get_by_id(404) is None


@pytest.mark.asyncio
async def test_delete_removes_row(engine: AsyncEngine):
    factory = build_session_factory(engine)
    async with factory() as session:
        repo = SQLAlchemyClientRepository(session)
        created = await repo.create(_client())
        await session.commit()

        assert await repo.delete(created.id) is True
        await session.commit()

    async with factory() as session:
        assert await SQLAlchemyClientRepository(session).get_by_id(created.id) is None
