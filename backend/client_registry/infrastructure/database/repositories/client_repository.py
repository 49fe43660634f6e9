"""Concrete repository implementation for Client backed by SQLAlchemy."""

import logging
from typing import Any, NoReturn

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from client_registry.application.interfaces import ClientRepository
from client_registry.domain.entities import Client
from client_registry.domain.exceptions import DuplicateEntityError
from client_registry.infrastructure.database.models import ClientModel

logger = logging.getLogger(__name__)

_UNIQUE_VIOLATION_SQLSTATE = "23505"
_SQLITE_UNIQUE_MESSAGE = "UNIQUE constraint failed"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Recognise a unique-constraint failure from PostgreSQL or SQLite drivers."""
    candidates = [exc.orig, getattr(exc.orig, "__cause__", None)]
    for error in candidates:
        if error is None:
            continue
        code = getattr(error, "sqlstate", None) or getattr(error, "pgcode", None)
        if code == _UNIQUE_VIOLATION_SQLSTATE:
            return True
        if _SQLITE_UNIQUE_MESSAGE in str(error):
            return True
    return False


class SQLAlchemyClientRepository(ClientRepository):
    """Implements the ClientRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ClientModel) -> Client:
        """Map ORM model → domain entity."""
        return Client(
            id=model.id,
            tax_id=model.tax_id,
            legal_name=model.legal_name,
            trade_name=model.trade_name,
            postal_code=model.postal_code,
            street=model.street,
            district=model.district,
            city=model.city,
            region=model.region,
            complement=model.complement,
            email=model.email,
            phone=model.phone,
        )

    def _to_model(self, entity: Client) -> ClientModel:
        """Map domain entity → ORM model (for creation)."""
        return ClientModel(
            tax_id=entity.tax_id,
            legal_name=entity.legal_name,
            trade_name=entity.trade_name,
            postal_code=entity.postal_code,
            street=entity.street,
            district=entity.district,
            city=entity.city,
            region=entity.region,
            complement=entity.complement,
            email=entity.email,
            phone=entity.phone,
        )

    async def _translate_integrity_error(self, exc: IntegrityError, tax_id: str) -> NoReturn:
        await self._session.rollback()
        if is_unique_violation(exc):
            logger.info("Rejected duplicate taxId=%s", tax_id)
            raise DuplicateEntityError("Client", "taxId", tax_id) from exc
        raise exc

    async def get_by_id(self, client_id: int) -> Client | None:
        result = await self._session.get(ClientModel, client_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Client]:
        result = await self._session.execute(select(ClientModel).order_by(ClientModel.id))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, client: Client) -> Client:
        model = self._to_model(client)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._translate_integrity_error(exc, client.tax_id)
        return self._to_entity(model)

    async def update(self, client_id: int, changes: dict[str, Any]) -> Client | None:
        stmt = (
            update(ClientModel)
            .where(ClientModel.id == client_id)
            .values(**changes)
            .returning(ClientModel)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as exc:
            await self._translate_integrity_error(exc, changes.get("tax_id") or "")
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def delete(self, client_id: int) -> bool:
        stmt = delete(ClientModel).where(ClientModel.id == client_id).returning(ClientModel.id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None
