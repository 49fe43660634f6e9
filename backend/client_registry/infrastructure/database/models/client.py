"""SQLAlchemy ORM model for the Client entity."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from client_registry.infrastructure.database.base import Base


class ClientModel(Base):
    """ORM model: maps to the 'clients' table."""

    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tax_id: Mapped[str] = mapped_column(String(14), nullable=False, unique=True)
    legal_name: Mapped[str] = mapped_column(String(100), nullable=False)
    trade_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    postal_code: Mapped[str | None] = mapped_column(String(8), nullable=True)
    street: Mapped[str | None] = mapped_column(String(10), nullable=True)
    district: Mapped[str | None] = mapped_column(String(100), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    region: Mapped[str | None] = mapped_column(String(2), nullable=True)
    complement: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(15), nullable=True)

    def __repr__(self) -> str:
        return f"<ClientModel(id={self.id}, tax_id='{self.tax_id}')>"
