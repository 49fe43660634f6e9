"""Domain entity: a registered client company."""

from dataclasses import dataclass


@dataclass
class Client:
    """A Brazilian legal entity identified by its CNPJ.

    Digit-only fields (``tax_id``, ``postal_code``, ``phone``) hold bare digits.
    Optional fields hold ``None`` rather than empty strings.
    """

    tax_id: str
    legal_name: str
    trade_name: str | None = None
    postal_code: str | None = None
    street: str | None = None
    district: str | None = None
    city: str | None = None
    region: str | None = None
    complement: str | None = None
    email: str | None = None
    phone: str | None = None
    id: int | None = None
