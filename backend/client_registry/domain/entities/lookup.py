"""Domain value objects returned by the third-party lookups."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CompanyProfile:
    """Registry data for a CNPJ. Any field may be missing."""

    legal_name: str | None = None
    trade_name: str | None = None
    street: str | None = None
    district: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    complement: str | None = None
    email: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class PostalAddress:
    """Address data for a CEP (Brazilian postal code)."""

    street: str | None = None
    district: str | None = None
    city: str | None = None
    region: str | None = None
    complement: str | None = None
