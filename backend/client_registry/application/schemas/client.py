"""Pydantic DTOs (Data Transfer Objects) for the Client feature.

These models are the single rule set for a client record: the API validates
request bodies with them and the form controller re-runs them before
submitting. JSON uses camelCase names (``taxId``, ``legalName``...).
"""

from collections.abc import Iterable, Mapping
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    ValidationError,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from client_registry.domain.cnpj import CNPJ_LENGTH, is_digits, is_valid_cnpj, strip_formatting
from client_registry.domain.exceptions import RecordValidationError

POSTAL_CODE_LENGTH = 8
PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 15
STREET_MAX_LENGTH = 10
TEXT_MAX_LENGTH = 100


# ── Normalisers ──────────────────────────────────────────────────────


def _blank_to_none(value: Any) -> Any:
    """Trim strings and treat the empty string as an absent value."""
    if isinstance(value, str):
        return value.strip() or None
    return value


def _clean_digits(value: Any) -> Any:
    """Strip formatting punctuation from digit-only fields, then blank → None."""
    if isinstance(value, str):
        return strip_formatting(value) or None
    return value


def _fail(message: str) -> PydanticCustomError:
    return PydanticCustomError("client_field", message)


# ── Field rules ──────────────────────────────────────────────────────


def _check_tax_id(value: str | None) -> str:
    if value is None:
        raise _fail("Tax id is required")
    if len(value) != CNPJ_LENGTH:
        raise _fail("Tax id must have 14 digits")
    if not is_digits(value):
        raise _fail("Tax id must contain only digits")
    if not is_valid_cnpj(value):
        raise _fail("Tax id is invalid (check digits do not match)")
    return value


def _check_legal_name(value: str | None) -> str:
    if value is None:
        raise _fail("Legal name is required")
    if len(value) > TEXT_MAX_LENGTH:
        raise _fail(f"Legal name must have at most {TEXT_MAX_LENGTH} characters")
    return value


def _max_length(label: str, limit: int):
    def check(value: str | None) -> str | None:
        if value is not None and len(value) > limit:
            raise _fail(f"{label} must have at most {limit} characters")
        return value

    return check


def _check_postal_code(value: str | None) -> str | None:
    if value is None:
        return value
    if not is_digits(value):
        raise _fail("Postal code must contain only digits")
    if len(value) != POSTAL_CODE_LENGTH:
        raise _fail("Postal code must have 8 digits")
    return value


def _check_region(value: str | None) -> str | None:
    if value is None:
        return value
    if len(value) != 2:
        raise _fail("Region must have 2 characters")
    if not (value.isascii() and value.isalpha() and value.isupper()):
        raise _fail("Region must be 2 uppercase letters (e.g. SP)")
    return value


def _check_phone(value: str | None) -> str | None:
    if value is None:
        return value
    if not is_digits(value):
        raise _fail("Phone must contain only digits")
    if len(value) < PHONE_MIN_DIGITS:
        raise _fail(f"Phone must have at least {PHONE_MIN_DIGITS} digits")
    if len(value) > PHONE_MAX_DIGITS:
        raise _fail(f"Phone must have at most {PHONE_MAX_DIGITS} digits")
    return value


def _text(label: str, limit: int = TEXT_MAX_LENGTH) -> Any:
    return Annotated[
        str | None,
        BeforeValidator(_blank_to_none),
        AfterValidator(_max_length(label, limit)),
    ]


TaxId = Annotated[str | None, BeforeValidator(_clean_digits), AfterValidator(_check_tax_id)]
LegalName = Annotated[
    str | None, BeforeValidator(_blank_to_none), AfterValidator(_check_legal_name)
]
PostalCode = Annotated[
    str | None, BeforeValidator(_clean_digits), AfterValidator(_check_postal_code)
]
Region = Annotated[str | None, BeforeValidator(_blank_to_none), AfterValidator(_check_region)]
Email = Annotated[
    EmailStr | None,
    BeforeValidator(_blank_to_none),
    AfterValidator(_max_length("Email", TEXT_MAX_LENGTH)),
]
Phone = Annotated[str | None, BeforeValidator(_clean_digits), AfterValidator(_check_phone)]
TradeName = _text("Trade name")
Street = _text("Street", STREET_MAX_LENGTH)
District = _text("District")
City = _text("City")
Complement = _text("Complement")


# ── Request / response models ────────────────────────────────────────


class _ClientPayload(BaseModel):
    """Optional fields shared by create and update payloads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    trade_name: TradeName = None
    postal_code: PostalCode = None
    street: Street = None
    district: District = None
    city: City = None
    region: Region = None
    complement: Complement = None
    email: Email = None
    phone: Phone = None


class ClientCreate(_ClientPayload):
    """Schema for creating a client: tax id and legal name are required."""

    tax_id: TaxId = Field(None, validate_default=True, examples=["11222333000181"])
    legal_name: LegalName = Field(None, validate_default=True, examples=["Acme Ltda"])

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump()


class ClientUpdate(_ClientPayload):
    """Schema for updating a client: only the fields present are validated and applied.

    An optional field sent as ``""`` or ``null`` is cleared. The required
    fields cannot be cleared.
    """

    tax_id: TaxId = None
    legal_name: LegalName = None

    def to_fields(self) -> dict[str, Any]:
        """Changes keyed by attribute name, limited to the fields the caller sent."""
        return self.model_dump(include=self.model_fields_set)


class ClientResponse(BaseModel):
    """Schema returned to the client."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
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


class DeleteConfirmation(BaseModel):
    message: str


# ── Error collection ─────────────────────────────────────────────────

_LOCATION_PREFIXES = frozenset({"body", "path", "query"})

# Missing or defaulted fields are located by attribute name, sent ones by alias
_JSON_NAMES: dict[str, str] = {
    name: info.alias or to_camel(name) for name, info in ClientCreate.model_fields.items()
}


def field_errors(errors: Iterable[Mapping[str, Any]]) -> dict[str, str]:
    """Collapse pydantic error dicts into ``{field: message}``.

    Client fields are keyed by their JSON name. The first error reported
    for a field wins; later ones are dropped. Errors not tied to a field
    (e.g. a body that is not an object) are reported under ``"body"``.
    """
    issues: dict[str, str] = {}
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in _LOCATION_PREFIXES and len(loc) > 1:
            loc = loc[1:]
        field = str(loc[0]) if loc else "body"
        field = _JSON_NAMES.get(field, field)
        issues.setdefault(field, str(error.get("msg", "Invalid value")))
    return issues


def validate_client_payload(
    raw: Mapping[str, Any], *, partial: bool = False
) -> ClientCreate | ClientUpdate:
    """Validate a raw camelCase mapping in creation or update mode.

    Raises:
        RecordValidationError: with every invalid field and its first message.
    """
    model = ClientUpdate if partial else ClientCreate
    try:
        return model.model_validate(dict(raw))
    except ValidationError as exc:
        raise RecordValidationError(field_errors(exc.errors())) from exc
