"""Client form controller: the form tier's state and behaviour.

Holds the raw field values typed by the user, re-validates them with the
same schema the API enforces, pre-fills fields from the CNPJ and CEP lookups,
and submits through :class:`ClientsApiClient`. Local validation only gives
early feedback; the API re-validates everything.
"""

import logging

from client_registry.application.interfaces import AddressLookup, CompanyLookup
from client_registry.application.schemas.client import (
    POSTAL_CODE_LENGTH,
    STREET_MAX_LENGTH,
    ClientResponse,
    validate_client_payload,
)
from client_registry.domain.cnpj import CNPJ_LENGTH, only_digits
from client_registry.domain.exceptions import RecordValidationError
from client_registry.presentation.form.api_client import ClientsApiClient, ClientsApiError

logger = logging.getLogger(__name__)

FORM_FIELDS: tuple[str, ...] = (
    "taxId",
    "legalName",
    "tradeName",
    "email",
    "phone",
    "postalCode",
    "street",
    "district",
    "city",
    "region",
    "complement",
)


def _empty_form() -> dict[str, str]:
    return {name: "" for name in FORM_FIELDS}


def _street(value: str | None) -> str | None:
    return value[:STREET_MAX_LENGTH] if value else None


class ClientFormController:
    """Create/edit form for a single client.

    Usage:
        form = ClientFormController(api, BrasilApiCompanyLookup(), ViaCepAddressLookup())
        form.change("taxId", "11.222.333/0001-81")
        await form.on_tax_id_blur()
        saved = await form.submit()
    """

    def __init__(
        self,
        api: ClientsApiClient,
        company_lookup: CompanyLookup,
        address_lookup: AddressLookup,
    ):
        self._api = api
        self._company_lookup = company_lookup
        self._address_lookup = address_lookup
        self.values: dict[str, str] = _empty_form()
        self.errors: dict[str, str] = {}
        self.submit_error: str | None = None
        self.editing: ClientResponse | None = None

    @property
    def is_editing(self) -> bool:
        return self.editing is not None

    def load(self, client: ClientResponse | None = None) -> None:
        """Reset the form, optionally filling it with an existing client for editing."""
        self.editing = client
        self.values = _empty_form()
        if client is not None:
            stored = client.model_dump(by_alias=True)
            for name in FORM_FIELDS:
                self.values[name] = stored.get(name) or ""
        self.errors = {}
        self.submit_error = None

    def change(self, field: str, value: str) -> None:
        """Record user input for *field* and clear its pending error."""
        if field not in self.values:
            raise KeyError(f"Unknown form field: {field}")
        if field == "taxId" and self.is_editing:
            return
        self.values[field] = value
        self.errors.pop(field, None)

    # ── Lookups ─────────────────────────────────────────────────────

    async def on_tax_id_blur(self) -> bool:
        """Pre-fill company fields from the CNPJ registry.

        Runs only for a new client with exactly 14 digits typed. Each field
        keeps its current value when the lookup has nothing for it. Returns
        True when lookup data was applied.
        """
        tax_id = only_digits(self.values["taxId"])
        if self.is_editing or len(tax_id) != CNPJ_LENGTH:
            return False

        company = await self._company_lookup.find_company(tax_id)
        if company is None:
            return False

        self._fill(
            legalName=company.legal_name,
            tradeName=company.trade_name,
            street=_street(company.street),
            district=company.district,
            city=company.city,
            region=company.region,
            postalCode=only_digits(company.postal_code) or None,
            complement=company.complement,
            email=company.email,
            phone=only_digits(company.phone) or None,
        )
        return True

    async def on_postal_code_blur(self) -> bool:
        """Pre-fill address fields from the CEP service when 8 digits are typed."""
        postal_code = only_digits(self.values["postalCode"])
        if len(postal_code) != POSTAL_CODE_LENGTH:
            return False

        address = await self._address_lookup.find_address(postal_code)
        if address is None:
            return False

        self._fill(
            street=_street(address.street),
            district=address.district,
            city=address.city,
            region=address.region,
            complement=address.complement,
        )
        return True

    def _fill(self, **found: str | None) -> None:
        for name, value in found.items():
            if value:
                self.values[name] = value
                self.errors.pop(name, None)

    # ── Validation & submission ─────────────────────────────────────

    def _payload(self) -> dict[str, str]:
        if self.is_editing:
            return {k: v for k, v in self.values.items() if k != "taxId"}
        return dict(self.values)

    def validate(self) -> bool:
        """Run the shared schema over the current values; fills ``errors``."""
        self.errors = {}
        try:
            validate_client_payload(self._payload(), partial=self.is_editing)
        except RecordValidationError as exc:
            self.errors = dict(exc.issues)
            return False
        return True

    async def submit(self) -> ClientResponse | None:
        """Validate locally, then create or update through the API.

        Returns the saved client, or None when local validation failed.
        API rejections are recorded on the form and re-raised.
        """
        self.submit_error = None
        self.errors = {}
        try:
            data = validate_client_payload(self._payload(), partial=self.is_editing)
        except RecordValidationError as exc:
            self.errors = dict(exc.issues)
            return None

        payload = data.model_dump(by_alias=True, include=data.model_fields_set or None)
        try:
            if self.editing is not None:
                saved = await self._api.update_client(self.editing.id, payload)
            else:
                saved = await self._api.create_client(payload)
        except ClientsApiError as exc:
            self.errors.update(exc.issues)
            self.submit_error = exc.message
            logger.info("Client submission rejected: %s", exc)
            raise

        self.load(saved)
        return saved
