from .client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    DeleteConfirmation,
    field_errors,
    validate_client_payload,
)

__all__ = [
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "DeleteConfirmation",
    "field_errors",
    "validate_client_payload",
]
