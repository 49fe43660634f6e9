from .client_repository import ClientRepository
from .company_lookup import CompanyLookup
from .address_lookup import AddressLookup

__all__ = [
    "ClientRepository",
    "CompanyLookup",
    "AddressLookup",
]
