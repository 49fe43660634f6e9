from .brasil_api_company_lookup import BrasilApiCompanyLookup
from .via_cep_address_lookup import ViaCepAddressLookup

__all__ = [
    "BrasilApiCompanyLookup",
    "ViaCepAddressLookup",
]
