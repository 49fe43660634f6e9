from .client import Client
from .lookup import CompanyProfile, PostalAddress

__all__ = [
    "Client",
    "CompanyProfile",
    "PostalAddress",
]
