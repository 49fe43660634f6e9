from .base import Base
from .session import build_engine, build_session_factory, get_async_url, get_db_session
from .models import ClientModel

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "get_async_url",
    "get_db_session",
    "ClientModel",
]
