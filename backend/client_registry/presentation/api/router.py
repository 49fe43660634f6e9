"""Top-level API router: aggregates the endpoint routers."""

from fastapi import APIRouter

from client_registry.presentation.api.endpoints.clients import router as clients_router
from client_registry.presentation.api.endpoints.health import router as health_router

router = APIRouter()
router.include_router(health_router)
router.include_router(clients_router)
