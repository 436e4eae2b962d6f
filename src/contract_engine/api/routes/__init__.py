"""API routes."""

from contract_engine.api.routes.careers import router as careers_router
from contract_engine.api.routes.contracts import router as contracts_router
from contract_engine.api.routes.health import router as health_router
from contract_engine.api.routes.wages import router as wages_router

__all__ = ["careers_router", "contracts_router", "health_router", "wages_router"]
