"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from contract_engine.api.routes import (
    careers_router,
    contracts_router,
    health_router,
    wages_router,
)
from contract_engine.calculators.rate_tables import UnknownRateYearError
from contract_engine.database import create_tables, dispose_db, init_db
from contract_engine.services.contract_service import (
    ContractNotFoundError,
    NotContractPartyError,
)
from contract_engine.services.editability import EditWindowClosedError
from contract_engine.services.state_machine import (
    AlreadyFinalizedError,
    InvalidTransitionError,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    engine, _ = init_db()
    await create_tables(engine)
    yield
    await dispose_db()


def _error(status_code: int, detail: str, code: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail, "code": code})


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain errors onto HTTP responses."""

    @app.exception_handler(ContractNotFoundError)
    async def not_found_handler(request: Request, exc: ContractNotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc), "CONTRACT_NOT_FOUND")

    @app.exception_handler(NotContractPartyError)
    async def party_handler(request: Request, exc: NotContractPartyError) -> JSONResponse:
        return _error(status.HTTP_403_FORBIDDEN, str(exc), "NOT_CONTRACT_PARTY")

    @app.exception_handler(UnknownRateYearError)
    async def rate_year_handler(request: Request, exc: UnknownRateYearError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc), "UNKNOWN_RATE_YEAR")

    @app.exception_handler(InvalidTransitionError)
    async def transition_handler(request: Request, exc: InvalidTransitionError) -> JSONResponse:
        code = (
            "ALREADY_FINALIZED"
            if isinstance(exc, AlreadyFinalizedError)
            else "INVALID_TRANSITION"
        )
        return _error(status.HTTP_409_CONFLICT, str(exc), code)

    @app.exception_handler(EditWindowClosedError)
    async def edit_window_handler(request: Request, exc: EditWindowClosedError) -> JSONResponse:
        return _error(status.HTTP_423_LOCKED, str(exc), "EDIT_WINDOW_CLOSED")

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc), "INVALID_INPUT")

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
            "INTERNAL_ERROR",
        )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Labor Contract Engine API",
        description="Wage compliance and contract lifecycle",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(wages_router, prefix="/api/v1")
    app.include_router(contracts_router, prefix="/api/v1")
    app.include_router(careers_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
