"""FastAPI dependencies for dependency injection."""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from contract_engine.config import get_settings
from contract_engine.database import init_db
from contract_engine.services.contract_service import ContractService


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    _, factory = init_db()
    async with factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def get_user_id(
    x_user_id: Annotated[str | None, Header()] = None
) -> UUID:
    """Extract the acting user ID from header."""
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-User-ID header is required",
        )
    try:
        return UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid X-User-ID format",
        )


def get_now() -> datetime:
    """Current time for the request. The only place the clock is read."""
    return datetime.now(timezone.utc)


async def get_contract_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ContractService:
    return ContractService(db, grace_period_days=get_settings().edit_grace_period_days)


# Type aliases for cleaner dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db_session)]
UserId = Annotated[UUID, Depends(get_user_id)]
Now = Annotated[datetime, Depends(get_now)]
Contracts = Annotated[ContractService, Depends(get_contract_service)]
