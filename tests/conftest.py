"""Pytest fixtures for contract engine tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from datetime import date, datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from contract_engine.api.app import create_app
from contract_engine.api.dependencies import get_db_session, get_now
from contract_engine.models import Base
from contract_engine.services.draft import ContractDraft

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

FIXED_NOW = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


class FrozenClock:
    """Request clock that only moves when a test advances it."""

    def __init__(self, now: datetime):
        self.now = now

    def advance(self, **delta: float) -> datetime:
        self.now = self.now + timedelta(**delta)
        return self.now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def employer_id() -> UUID:
    return uuid4()


@pytest.fixture
def worker_id() -> UUID:
    return uuid4()


@pytest.fixture
def draft() -> ContractDraft:
    """A complete draft for a full-time cafe job."""
    return ContractDraft(
        employer_name="김사장",
        worker_name="이영희",
        hourly_wage=10_360,
        start_date=date(2026, 3, 2),
        work_days=("월", "화", "수", "목", "금"),
        work_start_time="09:00",
        work_end_time="18:00",
        break_minutes=60,
        work_location="서울시 강남구 테헤란로 123",
        business_name="테헤란 카페",
        job_description="홀 서빙 및 매장 관리",
    )


@pytest_asyncio.fixture
async def engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(FIXED_NOW)


@pytest_asyncio.fixture
async def client(session_factory, clock) -> AsyncGenerator[AsyncClient, None]:
    """API client backed by the in-memory database and the frozen clock."""
    app = create_app()

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_session
    app.dependency_overrides[get_now] = clock

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
