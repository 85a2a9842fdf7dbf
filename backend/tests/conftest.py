"""Root conftest — shared test configuration, async DB and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - seed_data inserts three users and seven task items with fixed identifiers

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for service and route tests
    - Environment set before the app is imported so Settings never sees a real DATABASE_URL
"""

import os

# Ensure tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

from dataclasses import dataclass  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from taskhub.core.domain_types import TaskItemStatus  # noqa: E402
from taskhub.db.base import Base  # noqa: E402
from taskhub.infrastructure.database import get_db  # noqa: E402
from taskhub.main import app  # noqa: E402
from taskhub.models.task_item import TaskItem  # noqa: E402
from taskhub.models.user import User  # noqa: E402

ALICE = "f47ac10b-58cc-4372-a567-0e02b2c3d479"
FRODO = "c9bf9e57-1685-4c89-bafb-ff5af830be8a"
CHARLIE = "7c9e6679-7425-40de-944b-e07fc1f90ae7"

ALICE_TASK_1 = "86c53f64-6f9a-40c9-acce-766c8a88ae35"
ALICE_TASK_2 = "e1d82661-3c50-4ba2-9c77-5521df64a6f8"
FRODO_TASK_A = "7e09726a-6037-432e-941e-80cf3fa93137"


@dataclass
class SeedData:
    alice: User
    frodo: User
    charlie: User
    alice_task: str = ALICE_TASK_1
    alice_other_task: str = ALICE_TASK_2
    frodo_task: str = FRODO_TASK_A


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_data(test_session_factory) -> SeedData:
    """Insert the demo users and task items, in a session of their own."""
    async with test_session_factory() as session:
        alice = User(identifier=ALICE, email="alice.borderland@testmail.com")
        frodo = User(identifier=FRODO, email="frodo.smith@testmail.com")
        charlie = User(identifier=CHARLIE, email="charlie.shane@testmail.com")
        session.add_all([alice, frodo, charlie])
        await session.flush()

        session.add_all([
            TaskItem(
                identifier=ALICE_TASK_1, user_id=alice.id, name="Task 1.1",
                description="", task_item_status=TaskItemStatus.PENDING,
            ),
            TaskItem(
                identifier=ALICE_TASK_2, user_id=alice.id, name="Task 1.2",
                description="", task_item_status=TaskItemStatus.IN_PROGRESS,
            ),
            TaskItem(
                identifier="3311ff50-45f5-43a3-8a8b-0e9b6cbaf45f",
                user_id=alice.id, name="Task 1.3",
                description="", task_item_status=TaskItemStatus.COMPLETED,
            ),
            TaskItem(
                identifier="554fa5ed-5c60-4c01-985b-1292fcfd9cdd",
                user_id=alice.id, name="Task 1.4",
                description="Task 1.4 Cancelled..",
                task_item_status=TaskItemStatus.CANCELLED,
            ),
            TaskItem(
                identifier=FRODO_TASK_A, user_id=frodo.id, name="Task A (001)",
                description="Completed Before Time",
                task_item_status=TaskItemStatus.COMPLETED,
            ),
            TaskItem(
                identifier="687f5642-57db-4bdf-a8cf-12c7d441c7b7",
                user_id=frodo.id, name="Task B (001)",
                description="", task_item_status=TaskItemStatus.CANCELLED,
            ),
            TaskItem(
                identifier="19ae216c-fbb7-4c56-b6da-aab9bbb58830",
                user_id=frodo.id, name="Task B (002)",
                description="", task_item_status=TaskItemStatus.CANCELLED,
            ),
        ])
        await session.commit()
        return SeedData(alice=alice, frodo=frodo, charlie=charlie)


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
