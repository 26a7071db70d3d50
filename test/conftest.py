"""
Pytest configuration and fixtures for Postline tests
"""

import os
import sys
from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

# Settings are read at import time, so configure them before importing the app
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("WEBAPP_URL", "http://localhost:5002")
os.environ.setdefault("LOG_JSON", "false")

import postline.models  # noqa: E402, F401
from postline.constants.roles import Roles  # noqa: E402
from postline.database import Base  # noqa: E402
from postline.graphql.context import GraphQLContext  # noqa: E402
from postline.graphql.schema import schema  # noqa: E402


@pytest.fixture(scope="function")
async def test_engine(tmp_path):
    """
    A fresh SQLite database file per test.

    A file (rather than :memory:) lets the worker open its own sessions
    alongside the test's session, as it does in production.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="function")
async def test_db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def caller():
    """Identity the GraphQL helpers run as; tests mutate it."""
    return {"user_id": None, "roles": []}


@pytest.fixture
def as_moderator(caller):
    caller["user_id"] = "1"
    caller["roles"] = [Roles.MODERATOR]
    return caller


@pytest.fixture
def execute_graphql(test_db, caller):
    """Run an operation through the schema with a context built from ``caller``."""

    async def _execute(query: str, variables: dict | None = None):
        context = GraphQLContext(db=test_db, user_id=caller["user_id"], roles=caller["roles"])
        return await schema.execute(query, variable_values=variables, context_value=context)

    return _execute
