# tests/conftest.py

from datetime import datetime, timezone

import pytest

from productivity_suite.core.dispatcher import Dispatcher
from productivity_suite.core.ids import CounterIdGenerator
from productivity_suite.core.registry import discover_tools
from productivity_suite.core.store import Workspace

FIXED_NOW = datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)


@pytest.fixture()
def workspace() -> Workspace:
    """Fresh stores per test with predictable ids ("1", "2", ...) and a pinned clock."""
    return Workspace(new_id=CounterIdGenerator(), clock=lambda: FIXED_NOW)


@pytest.fixture(scope="session")
def registry():
    return discover_tools()


@pytest.fixture()
def dispatcher(workspace, registry) -> Dispatcher:
    return Dispatcher(workspace, registry)


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"
