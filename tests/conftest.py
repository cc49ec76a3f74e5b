"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest_asyncio.fixture
async def blob_store():
    """Create in-memory SQLite blob store for testing."""
    from intracom.storage import SqliteBlobStore

    store = SqliteBlobStore(":memory:")
    await store.init()
    yield store
    await store.close()


@pytest.fixture
def file_blob_store(tmp_path):
    """Create a file blob store in a temp directory."""
    from intracom.storage import FileBlobStore

    return FileBlobStore(tmp_path / "intracom-state.json")


@pytest_asyncio.fixture
async def state_store(blob_store):
    """Create StateStore over the in-memory blob store."""
    from intracom.storage import StateStore

    store = StateStore(blob_store)
    await store.load()
    return store


@pytest.fixture
def gate(state_store):
    """Create AuthorizationGate."""
    from intracom.auth import AuthorizationGate

    return AuthorizationGate(state_store)


@pytest.fixture
def registry(state_store, gate):
    """Create AgentRegistry."""
    from intracom.registry import AgentRegistry

    return AgentRegistry(state_store, gate)


@pytest.fixture
def mailbox(state_store):
    """Create MailboxStore."""
    from intracom.mailbox import MailboxStore

    return MailboxStore(state_store)


@pytest.fixture
def dispatcher(state_store, registry, mailbox, gate):
    """Create Dispatcher wired to the shared state store."""
    from intracom.dispatcher import Dispatcher

    return Dispatcher(
        state_store=state_store,
        registry=registry,
        mailbox=mailbox,
        gate=gate,
    )


@pytest.fixture
def call(dispatcher):
    """Shortcut: await call("tool", arg=value)."""

    async def _call(name, **arguments):
        return await dispatcher.call(name, arguments)

    return _call
