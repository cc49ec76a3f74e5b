"""Application bootstrap and lifecycle management."""

from typing import Any, Protocol

from .auth import AuthorizationGate
from .config import PathLike, resolve_storage_path
from .dispatcher import Dispatcher
from .logging_config import get_logger
from .mailbox import MailboxStore
from .models import ToolResult
from .registry import AgentRegistry
from .storage import IBlobStore, StateStore, open_blob_store

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def call_tool(self, name: str, arguments: Any = None) -> ToolResult:
        """Dispatch one tool call."""
        ...

    def list_tools(self) -> list[dict]:
        """Definitions of all tools."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        storage_path: PathLike | None = None,
        blob_store: IBlobStore | None = None,
    ):
        self._storage_path = resolve_storage_path(storage_path)
        self._blob_store_override = blob_store

        # Components (will be initialized in start())
        self._blob_store: IBlobStore | None = None
        self._state_store: StateStore | None = None
        self._gate: AuthorizationGate | None = None
        self._registry: AgentRegistry | None = None
        self._mailbox: MailboxStore | None = None
        self._dispatcher: Dispatcher | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info(
            "Starting application",
            extra={"context": {"storage": str(self._storage_path)}},
        )

        # 1. Blob store (no dependencies)
        self._blob_store = self._blob_store_override or open_blob_store(
            self._storage_path
        )
        await self._blob_store.init()

        # 2. State store (depends on blob store)
        self._state_store = StateStore(self._blob_store)
        await self._state_store.load()

        # 3. Gate, registry, mailbox (share the state store)
        self._gate = AuthorizationGate(self._state_store)
        self._registry = AgentRegistry(self._state_store, self._gate)
        self._mailbox = MailboxStore(self._state_store)

        # 4. Dispatcher
        self._dispatcher = Dispatcher(
            state_store=self._state_store,
            registry=self._registry,
            mailbox=self._mailbox,
            gate=self._gate,
        )
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        self._dispatcher = None
        if self._blob_store:
            await self._blob_store.close()
            self._blob_store = None
            logger.info("Storage closed")

    async def call_tool(self, name: str, arguments: Any = None) -> ToolResult:
        """Dispatch one tool call."""
        return await self.dispatcher.call(name, arguments)

    def list_tools(self) -> list[dict]:
        """Definitions of all tools."""
        return self.dispatcher.list_tools()

    @property
    def dispatcher(self) -> Dispatcher:
        """Get dispatcher instance."""
        if not self._dispatcher:
            raise RuntimeError("Application not started")
        return self._dispatcher

    @property
    def state_store(self) -> StateStore:
        """Get state store instance."""
        if not self._state_store:
            raise RuntimeError("Application not started")
        return self._state_store
