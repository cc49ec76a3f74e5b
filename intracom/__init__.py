"""IntraCom agent bus."""

from .app import Application, IApplication
from .auth import AuthorizationGate, IAuthorizationGate, hash_token
from .dispatcher import Dispatcher, IDispatcher, list_tools
from .errors import (
    AgentNotFound,
    BusError,
    InvalidArguments,
    NotAllowed,
    PersistenceError,
    Unauthorized,
    UnknownOperation,
)
from .mailbox import IMailboxStore, MailboxStore
from .models import Agent, AgentInfo, BusState, DrainResult, Message, ToolResult
from .registry import AgentRegistry, IAgentRegistry
from .storage import (
    FileBlobStore,
    IBlobStore,
    IStateStore,
    SqliteBlobStore,
    StateStore,
    open_blob_store,
)

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "Agent",
    "AgentInfo",
    "Message",
    "DrainResult",
    "BusState",
    "ToolResult",
    # Errors
    "BusError",
    "AgentNotFound",
    "Unauthorized",
    "NotAllowed",
    "UnknownOperation",
    "InvalidArguments",
    "PersistenceError",
    # Components
    "IBlobStore",
    "FileBlobStore",
    "SqliteBlobStore",
    "open_blob_store",
    "IStateStore",
    "StateStore",
    "IAuthorizationGate",
    "AuthorizationGate",
    "hash_token",
    "IAgentRegistry",
    "AgentRegistry",
    "IMailboxStore",
    "MailboxStore",
    "IDispatcher",
    "Dispatcher",
    "list_tools",
]
