"""Storage module."""

from .state_store import IStateStore, StateStore
from .storage import FileBlobStore, IBlobStore, SqliteBlobStore, open_blob_store

__all__ = [
    "IBlobStore",
    "FileBlobStore",
    "SqliteBlobStore",
    "open_blob_store",
    "IStateStore",
    "StateStore",
]
