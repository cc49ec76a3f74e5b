"""Project-level configuration and path helpers."""

import os
from pathlib import Path
from typing import Union

DEFAULT_STORAGE_PATH = Path("intracom-state.json")
DEFAULT_LOG_PATH = Path("logs") / "intracom.log"
DEFAULT_API_HOST = "localhost"
DEFAULT_API_PORT = 8000

SERVER_NAME = "intracom"
SERVER_VERSION = "1.0.0"

MEMORY_STORAGE = ":memory:"
SQLITE_SUFFIXES = (".db", ".sqlite", ".sqlite3")


PathLike = Union[str, Path]


def resolve_storage_path(env_value: PathLike | None = None) -> PathLike:
    """Resolve INTRACOM_STORAGE to a path (or the in-memory marker)."""
    if env_value is None:
        env_value = os.getenv("INTRACOM_STORAGE")

    if not env_value:
        return DEFAULT_STORAGE_PATH

    if str(env_value) == MEMORY_STORAGE:
        return MEMORY_STORAGE

    return Path(env_value).expanduser()


def is_sqlite_location(location: PathLike) -> bool:
    """Whether a storage location should be backed by SQLite."""
    if str(location) == MEMORY_STORAGE:
        return True
    return Path(location).suffix.lower() in SQLITE_SUFFIXES
