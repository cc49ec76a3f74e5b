"""State store: owns the BusState and its load/persist contract."""

import json
from typing import Protocol

from ..errors import PersistenceError
from ..logging_config import get_logger
from ..models import BusState
from .storage import IBlobStore

logger = get_logger(__name__)


class IStateStore(Protocol):
    """Owner of the single in-memory BusState."""

    @property
    def state(self) -> BusState:
        """Current state, borrowed for the duration of an operation."""
        ...

    async def load(self) -> BusState:
        """Replace the in-memory state with the persisted one."""
        ...

    async def save(self) -> None:
        """Persist the whole in-memory state."""
        ...


class StateStore:
    """Loads the bus state once and persists it after every mutation."""

    def __init__(self, blob_store: IBlobStore):
        self._blob_store = blob_store
        self._state = BusState()

    @property
    def state(self) -> BusState:
        return self._state

    async def load(self) -> BusState:
        """Read the persisted state, falling back to an empty one.

        Missing or empty storage starts clean silently. Unreadable or
        corrupt storage also starts clean, but is logged as a warning since
        the next save overwrites it.
        """
        try:
            raw = await self._blob_store.read()
        except Exception:
            logger.warning("Could not read bus state, starting empty", exc_info=True)
            self._state = BusState()
            return self._state

        if raw is None or not raw.strip():
            logger.info("No persisted bus state, starting empty")
            self._state = BusState()
            return self._state

        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError("bus state must be a JSON object")
            self._state = BusState.from_dict(data)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(
                "Corrupt bus state, starting empty: %s",
                e,
                extra={"context": {"size": len(raw)}},
            )
            self._state = BusState()
            return self._state

        logger.info(
            "Bus state loaded",
            extra={
                "context": {
                    "agents": len(self._state.agents),
                    "mailboxes": len(self._state.mailboxes),
                }
            },
        )
        return self._state

    async def save(self) -> None:
        """Serialize the full aggregate and overwrite the blob."""
        try:
            data = json.dumps(self._state.to_dict(), indent=2, ensure_ascii=False)
            await self._blob_store.write(data)
        except Exception as e:
            logger.exception("Failed to persist bus state")
            raise PersistenceError(f"Failed to persist state: {e}") from e
