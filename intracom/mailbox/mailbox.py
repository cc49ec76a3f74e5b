"""Mailbox store implementation."""

import time
import uuid
from typing import Any, Callable, Protocol

from ..models import DrainResult, Message
from ..storage import IStateStore


class IMailboxStore(Protocol):
    """Ordered per-agent message queues."""

    def compose(
        self,
        sender: str,
        recipient: str,
        body: str,
        meta: dict[str, Any] | None = None,
    ) -> Message:
        """Create a new message with a fresh id and timestamp."""
        ...

    def append(self, recipient_id: str, message: Message) -> None:
        """Push a message to the tail of the recipient's mailbox."""
        ...

    def peek(self, agent_id: str | None = None) -> int | dict[str, int]:
        """Message counts without revealing content."""
        ...

    def drain(self, agent_id: str, max_count: int, remove: bool = True) -> DrainResult:
        """Read (and optionally remove) messages from the head of a mailbox."""
        ...


def wall_clock_ms() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


class MailboxStore:
    """FIFO mailboxes stored in the shared bus state."""

    def __init__(
        self,
        state_store: IStateStore,
        clock: Callable[[], int] = wall_clock_ms,
    ):
        self._state_store = state_store
        self._clock = clock
        self._last_ts = 0

    def _timestamp(self) -> int:
        """Clock reading in ms, never lower than the previous stamp."""
        now = self._clock()
        self._last_ts = max(self._last_ts, now)
        return self._last_ts

    def compose(
        self,
        sender: str,
        recipient: str,
        body: str,
        meta: dict[str, Any] | None = None,
    ) -> Message:
        """Create a new message with a fresh id and timestamp."""
        return Message(
            id=str(uuid.uuid4()),
            ts=self._timestamp(),
            sender=sender,
            recipient=recipient,
            body=body,
            meta=meta,
        )

    def append(self, recipient_id: str, message: Message) -> None:
        """Push a message to the tail of the recipient's mailbox.

        Mailbox existence is independent of agent existence; a missing
        mailbox is created.
        """
        self._state_store.state.mailboxes.setdefault(recipient_id, []).append(message)

    def peek(self, agent_id: str | None = None) -> int | dict[str, int]:
        """Count for one agent (0 if no mailbox), or counts for every mailbox."""
        mailboxes = self._state_store.state.mailboxes
        if agent_id is not None:
            return len(mailboxes.get(agent_id, []))
        return {key: len(mailbox) for key, mailbox in mailboxes.items()}

    def drain(self, agent_id: str, max_count: int, remove: bool = True) -> DrainResult:
        """Return up to max_count messages from the head, oldest first.

        With remove=True exactly the returned messages are taken off the
        head; the rest stays in order. Draining never creates a mailbox.
        """
        if isinstance(max_count, bool) or not isinstance(max_count, int) or max_count < 0:
            raise ValueError(f"max must be a non-negative integer, got {max_count!r}")

        mailboxes = self._state_store.state.mailboxes
        mailbox = mailboxes.get(agent_id, [])
        messages = mailbox[:max_count]

        if remove and agent_id in mailboxes:
            del mailbox[: len(messages)]

        return DrainResult(messages=messages, remaining=len(mailbox))
