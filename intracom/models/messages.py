"""Message-related data models."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Message:
    """A single message queued in a recipient's mailbox."""

    id: str
    ts: int  # milliseconds since the Unix epoch
    sender: str
    recipient: str
    body: str
    meta: dict[str, Any] | None = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "ts": self.ts,
            "from": self.sender,
            "to": self.recipient,
            "body": self.body,
        }
        if self.meta is not None:
            data["meta"] = self.meta
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Message":
        return cls(
            id=data["id"],
            ts=int(data["ts"]),
            sender=data["from"],
            recipient=data["to"],
            body=data["body"],
            meta=data.get("meta"),
        )


@dataclass
class DrainResult:
    """Messages taken from the head of a mailbox and what is left behind."""

    messages: list[Message]
    remaining: int
