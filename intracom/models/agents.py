"""Agent-related data models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Agent:
    """A registered identity capable of sending and receiving messages."""

    agent_id: str
    capabilities: dict[str, Any] = field(default_factory=dict)
    allowlist: list[str] = field(default_factory=list)  # recipients, ordered, unique
    token_hash: str | None = None  # None -> no authentication

    def info(self) -> "AgentInfo":
        """Public view of the agent (token hash stripped)."""
        return AgentInfo(
            agent_id=self.agent_id,
            capabilities=self.capabilities,
            allowlist=list(self.allowlist),
        )

    def to_dict(self) -> dict:
        data = {
            "agentId": self.agent_id,
            "capabilities": self.capabilities,
            "allowlist": list(self.allowlist),
        }
        if self.token_hash is not None:
            data["tokenHash"] = self.token_hash
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Agent":
        return cls(
            agent_id=data["agentId"],
            capabilities=dict(data.get("capabilities") or {}),
            allowlist=list(data.get("allowlist") or []),
            token_hash=data.get("tokenHash"),
        )


@dataclass
class AgentInfo:
    """Agent entry as returned by agent_list."""

    agent_id: str
    capabilities: dict[str, Any]
    allowlist: list[str]

    def to_dict(self) -> dict:
        return {
            "agentId": self.agent_id,
            "capabilities": self.capabilities,
            "allowlist": self.allowlist,
        }
