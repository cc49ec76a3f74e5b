"""The persisted bus aggregate."""

from dataclasses import dataclass, field

from .agents import Agent
from .messages import Message


@dataclass
class BusState:
    """All agents and mailboxes. Dict insertion order is significant."""

    agents: dict[str, Agent] = field(default_factory=dict)
    mailboxes: dict[str, list[Message]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "agents": {
                agent_id: agent.to_dict() for agent_id, agent in self.agents.items()
            },
            "mailboxes": {
                agent_id: [message.to_dict() for message in mailbox]
                for agent_id, mailbox in self.mailboxes.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BusState":
        """Build state from its JSON form. Raises on malformed input."""
        agents_data = data.get("agents", {})
        mailboxes_data = data.get("mailboxes", {})
        if not isinstance(agents_data, dict) or not isinstance(mailboxes_data, dict):
            raise ValueError("agents and mailboxes must be JSON objects")

        return cls(
            agents={
                agent_id: Agent.from_dict(agent)
                for agent_id, agent in agents_data.items()
            },
            mailboxes={
                agent_id: [Message.from_dict(message) for message in mailbox]
                for agent_id, mailbox in mailboxes_data.items()
            },
        )
