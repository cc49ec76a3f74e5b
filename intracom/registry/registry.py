"""Agent registry implementation."""

from typing import Any, Iterable, Protocol

from ..auth import IAuthorizationGate, hash_token
from ..logging_config import get_logger
from ..models import Agent, AgentInfo
from ..storage import IStateStore

logger = get_logger(__name__)


class IAgentRegistry(Protocol):
    """CRUD over agent identities."""

    def register(
        self,
        agent_id: str,
        capabilities: dict[str, Any],
        allowlist: Iterable[str],
        token: str | None = None,
    ) -> Agent:
        """Insert or fully replace an agent record."""
        ...

    def unregister(self, agent_id: str, token: str | None = None) -> None:
        """Remove an agent and its mailbox."""
        ...

    def list(self) -> list[AgentInfo]:
        """All registered agents without token hashes."""
        ...


class AgentRegistry:
    """Agent identities stored in the shared bus state."""

    def __init__(self, state_store: IStateStore, gate: IAuthorizationGate):
        self._state_store = state_store
        self._gate = gate

    def register(
        self,
        agent_id: str,
        capabilities: dict[str, Any],
        allowlist: Iterable[str],
        token: str | None = None,
    ) -> Agent:
        """Insert or fully replace an agent record.

        Last write wins: capabilities, allowlist and token are never merged
        with a previous registration. Registering without a token clears
        authentication. An existing mailbox is kept as is.
        """
        state = self._state_store.state
        replaced = agent_id in state.agents

        agent = Agent(
            agent_id=agent_id,
            capabilities=dict(capabilities),
            allowlist=list(dict.fromkeys(allowlist)),
            token_hash=hash_token(token) if token else None,
        )
        state.agents[agent_id] = agent
        state.mailboxes.setdefault(agent_id, [])

        logger.info(
            "Agent registered",
            extra={
                "context": {
                    "agent_id": agent_id,
                    "replaced": replaced,
                    "authenticated": agent.token_hash is not None,
                }
            },
        )
        return agent

    def unregister(self, agent_id: str, token: str | None = None) -> None:
        """Remove an agent and its mailbox, discarding undelivered messages."""
        agent = self._gate.require_agent(agent_id)
        self._gate.check_token(agent, token)

        state = self._state_store.state
        del state.agents[agent_id]
        dropped = state.mailboxes.pop(agent_id, [])

        logger.info(
            "Agent unregistered",
            extra={"context": {"agent_id": agent_id, "dropped_messages": len(dropped)}},
        )

    def list(self) -> list[AgentInfo]:
        """All registered agents in registration order."""
        return [agent.info() for agent in self._state_store.state.agents.values()]
