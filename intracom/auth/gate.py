"""Authorization gate: registry lookups, token and allowlist checks."""

from typing import Protocol

from ..errors import AgentNotFound, NotAllowed, Unauthorized
from ..logging_config import get_logger
from ..models import Agent
from ..storage import IStateStore
from .digest import token_matches

logger = get_logger(__name__)


class IAuthorizationGate(Protocol):
    """Checks consulted by message operations before touching mailboxes."""

    def require_agent(self, agent_id: str) -> Agent:
        """Return the registered agent or raise AgentNotFound."""
        ...

    def check_token(self, agent: Agent, token: str | None = None) -> None:
        """Raise Unauthorized unless the token satisfies the agent."""
        ...

    def check_allowlist(self, sender: Agent, recipient_id: str) -> None:
        """Raise NotAllowed unless sender may message recipient_id."""
        ...


class AuthorizationGate:
    """Authorization checks against the shared bus state."""

    def __init__(self, state_store: IStateStore):
        self._state_store = state_store

    def require_agent(self, agent_id: str) -> Agent:
        """Return the registered agent or raise AgentNotFound."""
        agent = self._state_store.state.agents.get(agent_id)
        if agent is None:
            raise AgentNotFound(agent_id)
        return agent

    def check_token(self, agent: Agent, token: str | None = None) -> None:
        """Raise Unauthorized unless the token satisfies the agent.

        Agents without a token hash accept any (or no) token.
        """
        if agent.token_hash is None:
            return
        if not token or not token_matches(token, agent.token_hash):
            logger.warning(
                "Token rejected",
                extra={"context": {"agent_id": agent.agent_id}},
            )
            raise Unauthorized(agent.agent_id)

    def check_allowlist(self, sender: Agent, recipient_id: str) -> None:
        """Raise NotAllowed unless sender may message recipient_id."""
        if recipient_id not in sender.allowlist:
            raise NotAllowed(sender.agent_id, recipient_id)
