"""Error taxonomy for bus operations."""


class BusError(Exception):
    """Base class for failures reported back to the caller as error results."""


class AgentNotFound(BusError):
    """An operation referenced an agent that is not registered."""

    def __init__(self, agent_id: str):
        super().__init__(f"Agent not registered: {agent_id}")
        self.agent_id = agent_id


class Unauthorized(BusError):
    """Token missing or mismatched for a token-protected agent."""

    def __init__(self, agent_id: str):
        super().__init__("Invalid token")
        self.agent_id = agent_id


class NotAllowed(BusError):
    """The sender's allowlist does not include the recipient."""

    def __init__(self, sender_id: str, recipient_id: str):
        super().__init__(f"Not allowed: {sender_id} -> {recipient_id}")
        self.sender_id = sender_id
        self.recipient_id = recipient_id


class UnknownOperation(BusError):
    """The dispatcher received an operation name it does not recognize."""

    def __init__(self, name: str, message: str | None = None):
        super().__init__(message or f"Unknown tool: {name}")
        self.name = name


class InvalidArguments(UnknownOperation):
    """Missing or malformed arguments; reported like an unknown operation."""

    def __init__(self, name: str, details: str):
        super().__init__(name, f"Invalid arguments for {name}: {details}")
        self.details = details


class PersistenceError(BusError):
    """The blob store could not save the bus state."""
