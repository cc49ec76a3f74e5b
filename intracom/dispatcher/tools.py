"""Tool definitions and argument models for the six bus operations."""

import json
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..errors import InvalidArguments, UnknownOperation


class ToolArgs(BaseModel):
    """Base for tool arguments: unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="after")
    def _check_persistable(self) -> "ToolArgs":
        """Reject values the JSON state document cannot hold.

        Covers lone surrogates in any string (nested ones included) and
        non-JSON values inside capabilities or meta.
        """
        try:
            json.dumps(self.model_dump(), ensure_ascii=False).encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError(f"strings must be valid UTF-8 ({e.reason})") from e
        except (TypeError, ValueError) as e:
            raise ValueError(f"values must be JSON serializable ({e})") from e
        return self


class AgentListArgs(ToolArgs):
    """agent_list takes no arguments."""


class AgentRegisterArgs(ToolArgs):
    agent_id: str = Field(alias="agentId", min_length=1, description="Unique agent identifier")
    capabilities: dict[str, Any] = Field(
        description="Agent capabilities (role, domains, skills, etc.)"
    )
    allowlist: list[str] = Field(
        description="List of agent IDs this agent can send messages to"
    )
    token: str | None = Field(default=None, description="Authentication token (optional)")


class AgentUnregisterArgs(ToolArgs):
    agent_id: str = Field(alias="agentId", min_length=1)
    token: str | None = None


class MessageSendArgs(ToolArgs):
    sender: str = Field(alias="from", min_length=1, description="Sender agent ID")
    recipient: str = Field(alias="to", min_length=1, description="Recipient agent ID")
    body: str = Field(description="Message content")
    meta: dict[str, Any] | None = Field(
        default=None, description="Optional metadata (task_id, priority, etc.)"
    )
    token: str | None = Field(default=None, description="Authentication token")


class MessageReadArgs(ToolArgs):
    agent_id: str = Field(
        alias="agentId", min_length=1, description="Agent ID to read messages for"
    )
    max: int = Field(default=50, ge=0, description="Max messages to return (default: 50)")
    drain: bool = Field(default=True, description="Remove messages after reading (default: true)")
    token: str | None = Field(default=None, description="Authentication token")


class MessagePeekArgs(ToolArgs):
    agent_id: str | None = Field(
        default=None,
        alias="agentId",
        description="Agent ID to check (optional, omit for all)",
    )


@dataclass(frozen=True)
class ToolSpec:
    """A named operation as advertised to clients."""

    name: str
    description: str
    args_model: type[ToolArgs]

    def definition(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.args_model.model_json_schema(by_alias=True),
        }


TOOLS: dict[str, ToolSpec] = {
    spec.name: spec
    for spec in [
        ToolSpec(
            "agent_list",
            "List all registered agents with their capabilities and allowlists",
            AgentListArgs,
        ),
        ToolSpec(
            "agent_register",
            "Register or update an agent with capabilities, allowlist, and optional token",
            AgentRegisterArgs,
        ),
        ToolSpec(
            "agent_unregister",
            "Remove an agent from the registry",
            AgentUnregisterArgs,
        ),
        ToolSpec(
            "message_send",
            "Send a message to another agent (enforces allowlist)",
            MessageSendArgs,
        ),
        ToolSpec(
            "message_read",
            "Read messages from an agent's mailbox (drains by default)",
            MessageReadArgs,
        ),
        ToolSpec(
            "message_peek",
            "Get message counts without reading content",
            MessagePeekArgs,
        ),
    ]
}


def list_tools() -> list[dict]:
    """Definitions (name, description, JSON input schema) of every tool."""
    return [spec.definition() for spec in TOOLS.values()]


def parse_arguments(name: str, arguments: Any) -> ToolArgs:
    """Validate raw arguments for a tool.

    Raises:
        UnknownOperation: no tool with this name
        InvalidArguments: arguments missing or malformed
    """
    spec = TOOLS.get(name)
    if spec is None:
        raise UnknownOperation(name)

    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise InvalidArguments(name, "arguments must be an object")

    try:
        return spec.args_model.model_validate(arguments)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidArguments(name, details) from e
