"""Operation dispatcher: routes tool calls to registry and mailbox operations."""

import asyncio
from typing import Any, Awaitable, Callable, Protocol

from ..auth import IAuthorizationGate
from ..errors import BusError
from ..logging_config import get_logger
from ..mailbox import IMailboxStore
from ..models import ToolResult
from ..registry import IAgentRegistry
from ..storage import IStateStore
from .tools import (
    AgentListArgs,
    AgentRegisterArgs,
    AgentUnregisterArgs,
    MessagePeekArgs,
    MessageReadArgs,
    MessageSendArgs,
    ToolArgs,
    list_tools,
    parse_arguments,
)

logger = get_logger(__name__)


ToolHandler = Callable[[Any], Awaitable[ToolResult]]


class IDispatcher(Protocol):
    """Entry point for tool calls."""

    async def call(self, name: str, arguments: Any = None) -> ToolResult:
        """Run one operation to completion and return its result."""
        ...

    def list_tools(self) -> list[dict]:
        """Definitions of all supported operations."""
        ...


class Dispatcher:
    """Runs operations one at a time: validate, mutate, persist, respond."""

    def __init__(
        self,
        state_store: IStateStore,
        registry: IAgentRegistry,
        mailbox: IMailboxStore,
        gate: IAuthorizationGate,
    ):
        self._state_store = state_store
        self._registry = registry
        self._mailbox = mailbox
        self._gate = gate
        self._lock = asyncio.Lock()
        self._handlers: dict[str, ToolHandler] = {
            "agent_list": self._agent_list,
            "agent_register": self._agent_register,
            "agent_unregister": self._agent_unregister,
            "message_send": self._message_send,
            "message_read": self._message_read,
            "message_peek": self._message_peek,
        }

    def list_tools(self) -> list[dict]:
        """Definitions of all supported operations."""
        return list_tools()

    async def call(self, name: str, arguments: Any = None) -> ToolResult:
        """Run one operation to completion and return its result.

        Never raises: every failure becomes an error result.
        """
        async with self._lock:
            try:
                args: ToolArgs = parse_arguments(name, arguments)
                return await self._handlers[name](args)
            except BusError as e:
                logger.warning(
                    "Operation rejected: %s",
                    e,
                    extra={"context": {"tool": name, "error": type(e).__name__}},
                )
                return ToolResult.error(str(e))
            except Exception as e:
                logger.exception("Operation failed", extra={"context": {"tool": name}})
                return ToolResult.error(str(e))

    async def _agent_list(self, args: AgentListArgs) -> ToolResult:
        agents = [info.to_dict() for info in self._registry.list()]
        return ToolResult.ok(agents)

    async def _agent_register(self, args: AgentRegisterArgs) -> ToolResult:
        self._registry.register(
            args.agent_id,
            capabilities=args.capabilities,
            allowlist=args.allowlist,
            token=args.token,
        )
        await self._state_store.save()
        return ToolResult.ok(
            {"agentId": args.agent_id},
            text=f"OK: Agent '{args.agent_id}' registered",
        )

    async def _agent_unregister(self, args: AgentUnregisterArgs) -> ToolResult:
        self._registry.unregister(args.agent_id, token=args.token)
        await self._state_store.save()
        return ToolResult.ok(
            {"agentId": args.agent_id},
            text=f"OK: Agent '{args.agent_id}' unregistered",
        )

    async def _message_send(self, args: MessageSendArgs) -> ToolResult:
        sender = self._gate.require_agent(args.sender)
        self._gate.check_token(sender, args.token)
        self._gate.require_agent(args.recipient)
        self._gate.check_allowlist(sender, args.recipient)

        message = self._mailbox.compose(
            args.sender, args.recipient, args.body, meta=args.meta
        )
        self._mailbox.append(args.recipient, message)
        await self._state_store.save()

        logger.info(
            "Message sent",
            extra={
                "context": {
                    "message_id": message.id,
                    "from": args.sender,
                    "to": args.recipient,
                }
            },
        )
        return ToolResult.ok(
            {"id": message.id, "to": args.recipient},
            text=f"OK: Message sent to '{args.recipient}'",
        )

    async def _message_read(self, args: MessageReadArgs) -> ToolResult:
        agent = self._gate.require_agent(args.agent_id)
        self._gate.check_token(agent, args.token)

        result = self._mailbox.drain(args.agent_id, args.max, remove=args.drain)
        if args.drain:
            await self._state_store.save()

        return ToolResult.ok(
            {
                "agentId": args.agent_id,
                "count": len(result.messages),
                "remaining": result.remaining,
                "messages": [message.to_dict() for message in result.messages],
            }
        )

    async def _message_peek(self, args: MessagePeekArgs) -> ToolResult:
        if args.agent_id:
            count = self._mailbox.peek(args.agent_id)
            return ToolResult.ok({"agentId": args.agent_id, "count": count})
        return ToolResult.ok(self._mailbox.peek())
