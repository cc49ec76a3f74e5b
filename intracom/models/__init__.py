"""Core data models for IntraCom."""

from .agents import Agent, AgentInfo
from .messages import DrainResult, Message
from .results import ToolResult
from .state import BusState

__all__ = [
    # Agents
    "Agent",
    "AgentInfo",
    # Messages
    "Message",
    "DrainResult",
    # State
    "BusState",
    # Results
    "ToolResult",
]
