"""Agent registry module."""

from .registry import AgentRegistry, IAgentRegistry

__all__ = ["AgentRegistry", "IAgentRegistry"]
