"""Operation dispatcher module."""

from .dispatcher import Dispatcher, IDispatcher
from .tools import TOOLS, ToolSpec, list_tools, parse_arguments

__all__ = ["Dispatcher", "IDispatcher", "TOOLS", "ToolSpec", "list_tools", "parse_arguments"]
