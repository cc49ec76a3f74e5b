"""Tool call result model."""

import json
from dataclasses import dataclass
from typing import Any


@dataclass
class ToolResult:
    """Uniform success/error payload relayed by the transport."""

    text: str
    data: Any = None  # structured payload for in-process callers
    is_error: bool = False

    @classmethod
    def ok(cls, data: Any = None, text: str | None = None) -> "ToolResult":
        """Success result; text defaults to the JSON form of data."""
        if text is None:
            text = json.dumps(data, indent=2, ensure_ascii=False)
        return cls(text=text, data=data)

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(text=f"ERROR: {message}", is_error=True)

    def to_dict(self) -> dict:
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }
