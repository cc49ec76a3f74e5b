"""Tool call API routes."""

from typing import Any

from pydantic import BaseModel
from fastapi import APIRouter, Body

from ...app import IApplication


class TextContent(BaseModel):
    """A text block of a tool result."""

    type: str = "text"
    text: str


class ToolCallResponse(BaseModel):
    """Response model for a tool call."""

    content: list[TextContent]
    isError: bool


class ToolListResponse(BaseModel):
    """Response model for the tool list."""

    tools: list[dict[str, Any]]


def create_tools_router(app: IApplication) -> APIRouter:
    """Create tools router."""
    router = APIRouter(prefix="/api/tools", tags=["tools"])

    @router.get("", response_model=ToolListResponse)
    async def list_tools() -> dict:
        """List available tools with their input schemas."""
        return {"tools": app.list_tools()}

    @router.post("/{name}", response_model=ToolCallResponse)
    async def call_tool(
        name: str,
        arguments: dict[str, Any] | None = Body(default=None),
    ) -> dict:
        """Call a tool. Failures are reported in the body, not the status code."""
        result = await app.call_tool(name, arguments or {})
        return result.to_dict()

    return router
