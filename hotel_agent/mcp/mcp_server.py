import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..tools.base import ApiTool
from .protocol import (
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    CallToolRequest,
    CallToolResult,
    JsonRpcRequest,
    JsonRpcResponse,
    Tool,
)

logger = logging.getLogger(__name__)


class MCPServer:
    """A simple in-process MCP Server to host tools."""

    def __init__(self, tools: Optional[List[ApiTool]] = None):
        self.tools: Dict[str, ApiTool] = {}
        for tool in tools or []:
            self.register_tool(tool)

    def register_tool(self, tool: ApiTool):
        """Register an ApiTool under its descriptor name."""
        if tool.name in self.tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        self.tools[tool.name] = tool

    def list_tools(self) -> List[Dict[str, Any]]:
        return [Tool(**tool.descriptor.to_mcp()).model_dump() for tool in self.tools.values()]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> CallToolResult:
        if name not in self.tools:
            return CallToolResult(
                content=[{"type": "text", "text": f"Tool not found: {name}"}],
                isError=True
            )

        # Tools never raise; failures come back as ToolFailure
        result = await self.tools[name](arguments or {})
        return CallToolResult(
            content=[{"type": "text", "text": json.dumps(result.to_dict())}],
            isError=not result.ok
        )

    async def handle_request(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Dispatch a JSON-RPC request (tools/list, tools/call)."""
        if request.method == "tools/list":
            return JsonRpcResponse(result={"tools": self.list_tools()}, id=request.id)

        if request.method == "tools/call":
            try:
                call = CallToolRequest.model_validate(request.params or {})
            except ValidationError as e:
                return JsonRpcResponse.failure(INVALID_PARAMS, str(e), id=request.id)
            logger.info(f"Calling tool {call.name}", extra={"request_id": request.id})
            result = await self.call_tool(call.name, call.arguments)
            return JsonRpcResponse(result=result.to_dict(), id=request.id)

        return JsonRpcResponse.failure(METHOD_NOT_FOUND, f"Method not found: {request.method}", id=request.id)
