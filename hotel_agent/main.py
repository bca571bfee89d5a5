from hotel_agent.mcp.mcp_server import MCPServer
from hotel_agent.tools import ALL_TOOLS


def build_server() -> MCPServer:
    """Create an MCP server with every Amadeus hotel tool registered."""
    server = MCPServer()
    for tool in ALL_TOOLS:
        server.register_tool(tool)
    return server
