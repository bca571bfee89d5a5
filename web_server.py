import os
import logging
from typing import Any, Dict, Optional

import uvicorn
from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from hotel_agent.config import Config, setup_logging
from hotel_agent.main import build_server
from hotel_agent.mcp.protocol import JsonRpcRequest

# Configure Logging
setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Amadeus Hotel Tools")

# Add CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

server = build_server()

if not Config.validate():
    logger.warning("Amadeus credentials missing; tool calls will fail until they are configured.")


@app.get("/health")
async def health():
    return {"status": "ok", "tools": len(server.tools)}


@app.get("/tools")
async def list_tools():
    return {"tools": server.list_tools()}


@app.post("/tools/{name}")
async def call_tool(name: str, arguments: Optional[Dict[str, Any]] = Body(default=None)):
    """Run one tool. Failures are returned in the body, not as HTTP errors."""
    tool = server.tools.get(name)
    if tool is None:
        raise HTTPException(status_code=404, detail=f"Tool not found: {name}")

    result = await tool(arguments or {})
    return result.to_dict()


@app.post("/mcp")
async def mcp(request: JsonRpcRequest):
    response = await server.handle_request(request)
    return response.to_dict()


if __name__ == "__main__":
    uvicorn.run("web_server:app", host="0.0.0.0", port=int(os.getenv("PORT", "5000")), reload=True)
