from typing import Any, Dict, Optional

from pydantic import BaseModel

from ..amadeus.auth import request_token
from .base import api_tool


class AccessTokenArgs(BaseModel):
    client_id: Optional[str] = None
    client_secret: Optional[str] = None


@api_tool(
    name="request_access_token",
    description="Request an access token from the Amadeus API using client credentials.",
    parameters={
        "type": "object",
        "properties": {
            "client_id": {"type": "string", "description": "The client ID for the Amadeus API."},
            "client_secret": {"type": "string", "description": "The client secret for the Amadeus API."},
        },
        "required": ["client_id", "client_secret"],
    },
    args_model=AccessTokenArgs,
)
async def request_access_token(args: AccessTokenArgs) -> Dict[str, Any]:
    # Blank credentials fall back to the configured ones
    return await request_token(args.client_id or None, args.client_secret or None)
