"""
Amadeus OAuth2 token exchange.

Amadeus uses the client credentials flow: the client id and secret are
posted form-encoded to the token endpoint and an opaque bearer token comes
back. Tokens are fetched fresh for every tool call and never stored.
"""
import logging
from typing import Any, Dict, Optional

from ..config import Config
from . import http
from .errors import AmadeusError
from .models import TokenResponse, decode

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v1/security/oauth2/token"


async def request_token(client_id: Optional[str] = None, client_secret: Optional[str] = None) -> Dict[str, Any]:
    """
    Exchange client credentials for a token and return the decoded body.

    Args:
        client_id: Amadeus API key. Falls back to Config.AMADEUS_API_KEY.
        client_secret: Amadeus API secret. Falls back to Config.AMADEUS_API_SECRET.

    Raises:
        AmadeusError: TransportError, UpstreamRejection (carrying the parsed
            error body) or MappingError when no access_token comes back.
    """
    data = {
        "grant_type": "client_credentials",
        "client_id": client_id or Config.AMADEUS_API_KEY or "",
        "client_secret": client_secret or Config.AMADEUS_API_SECRET or "",
    }
    try:
        payload = await http.post_form(TOKEN_PATH, data)
        token = decode(TokenResponse, payload, "token")
    except AmadeusError as e:
        logger.error(f"Error requesting access token: {e.message}")
        raise
    return token.model_dump(exclude_none=True)


async def fetch_access_token(client_id: Optional[str] = None, client_secret: Optional[str] = None) -> str:
    """Get a bearer token for one downstream request."""
    token = await request_token(client_id, client_secret)
    return token["access_token"]
