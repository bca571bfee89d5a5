"""Single-shot HTTP calls against the Amadeus API."""
import json
import logging
from typing import Any, Dict, Optional

import httpx

from ..config import Config
from .errors import MappingError, TransportError, UpstreamRejection

logger = logging.getLogger(__name__)


def open_client() -> httpx.AsyncClient:
    """Create a fresh client for one request."""
    return httpx.AsyncClient(base_url=Config.AMADEUS_BASE_URL, timeout=Config.HTTP_TIMEOUT)


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def post_form(path: str, data: Dict[str, Any]) -> Any:
    """POST an application/x-www-form-urlencoded body and decode the JSON reply."""
    return await _send("POST", path, data=data)


async def get_json(path: str, token: str, params: Optional[Dict[str, Any]] = None) -> Any:
    return await _send("GET", path, headers=bearer(token), params=params)


async def post_json(path: str, token: str, body: Dict[str, Any]) -> Any:
    # httpx sets Content-Type: application/json for json=
    return await _send("POST", path, headers=bearer(token), json=body)


async def _send(method: str, path: str, **kwargs) -> Any:
    try:
        async with open_client() as client:
            response = await client.request(method, path, **kwargs)
    except httpx.HTTPError as e:
        logger.error(f"{method} {path} failed: {e!r}")
        raise TransportError(f"{method} {path} failed: {e}") from e

    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = None

    if not response.is_success:
        logger.warning(f"{method} {path} returned HTTP {response.status_code}")
        raise UpstreamRejection(
            response.status_code,
            payload if payload is not None else response.text,
        )

    if payload is None:
        raise MappingError(f"{method} {path} returned a body that is not JSON")

    return payload
