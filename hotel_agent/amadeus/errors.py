"""
Failures raised by the Amadeus client layer.

Every fault that can happen while talking to Amadeus is normalised into one
of these before it leaves ``hotel_agent.amadeus``. Tools turn them into
failure results.
"""
import json
from typing import Any, Dict, Optional


class AmadeusError(Exception):
    """Base class for Amadeus client failures."""

    kind = "error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_detail(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": self.message}


class TransportError(AmadeusError):
    """The request never completed (DNS, connect, timeout, protocol)."""

    kind = "transport"


class UpstreamRejection(AmadeusError):
    """Amadeus answered with a non-2xx status."""

    kind = "upstream"

    def __init__(self, status_code: int, payload: Any, message: Optional[str] = None):
        self.status_code = status_code
        self.payload = payload
        if message is None:
            if isinstance(payload, (dict, list)):
                message = json.dumps(payload, indent=2)
            else:
                message = str(payload) or f"HTTP {status_code}"
        super().__init__(message)

    def to_detail(self) -> Dict[str, Any]:
        detail = super().to_detail()
        detail["status_code"] = self.status_code
        detail["payload"] = self.payload
        return detail


class MappingError(AmadeusError):
    """A success response did not have the shape the tool expects."""

    kind = "mapping"
