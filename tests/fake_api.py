"""In-memory Amadeus used by the tests (httpx.MockTransport)."""
import json
import itertools
from typing import Any, Callable, Dict, List, Tuple
from unittest.mock import patch
from urllib.parse import parse_qs

import httpx

from hotel_agent.config import Config

TOKEN_PATH = "/v1/security/oauth2/token"


class FakeAmadeus:
    def __init__(self):
        self.routes: Dict[Tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []
        self._token_counter = itertools.count(1)
        self.route("POST", TOKEN_PATH, handler=self._issue_token)

    def route(self, method: str, path: str, json_body: Any = None, status: int = 200, handler=None):
        if handler is None:
            def handler(request, _body=json_body, _status=status):
                return httpx.Response(_status, json=_body)
        self.routes[(method, path)] = handler

    def fail(self, method: str, path: str, exc_type=httpx.ConnectError):
        def handler(request):
            raise exc_type("connection refused", request=request)
        self.routes[(method, path)] = handler

    def _issue_token(self, request: httpx.Request) -> httpx.Response:
        n = next(self._token_counter)
        return httpx.Response(200, json={
            "type": "amadeusOAuth2Token",
            "username": "dev@example.com",
            "application_name": "hotel-tools",
            "client_id": self.form(request)["client_id"],
            "token_type": "Bearer",
            "access_token": f"token-{n}",
            "expires_in": 1799,
            "state": "approved",
            "scope": "",
        })

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"errors": [{"status": 404, "title": "NOT FOUND"}]})
        return handler(request)

    def open_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=Config.AMADEUS_BASE_URL, transport=httpx.MockTransport(self.handle))

    def patch(self):
        return patch("hotel_agent.amadeus.http.open_client", side_effect=self.open_client)

    # -- helpers for assertions ---------------------------------------------

    @staticmethod
    def form(request: httpx.Request) -> Dict[str, str]:
        return {k: v[0] for k, v in parse_qs(request.content.decode(), keep_blank_values=True).items()}

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return json.loads(request.content)

    def calls_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]


def hotel_record(hotel_id: str, name: str, address: Any = None, rating: Any = None) -> Dict[str, Any]:
    record = {
        "chainCode": "RT",
        "iataCode": "PAR",
        "dupeId": 700000000,
        "name": name,
        "hotelId": hotel_id,
        "geoCode": {"latitude": 48.85, "longitude": 2.35},
    }
    if address is not None:
        record["address"] = address
    if rating is not None:
        record["rating"] = rating
    return record


def offer(offer_id: str, total: str = "100.00", currency: str = "USD", text: str = "Standard room") -> Dict[str, Any]:
    return {
        "id": offer_id,
        "checkInDate": "2025-11-01",
        "checkOutDate": "2025-11-03",
        "rateCode": "RAC",
        "room": {"type": "A1K", "description": {"text": text, "lang": "EN"}},
        "guests": {"adults": 1},
        "price": {"currency": currency, "base": "90.00", "total": total},
        "policies": {"paymentType": "guarantee", "cancellation": {"deadline": "2025-10-30T23:59:00"}},
    }
