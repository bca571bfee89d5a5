import logging
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import Field

from ..amadeus import http
from ..amadeus.auth import fetch_access_token
from ..amadeus.models import HotelAddress, HotelListResponse, decode
from .base import CamelModel, api_tool

logger = logging.getLogger(__name__)

HOTELS_BY_CITY_PATH = "/v1/reference-data/locations/hotels/by-city"


class HotelListArgs(CamelModel):
    city_code: str = Field(..., min_length=1, description="IATA city code (e.g., PAR).")
    radius: float = Field(5, gt=0, description="Maximum distance from the city centre.")
    radius_unit: Literal["KM", "MI"] = "KM"
    hotel_source: str = "ALL"
    chain_code: Optional[str] = None
    amenities: Optional[str] = None
    rating: Optional[Union[int, str]] = None

    def to_params(self) -> Dict[str, Any]:
        radius = int(self.radius) if self.radius == int(self.radius) else self.radius
        params = {
            "cityCode": self.city_code,
            "radius": radius,
            "radiusUnit": self.radius_unit,
            "hotelSource": self.hotel_source,
        }
        if self.chain_code:
            params["chainCodes"] = self.chain_code
        if self.amenities:
            params["amenities"] = self.amenities
        if self.rating:
            params["ratings"] = str(self.rating)
        return params


class HotelSummary(CamelModel):
    name: str
    hotel_id: str
    address: str
    rating: Optional[Union[int, float, str]] = None


def format_address(address: Union[HotelAddress, Dict[str, Any], str, None]) -> str:
    """
    Flatten an Amadeus address into one line.

    Address lines, city name and postal code are joined with ", " in that
    order, skipping whatever is missing. A plain string address is returned
    unchanged.

    >>> format_address({"lines": ["A", "B"], "cityName": "X", "postalCode": "1"})
    'A, B, X, 1'
    >>> format_address("Full Addr")
    'Full Addr'
    """
    if not address:
        return ""
    if isinstance(address, str):
        return address
    if isinstance(address, dict):
        address = HotelAddress.model_validate(address)

    parts = [line for line in (address.lines or []) if line]
    if address.city_name:
        parts.append(address.city_name)
    if address.postal_code:
        parts.append(address.postal_code)
    return ", ".join(parts)


@api_tool(
    name="hotel_list_by_city",
    description="Retrieve a list of hotels by city from the Amadeus API.",
    parameters={
        "type": "object",
        "properties": {
            "cityCode": {
                "type": "string",
                "description": "The city code for which to retrieve hotel information.",
            },
            "radius": {
                "type": "number",
                "description": "Maximum distance from the geographical coordinates in kilometers.",
                "default": 5,
            },
            "radiusUnit": {
                "type": "string",
                "enum": ["KM", "MI"],
                "description": "Unit of measurement for the radius.",
                "default": "KM",
            },
            "hotelSource": {
                "type": "string",
                "description": "Source of the hotels to retrieve.",
                "default": "ALL",
            },
            "chainCode": {"type": "string", "description": "Filter hotels by chain code."},
            "amenities": {"type": "string", "description": "Filter hotels by amenities."},
            "rating": {"type": "string", "description": "Filter hotels by rating."},
        },
        "required": ["cityCode"],
    },
    args_model=HotelListArgs,
)
async def hotel_list_by_city(args: HotelListArgs) -> List[Dict[str, Any]]:
    """List the hotels of a city with a one-line address each."""
    token = await fetch_access_token()
    payload = await http.get_json(HOTELS_BY_CITY_PATH, token, params=args.to_params())
    response = decode(HotelListResponse, payload, "hotel list")

    logger.info(f"Found {len(response.data)} hotels in {args.city_code}")
    return [
        HotelSummary(
            name=hotel.name,
            hotel_id=hotel.hotel_id,
            address=format_address(hotel.address),
            rating=hotel.rating,
        ).dump()
        for hotel in response.data
    ]
