import logging
from typing import Any, Dict, List, Optional

from pydantic import Field

from ..amadeus import http
from ..amadeus.auth import fetch_access_token
from ..amadeus.models import HotelOffersResponse, decode
from .base import CamelModel, api_tool

logger = logging.getLogger(__name__)

HOTEL_OFFERS_PATH = "/v3/shopping/hotel-offers"

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class HotelSearchArgs(CamelModel):
    hotel_ids: str = Field(..., min_length=1, description="Comma separated Amadeus hotel ids.")
    adults: int = Field(1, ge=1)
    check_in_date: Optional[str] = Field(None, pattern=DATE_PATTERN)
    check_out_date: Optional[str] = Field(None, pattern=DATE_PATTERN)
    price_range: Optional[str] = None
    room_quantity: int = Field(1, ge=1)

    def to_params(self) -> Dict[str, Any]:
        params = {"hotelIds": self.hotel_ids, "adults": self.adults}
        if self.check_in_date:
            params["checkInDate"] = self.check_in_date
        if self.check_out_date:
            params["checkOutDate"] = self.check_out_date
        if self.price_range:
            params["priceRange"] = self.price_range
        params["roomQuantity"] = self.room_quantity
        return params


class OfferSummary(CamelModel):
    hotel_name: str
    available: Optional[bool] = None
    offer_id: str
    check_in_date: Optional[str] = None
    check_out_date: Optional[str] = None
    description: str
    price: str
    policies: Optional[Dict[str, Any]] = None


@api_tool(
    name="hotel_search",
    description="Search for hotels and retrieve availability and rates information.",
    parameters={
        "type": "object",
        "properties": {
            "hotelIds": {
                "type": "string",
                "description": "The IDs of the hotels to search for.",
            },
            "adults": {
                "type": "integer",
                "description": "The number of adults for the search.",
                "default": 1,
            },
            "checkInDate": {
                "type": "string",
                "format": "date",
                "description": "The check-in date for the hotel stay, formatted as 'YYYY-MM-DD'.",
            },
            "checkOutDate": {
                "type": "string",
                "format": "date",
                "description": "The check-out date for the hotel stay, formatted as 'YYYY-MM-DD'.",
            },
            "priceRange": {
                "type": "string",
                "description": "The price range for the hotel search, formatted as 'min-max'.",
            },
            "roomQuantity": {
                "type": "integer",
                "description": "The number of rooms to book.",
                "default": 1,
            },
        },
        "required": ["hotelIds"],
    },
    args_model=HotelSearchArgs,
)
async def hotel_search(args: HotelSearchArgs) -> List[Dict[str, Any]]:
    token = await fetch_access_token()
    payload = await http.get_json(HOTEL_OFFERS_PATH, token, params=args.to_params())
    response = decode(HotelOffersResponse, payload, "hotel offers")

    # Only the first hotel is reported
    hotel = response.data[0]
    logger.info(f"Hotel {hotel.hotel.name} has {len(hotel.offers)} offers")
    return [
        OfferSummary(
            hotel_name=hotel.hotel.name,
            available=hotel.available,
            offer_id=offer.id,
            check_in_date=offer.check_in_date,
            check_out_date=offer.check_out_date,
            description=offer.room.description.text,
            price=f"{offer.price.total}{offer.price.currency}",
            policies=offer.policies,
        ).dump()
        for offer in hotel.offers
    ]
