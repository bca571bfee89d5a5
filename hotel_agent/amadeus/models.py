"""
Typed views of the Amadeus payloads the tools read.

Only the fields a tool actually maps are modelled; unknown fields are
ignored unless the model keeps them for passthrough. Amadeus uses
lowerCamelCase keys, Python code uses snake_case.
"""
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .errors import MappingError


class AmadeusModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


M = TypeVar("M", bound=BaseModel)


def decode(model: Type[M], payload: Any, what: str) -> M:
    """Validate ``payload`` as ``model`` or raise MappingError."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise MappingError(f"Unexpected {what} response: {e}") from e


# ---------------------------------------------------------------------------
# POST /v1/security/oauth2/token
# ---------------------------------------------------------------------------

class TokenResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    access_token: str = Field(min_length=1)
    token_type: Optional[str] = None
    expires_in: Optional[int] = None
    state: Optional[str] = None
    application_name: Optional[str] = None
    client_id: Optional[str] = None
    scope: Optional[str] = None
    type: Optional[str] = None
    username: Optional[str] = None


# ---------------------------------------------------------------------------
# GET /v1/reference-data/locations/hotels/by-city
# ---------------------------------------------------------------------------

class HotelAddress(AmadeusModel):
    lines: Optional[List[Optional[str]]] = None
    city_name: Optional[str] = None
    postal_code: Optional[str] = None
    country_code: Optional[str] = None

    @field_validator("lines", mode="before")
    @classmethod
    def _ignore_malformed_lines(cls, value: Any) -> Any:
        # only a list of lines is used; anything else is skipped
        if not isinstance(value, list):
            return None
        return [line if isinstance(line, str) else None for line in value]

    @field_validator("postal_code", mode="before")
    @classmethod
    def _postal_code_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class HotelRecord(AmadeusModel):
    name: str
    hotel_id: str
    address: Union[HotelAddress, str, None] = None
    rating: Optional[Union[int, float, str]] = None


class HotelListResponse(AmadeusModel):
    data: List[HotelRecord]


# ---------------------------------------------------------------------------
# GET /v3/shopping/hotel-offers
# ---------------------------------------------------------------------------

class OfferText(AmadeusModel):
    text: str
    lang: Optional[str] = None


class OfferRoom(AmadeusModel):
    description: OfferText


class OfferPrice(AmadeusModel):
    total: str
    currency: str


class Offer(AmadeusModel):
    id: str
    check_in_date: Optional[str] = None
    check_out_date: Optional[str] = None
    room: OfferRoom
    price: OfferPrice
    policies: Optional[Dict[str, Any]] = None


class OfferHotel(AmadeusModel):
    name: str
    hotel_id: Optional[str] = None


class HotelOffers(AmadeusModel):
    hotel: OfferHotel
    available: Optional[bool] = None
    offers: List[Offer] = Field(default_factory=list)


class HotelOffersResponse(AmadeusModel):
    data: List[HotelOffers] = Field(min_length=1)


# ---------------------------------------------------------------------------
# POST /v2/booking/hotel-orders
# ---------------------------------------------------------------------------

class ProviderInformation(AmadeusModel):
    confirmation_number: str


class HotelBooking(AmadeusModel):
    booking_status: Optional[str] = None
    hotel_provider_information: List[ProviderInformation] = Field(min_length=1)
    hotel_offer: Optional[Dict[str, Any]] = None


class AssociatedRecord(AmadeusModel):
    reference: str


class HotelOrder(AmadeusModel):
    hotel_bookings: List[HotelBooking]
    associated_records: List[AssociatedRecord] = Field(min_length=1)


class HotelOrderResponse(AmadeusModel):
    data: HotelOrder
