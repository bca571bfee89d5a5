"""
Hotel booking through the Amadeus Hotel Booking API v2.

The request books a single room for the first guest; the remaining guests
are listed on the order. The first guest's email doubles as the travel
agent contact.
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import Field

from ..amadeus import http
from ..amadeus.auth import fetch_access_token
from ..amadeus.models import HotelOrderResponse, decode
from .base import CamelModel, api_tool

logger = logging.getLogger(__name__)

HOTEL_ORDERS_PATH = "/v2/booking/hotel-orders"


class Guest(CamelModel):
    title: str
    first_name: str
    last_name: str
    phone: str
    email: str


class BookHotelArgs(CamelModel):
    guests: List[Guest] = Field(..., min_length=1)
    hotel_offer_id: str = Field(..., min_length=1)
    card_vendor_code: str
    card_number: str
    expiry_date: str = Field(..., pattern=r"^\d{4}-\d{2}$")
    holder_name: str


class BookingConfirmation(CamelModel):
    booking_status: Optional[str] = None
    confirmation_number: str
    hotel_offer_details: Optional[Dict[str, Any]] = None


class BookingResult(CamelModel):
    booking_confirmation_list: List[BookingConfirmation]
    reference: str


def build_order_body(args: BookHotelArgs) -> Dict[str, Any]:
    """Build the hotel-order request body; guests get tids 1..N in order."""
    guests = [{"tid": index, **guest.dump()} for index, guest in enumerate(args.guests, start=1)]
    return {
        "data": {
            "type": "hotel-order",
            "guests": guests,
            "travelAgent": {"contact": {"email": args.guests[0].email}},
            "roomAssociations": [
                {
                    "guestReferences": [{"guestReference": "1"}],
                    "hotelOfferId": args.hotel_offer_id,
                }
            ],
            "payment": {
                "method": "CREDIT_CARD",
                "paymentCard": {
                    "paymentCardInfo": {
                        "vendorCode": args.card_vendor_code,
                        "cardNumber": args.card_number,
                        "expiryDate": args.expiry_date,
                        "holderName": args.holder_name,
                    }
                },
            },
        }
    }


_GUEST_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "description": "Guest's title"},
        "firstName": {"type": "string", "description": "Guest's first name"},
        "lastName": {"type": "string", "description": "Guest's last name"},
        "phone": {"type": "string", "description": "Guest's phone number"},
        "email": {"type": "string", "description": "Guest's email"},
    },
    "required": ["title", "firstName", "lastName", "phone", "email"],
}


@api_tool(
    name="book_hotel",
    description="Book a hotel using Amadeus API.",
    parameters={
        "type": "object",
        "properties": {
            "guests": {
                "type": "array",
                "description": "List of guests for the hotel booking.",
                "items": _GUEST_SCHEMA,
            },
            "hotelOfferId": {"type": "string", "description": "The hotel offer ID to book."},
            "cardVendorCode": {"type": "string", "description": "Credit Card Vendor Code for the booking."},
            "cardNumber": {"type": "string", "description": "Credit Card Number for the booking."},
            "expiryDate": {
                "type": "string",
                "description": "Expiry date of the credit card in 'YYYY-MM' format.",
            },
            "holderName": {"type": "string", "description": "Name of the cardholder."},
        },
        "required": ["guests", "hotelOfferId", "cardVendorCode", "cardNumber", "expiryDate", "holderName"],
    },
    args_model=BookHotelArgs,
)
async def book_hotel(args: BookHotelArgs) -> Dict[str, Any]:
    token = await fetch_access_token()
    logger.info(f"Booking offer {args.hotel_offer_id} for {len(args.guests)} guest(s)")
    payload = await http.post_json(HOTEL_ORDERS_PATH, token, build_order_body(args))
    order = decode(HotelOrderResponse, payload, "hotel order").data

    result = BookingResult(
        booking_confirmation_list=[
            BookingConfirmation(
                booking_status=booking.booking_status,
                confirmation_number=booking.hotel_provider_information[0].confirmation_number,
                hotel_offer_details=booking.hotel_offer,
            )
            for booking in order.hotel_bookings
        ],
        reference=order.associated_records[0].reference,
    )
    logger.info(f"Booking {result.reference} created")
    return result.dump()
