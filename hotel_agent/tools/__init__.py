from .base import ApiTool, ToolDescriptor, ToolFailure, ToolResult, ToolSuccess
from .access_token import request_access_token
from .hotel_list import hotel_list_by_city, format_address
from .hotel_search import hotel_search
from .hotel_booking import book_hotel

ALL_TOOLS = [request_access_token, hotel_list_by_city, hotel_search, book_hotel]
