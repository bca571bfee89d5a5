from .auth import fetch_access_token, request_token
from .errors import AmadeusError, MappingError, TransportError, UpstreamRejection
