from ._client_provider import ClientProvider, get_client
from .request_service import (
    RequestService,
    check_response_code,
    is_success_code,
    populate_response_headers,
)

__all__ = [
    "ClientProvider",
    "RequestService",
    "check_response_code",
    "get_client",
    "is_success_code",
    "populate_response_headers",
]
