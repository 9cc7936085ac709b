from .errors import (
    BodyEncodingError,
    JsonRequestError,
    RequestConstructionError,
    ResponseCloseError,
    ResponseDecodingError,
    ResponseStatusError,
    TooManyArgumentsError,
    TransportError,
    TransportTimeoutError,
)

__all__ = [
    "BodyEncodingError",
    "JsonRequestError",
    "RequestConstructionError",
    "ResponseCloseError",
    "ResponseDecodingError",
    "ResponseStatusError",
    "TooManyArgumentsError",
    "TransportError",
    "TransportTimeoutError",
]
