from ._api import (
    default_service,
    do,
    do_with_custom_client,
    do_with_string_response,
    get,
    post,
)
from ._config import ClientConfig
from ._services import ClientProvider, RequestService, get_client
from ._utils import (
    JsonBody,
    RequestSpec,
    StreamBody,
    as_body,
    reformat_map,
    setup_logging,
)
from ._utils.constants import DEFAULT_TIMEOUT
from .models import (
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
    "DEFAULT_TIMEOUT",
    "BodyEncodingError",
    "ClientConfig",
    "ClientProvider",
    "JsonBody",
    "JsonRequestError",
    "RequestConstructionError",
    "RequestService",
    "RequestSpec",
    "ResponseCloseError",
    "ResponseDecodingError",
    "ResponseStatusError",
    "StreamBody",
    "TooManyArgumentsError",
    "TransportError",
    "TransportTimeoutError",
    "as_body",
    "default_service",
    "do",
    "do_with_custom_client",
    "do_with_string_response",
    "get",
    "get_client",
    "post",
    "reformat_map",
    "setup_logging",
]
