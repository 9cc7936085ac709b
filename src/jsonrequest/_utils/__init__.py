from ._http_config import get_httpx_client_kwargs
from ._logs import setup_logging
from ._maps import reformat_map
from ._request_builder import build_request, build_url, encode_body
from ._request_spec import Body, JsonBody, RequestSpec, StreamBody, as_body
from ._user_agent import user_agent_value

__all__ = [
    "Body",
    "JsonBody",
    "RequestSpec",
    "StreamBody",
    "as_body",
    "build_request",
    "build_url",
    "encode_body",
    "get_httpx_client_kwargs",
    "reformat_map",
    "setup_logging",
    "user_agent_value",
]
