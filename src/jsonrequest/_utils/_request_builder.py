import math
import re
from typing import IO, Any, Iterable, Iterator, Mapping, Optional, Union

from httpx import URL, Client, Headers, InvalidURL, Request
from pydantic_core import PydanticSerializationError, to_json, to_jsonable_python

from ..models.errors import BodyEncodingError, RequestConstructionError
from ._request_spec import Body, RequestSpec, StreamBody
from ._user_agent import user_agent_value
from .constants import (
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    STREAM_CHUNK_SIZE,
)

# RFC 7230 token
_METHOD_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

Content = Union[bytes, Iterable[bytes]]


def build_request(spec: RequestSpec, client: Optional[Client] = None) -> Request:
    """Turn a RequestSpec into a transport-ready httpx Request.

    When ``client`` is given the request is built through it so that its
    timeout, cookies and default headers apply.

    Raises:
        BodyEncodingError: The JSON body could not be serialized.
        RequestConstructionError: The method or the URL is malformed.
    """
    content = encode_body(spec.body)

    method = spec.method or "GET"
    if not _METHOD_TOKEN.fullmatch(method):
        raise RequestConstructionError(f"invalid method {method!r}")

    url = build_url(spec.url, spec.query)

    headers = Headers(
        {
            HEADER_ACCEPT: CONTENT_TYPE_JSON,
            HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
            HEADER_USER_AGENT: user_agent_value(),
        }
    )
    try:
        for key, value in spec.headers.items():
            headers[key] = value
        if client is None:
            return Request(method, url, headers=headers, content=content)
        return client.build_request(method, url, headers=headers, content=content)
    except (InvalidURL, TypeError, ValueError) as e:
        raise RequestConstructionError(e) from e


def build_url(raw_url: str, query: Mapping[str, str] | None = None) -> URL:
    """Parse ``raw_url`` and add every ``query`` pair to its query string.

    Parameters already present in the URL are kept; a key supplied in both
    places ends up with both values.
    """
    try:
        url = URL(raw_url)
    except (InvalidURL, TypeError) as e:
        raise RequestConstructionError(e) from e

    if url.scheme not in ("http", "https") or not url.host:
        raise RequestConstructionError(f"invalid URL {raw_url!r}")

    if query:
        params = url.params
        for key, value in query.items():
            params = params.add(key, value)
        url = url.copy_with(params=params)

    return url


def encode_body(body: Body | None) -> Content | None:
    if body is None:
        return None

    if isinstance(body, StreamBody):
        return _stream_content(body.stream)

    try:
        value = to_jsonable_python(body.value)
        _reject_non_finite(value)
        return to_json(value)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise BodyEncodingError(e) from e


def _reject_non_finite(value: Any) -> None:
    # NaN and Infinity have no JSON representation
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"unsupported value: {value!r}")
    if isinstance(value, dict):
        for item in value.values():
            _reject_non_finite(item)
    elif isinstance(value, list):
        for item in value:
            _reject_non_finite(item)


def _stream_content(stream) -> Content:
    if isinstance(stream, (bytes, bytearray, memoryview)):
        return bytes(stream)
    if hasattr(stream, "read"):
        return _iter_chunks(stream)
    return stream


def _iter_chunks(reader: IO[bytes]) -> Iterator[bytes]:
    while chunk := reader.read(STREAM_CHUNK_SIZE):
        yield chunk
