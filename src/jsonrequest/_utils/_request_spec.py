from dataclasses import dataclass, field
from typing import IO, Any, Iterable, Mapping, Union


@dataclass(frozen=True)
class JsonBody:
    """A request body that is serialized to JSON before sending."""

    value: Any


@dataclass(frozen=True)
class StreamBody:
    """A request body that is sent as-is.

    ``stream`` is ``bytes``, a binary file-like object or an iterable of
    ``bytes`` chunks. The caller is responsible for its content format.
    """

    stream: Union[bytes, bytearray, memoryview, IO[bytes], Iterable[bytes]]


Body = Union[JsonBody, StreamBody]


def as_body(value: Any) -> Body | None:
    """Wrap an arbitrary value into the matching body variant.

    Byte strings and binary file-like objects become a ``StreamBody``;
    anything else is treated as a value to serialize to JSON.
    """
    if value is None or isinstance(value, (JsonBody, StreamBody)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)) or hasattr(value, "read"):
        return StreamBody(value)
    return JsonBody(value)


@dataclass(frozen=True)
class RequestSpec:
    """Encapsulates the parameters of one JSON HTTP call.

    Attributes:
        url: Absolute http(s) URL, may already carry a query string.
        method: HTTP method token, defaults to ``GET``.
        headers: Headers applied over the JSON defaults. Names are
            case-insensitive and caller values win.
        body: ``JsonBody``, ``StreamBody`` or ``None`` for no payload.
        query: Parameters added to the query string of ``url``.
        timeout: Per-call timeout in seconds; ``None`` or ``0`` uses the
            shared client and its default timeout. Negative values are
            rejected.
        expected_status_code: Exact status code to require; ``None`` or ``0``
            accepts any 2xx code.
    """

    url: str
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Body | None = None
    query: Mapping[str, str] = field(default_factory=dict)
    timeout: Union[int, float] | None = None
    expected_status_code: int | None = None
