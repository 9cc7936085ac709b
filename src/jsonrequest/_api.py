"""Module-level shortcuts bound to a process-wide RequestService."""

from typing import Any, Optional, Type

from httpx import Client

from ._services import RequestService
from ._services.request_service import HeaderDestination
from ._utils import RequestSpec

_default_service = RequestService()


def default_service() -> RequestService:
    return _default_service


def do(
    spec: RequestSpec,
    response_model: Optional[Type[Any]] = None,
    response_headers: Optional[HeaderDestination] = None,
) -> Any:
    """Execute ``spec`` and decode the response into ``response_model``.

    See `RequestService.do`.
    """
    return _default_service.do(spec, response_model, response_headers)


def do_with_string_response(spec: RequestSpec) -> str:
    return _default_service.do_with_string_response(spec)


def do_with_custom_client(
    spec: RequestSpec, response_model: Optional[Type[Any]], client: Client
) -> Any:
    return _default_service.do_with_custom_client(spec, response_model, client)


def get(url: str, response_model: Optional[Type[Any]] = None) -> Any:
    """Convenience wrapper for `do` executing a GET request."""
    return _default_service.get(url, response_model)


def post(
    url: str, request_body: Any, response_model: Optional[Type[Any]] = None
) -> Any:
    """Convenience wrapper for `do` executing a POST request."""
    return _default_service.post(url, request_body, response_model)
