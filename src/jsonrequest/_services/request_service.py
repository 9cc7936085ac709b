from contextlib import ExitStack, contextmanager
from logging import getLogger
from typing import (
    Any,
    Iterator,
    MutableMapping,
    Optional,
    Sequence,
    Type,
    TypeVar,
    Union,
    overload,
)

from httpx import Client, HTTPError, Response, StreamError, TimeoutException
from pydantic import TypeAdapter, ValidationError

from .._utils import RequestSpec, as_body, build_request
from ..models.errors import (
    ResponseCloseError,
    ResponseDecodingError,
    ResponseStatusError,
    TooManyArgumentsError,
    TransportError,
    TransportTimeoutError,
)
from ._client_provider import ClientProvider

T = TypeVar("T")

HeaderDestination = MutableMapping[str, list[str]]


def is_success_code(status_code: int) -> bool:
    return 200 <= status_code <= 299


def check_response_code(
    response: Response, expected_status_code: Optional[int] = None
) -> None:
    """Raise a ResponseStatusError unless the status code is acceptable.

    An explicit ``expected_status_code`` takes precedence over the 2xx rule.
    For a non-2xx code the body text becomes the error message.
    """
    status_code = response.status_code
    if expected_status_code and status_code != expected_status_code:
        raise ResponseStatusError.unexpected_code(expected_status_code, status_code)

    if not is_success_code(status_code):
        raise ResponseStatusError(status_code, _read_error_message(response))


def _read_error_message(response: Response) -> Optional[str]:
    try:
        response.read()
    except (HTTPError, StreamError):
        return None
    return response.text or None


def read_body(response: Response) -> bytes:
    try:
        return response.read()
    except TimeoutException as e:
        raise TransportTimeoutError(e, operation="read response body") from e
    except (HTTPError, StreamError) as e:
        raise TransportError(e, operation="read response body") from e


def decode_response(response: Response, response_model: Type[T]) -> T:
    content = read_body(response)
    try:
        return TypeAdapter(response_model).validate_json(content)
    except ValidationError as e:
        raise ResponseDecodingError(e) from e


def populate_response_headers(
    response: Response,
    response_headers: Union[HeaderDestination, Sequence[HeaderDestination], None],
) -> None:
    """Copy every response header into ``response_headers``.

    Header names are lower-cased; each maps to the list of its values.
    """
    if response_headers is None:
        return

    if isinstance(response_headers, (list, tuple)):
        if len(response_headers) > 1:
            raise TooManyArgumentsError()
        if not response_headers:
            return
        response_headers = response_headers[0]

    for key in response.headers.keys():
        response_headers[key] = response.headers.get_list(key)


@contextmanager
def _owned_response(response: Response) -> Iterator[Response]:
    try:
        yield response
    except BaseException as error:
        try:
            response.close()
        except Exception as close_error:
            # the earlier error wins
            error.add_note(f"failed to close response: {close_error}")
        raise

    try:
        response.close()
    except Exception as e:
        raise ResponseCloseError(e) from e


class RequestService:
    """Executes JSON HTTP calls described by a RequestSpec.

    Each call builds the request, picks a client from the provider, sends the
    request, validates the status code and materializes the body. Nothing is
    retried: every failure is raised to the caller as a ``JsonRequestError``.

    Examples:
        ```python
        from jsonrequest import RequestService, RequestSpec

        service = RequestService()
        user = service.do(RequestSpec(url="https://api.example.com/me"), User)
        ```
    """

    def __init__(self, provider: Optional[ClientProvider] = None) -> None:
        self._logger = getLogger("jsonrequest")
        self._provider = provider or ClientProvider()

    @property
    def provider(self) -> ClientProvider:
        return self._provider

    @overload
    def do(
        self,
        spec: RequestSpec,
        response_model: None = None,
        response_headers: Optional[HeaderDestination] = None,
    ) -> None: ...

    @overload
    def do(
        self,
        spec: RequestSpec,
        response_model: Type[T],
        response_headers: Optional[HeaderDestination] = None,
    ) -> T: ...

    def do(
        self,
        spec: RequestSpec,
        response_model: Optional[Type[Any]] = None,
        response_headers: Optional[HeaderDestination] = None,
    ) -> Any:
        """Execute the request and decode the JSON response body.

        Args:
            spec (RequestSpec): The request to execute.
            response_model (Optional[Type]): Type the body is decoded into, e.g.
                a pydantic model, a dataclass or ``dict``. When omitted the body
                is not read and ``None`` is returned.
            response_headers (Optional[MutableMapping[str, list[str]]]): Filled
                with the response headers after a successful status check.

        Returns:
            The decoded body, or ``None`` without ``response_model``.

        Raises:
            BodyEncodingError: The request body is not JSON serializable.
            RequestConstructionError: The method or URL is malformed.
            TransportError: The request could not be sent.
            ResponseStatusError: The status code was not accepted.
            ResponseDecodingError: The body did not match ``response_model``.
            TooManyArgumentsError: More than one header destination was given.
        """
        with self._send(spec) as response:
            check_response_code(response, spec.expected_status_code)
            populate_response_headers(response, response_headers)

            if response_model is None:
                return None

            return decode_response(response, response_model)

    def do_with_string_response(self, spec: RequestSpec) -> str:
        """Same as `do` but returns the response body as text, never decoded."""
        with self._send(spec) as response:
            check_response_code(response, spec.expected_status_code)
            read_body(response)
            return response.text

    def do_with_custom_client(
        self,
        spec: RequestSpec,
        response_model: Optional[Type[Any]],
        client: Client,
    ) -> Any:
        """Same as `do` but sends the request through ``client``.

        The client is used as configured by the caller: ``spec.timeout`` is
        ignored and the client is left open.
        """
        with self._send(spec, client=client) as response:
            check_response_code(response, spec.expected_status_code)

            if response_model is None:
                return None

            return decode_response(response, response_model)

    def get(self, url: str, response_model: Optional[Type[Any]] = None) -> Any:
        return self.do(RequestSpec(url=url, method="GET"), response_model)

    def post(
        self,
        url: str,
        request_body: Any,
        response_model: Optional[Type[Any]] = None,
    ) -> Any:
        return self.do(
            RequestSpec(url=url, method="POST", body=as_body(request_body)),
            response_model,
        )

    @contextmanager
    def _send(
        self, spec: RequestSpec, client: Optional[Client] = None
    ) -> Iterator[Response]:
        with ExitStack() as stack:
            selected, owned = self._provider.select(spec.timeout, client)
            if owned:
                stack.callback(selected.close)

            request = build_request(spec, selected)

            self._logger.debug(f"Request: {request.method} {request.url}")
            try:
                response = selected.send(request, stream=True)
            except TimeoutException as e:
                raise TransportTimeoutError(e) from e
            except HTTPError as e:
                raise TransportError(e) from e
            self._logger.debug(f"Response: {response.status_code} {request.url}")

            with _owned_response(response):
                yield response
