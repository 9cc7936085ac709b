from typing import Optional

from httpx import codes


class JsonRequestError(Exception):
    """Base class for every error raised by jsonrequest.

    Attributes:
        operation: The pipeline stage that failed, e.g. ``"send request"``.
    """

    operation: str = "request"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class BodyEncodingError(JsonRequestError):
    """Raised when the request body cannot be serialized to JSON."""

    operation = "encode request body"

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"failed to parse request body to json: {cause}")


class RequestConstructionError(JsonRequestError):
    """Raised when the method or the URL of a request is malformed."""

    operation = "create request"

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f"failed to create request: {cause}")


class TransportError(JsonRequestError):
    """Raised when the request could not be sent or the response not read.

    The caller may retry these; jsonrequest never does.
    """

    operation = "send request"
    is_timeout = False

    def __init__(self, cause: BaseException, operation: Optional[str] = None) -> None:
        self.cause = cause
        if operation is not None:
            self.operation = operation
        super().__init__(f"failed to {self.operation}: {cause}")


class TransportTimeoutError(TransportError):
    """Raised when the client timeout expired during the request."""

    is_timeout = True


class ResponseStatusError(JsonRequestError):
    """The server answered with an unexpected status code.

    ``message`` is the response body text, or ``None`` when the body was
    empty or unreadable. ``str()`` falls back to the reason phrase of the
    status code in that case.
    """

    operation = "check response code"

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        self.status_code = status_code
        text = message if message is not None else codes.get_reason_phrase(status_code)
        super().__init__(text or str(status_code))
        self.message = message  # type: ignore[assignment]

    @classmethod
    def unexpected_code(cls, expected: int, actual: int) -> "ResponseStatusError":
        return cls(actual, f"expected response code {expected} but got {actual}")

    def __repr__(self) -> str:
        return (
            f"ResponseStatusError(status_code={self.status_code!r}, "
            f"message={self.message!r})"
        )


class ResponseDecodingError(JsonRequestError):
    """Raised when the response body does not match the expected JSON shape."""

    operation = "decode response body"

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(str(cause))


class TooManyArgumentsError(JsonRequestError):
    """Raised when more than one response header destination is supplied."""

    operation = "populate response headers"

    def __init__(self, message: str = "too many arguments supplied") -> None:
        super().__init__(message)


class ResponseCloseError(JsonRequestError):
    """Raised when closing the response fails and no other error occurred."""

    operation = "close response"

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"failed to close response: {cause}")
