from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .._config import ClientConfig


def get_httpx_client_kwargs(
    config: "ClientConfig", timeout: Optional[float] = None
) -> Dict[str, Any]:
    """Get standardized httpx client configuration.

    Redirects are never followed: the first response, 3xx included, is
    returned to the caller as-is.
    """
    client_kwargs: Dict[str, Any] = {
        "follow_redirects": False,
        "timeout": timeout if timeout else config.timeout,
        "verify": config.verify,
    }

    # HTTP_PROXY, HTTPS_PROXY, NO_PROXY are read by httpx by default

    return client_kwargs
