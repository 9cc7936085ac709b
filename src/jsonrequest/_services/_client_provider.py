import threading
from logging import getLogger
from typing import Optional

from httpx import Client

from .._config import ClientConfig
from .._utils._http_config import get_httpx_client_kwargs
from ..models.errors import RequestConstructionError


def get_client(config: Optional[ClientConfig] = None) -> Client:
    """Return a new client that does not follow redirects and uses the default timeout."""
    return Client(**get_httpx_client_kwargs(config or ClientConfig.from_env()))


class ClientProvider:
    """Hands out the httpx client a call should use.

    The shared client is created lazily on first use and reused by every
    call without a timeout override. Its timeout is fixed at creation; a call
    that needs another timeout gets a private client instead.
    """

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self._logger = getLogger("jsonrequest")
        self._config = config or ClientConfig.from_env()
        self._shared: Optional[Client] = None
        self._lock = threading.Lock()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def shared_client(self) -> Client:
        client = self._shared
        if client is None:
            with self._lock:
                if self._shared is None:
                    self._logger.debug(
                        f"Creating shared client (timeout={self._config.timeout}s)"
                    )
                    self._shared = get_client(self._config)
                client = self._shared
        return client

    def select(
        self,
        timeout: Optional[float] = None,
        client: Optional[Client] = None,
    ) -> tuple[Client, bool]:
        """Pick the client for one call.

        Args:
            timeout: Per-call timeout override in seconds; ``None`` or ``0``
                selects the shared client.
            client: Caller-supplied client, used as-is.

        Returns:
            tuple[Client, bool]: The client and whether the call owns it and
            must close it when done.

        Raises:
            RequestConstructionError: ``timeout`` is negative.
        """
        if client is not None:
            return client, False

        if timeout is not None and timeout < 0:
            raise RequestConstructionError(f"invalid timeout {timeout!r}")

        if timeout:
            return Client(**get_httpx_client_kwargs(self._config, timeout)), True

        return self.shared_client, False

    def close(self) -> None:
        """Close the shared client; the next call creates a new one."""
        with self._lock:
            client, self._shared = self._shared, None
        if client is not None:
            client.close()
