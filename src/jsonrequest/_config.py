import os

from pydantic import BaseModel, PositiveFloat

from ._utils.constants import DEFAULT_TIMEOUT, ENV_DISABLE_SSL_VERIFY


class ClientConfig(BaseModel):
    """Settings shared by every client a ClientProvider creates."""

    timeout: PositiveFloat = DEFAULT_TIMEOUT
    verify: bool = True

    @classmethod
    def from_env(cls) -> "ClientConfig":
        disable_ssl_env = os.environ.get(ENV_DISABLE_SSL_VERIFY, "").lower()
        return cls(verify=disable_ssl_env not in ("1", "true", "yes", "on"))
