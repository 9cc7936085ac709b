import sys
from pathlib import Path
from typing import Generator

import pytest

# Ensure local source package (src/jsonrequest) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from jsonrequest import ClientConfig, ClientProvider, RequestService  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("JSONREQUEST_DISABLE_SSL_VERIFY", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://test.example.com"


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig()


@pytest.fixture
def provider(config: ClientConfig) -> Generator[ClientProvider, None, None]:
    provider = ClientProvider(config=config)
    yield provider
    provider.close()


@pytest.fixture
def service(provider: ClientProvider) -> RequestService:
    return RequestService(provider=provider)
