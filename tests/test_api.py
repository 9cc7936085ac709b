import logging

import pytest
from pydantic import BaseModel
from pytest_httpx import HTTPXMock

import jsonrequest
from jsonrequest import JsonBody, RequestService, RequestSpec, ResponseStatusError


class Output(BaseModel):
    ResponseValue: str


@pytest.fixture
def url(base_url: str) -> str:
    return f"{base_url}/endpoint"


class TestModuleLevelApi:
    def test_default_service_is_shared(self):
        assert isinstance(jsonrequest.default_service(), RequestService)
        assert jsonrequest.default_service() is jsonrequest.default_service()

    def test_shared_client_is_reused(self, httpx_mock: HTTPXMock, url: str):
        httpx_mock.add_response()
        httpx_mock.add_response()
        provider = jsonrequest.default_service().provider

        jsonrequest.do(RequestSpec(url=url))
        first = provider.shared_client
        jsonrequest.do(RequestSpec(url=url))

        assert provider.shared_client is first

    def test_do(self, httpx_mock: HTTPXMock, url: str):
        httpx_mock.add_response(
            method="POST", status_code=201, json={"ResponseValue": "y"}
        )

        result = jsonrequest.do(
            RequestSpec(url=url, method="POST", body=JsonBody({"RequestValue": "x"})),
            Output,
        )

        assert result.ResponseValue == "y"

    def test_get(self, httpx_mock: HTTPXMock, url: str):
        httpx_mock.add_response(method="GET", json={"ResponseValue": "someValueOut"})

        assert jsonrequest.get(url, Output).ResponseValue == "someValueOut"

    def test_post(self, httpx_mock: HTTPXMock, url: str):
        httpx_mock.add_response(method="POST", json={"ResponseValue": "someValueOut"})

        result = jsonrequest.post(url, {"RequestValue": "someValueIn"}, Output)

        assert result.ResponseValue == "someValueOut"
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.read() == b'{"RequestValue":"someValueIn"}'

    def test_do_with_string_response(self, httpx_mock: HTTPXMock, url: str):
        httpx_mock.add_response(text="hello")

        assert jsonrequest.do_with_string_response(RequestSpec(url=url)) == "hello"

    def test_do_with_custom_client(self, httpx_mock: HTTPXMock, url: str):
        httpx_mock.add_response(json={"ResponseValue": "custom"})

        with jsonrequest.get_client() as client:
            result = jsonrequest.do_with_custom_client(
                RequestSpec(url=url), Output, client
            )

        assert result.ResponseValue == "custom"

    def test_status_error(self, httpx_mock: HTTPXMock, url: str):
        httpx_mock.add_response(status_code=500, text="boom")

        with pytest.raises(ResponseStatusError) as exc_info:
            jsonrequest.get(url)

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "boom"

    def test_debug_logging(
        self, httpx_mock: HTTPXMock, url: str, caplog: pytest.LogCaptureFixture
    ):
        httpx_mock.add_response(status_code=204)

        with caplog.at_level(logging.DEBUG, logger="jsonrequest"):
            jsonrequest.do(RequestSpec(url=url, method="DELETE"))

        assert any(
            f"Request: DELETE {url}" in record.message for record in caplog.records
        )
        assert any("Response: 204" in record.message for record in caplog.records)


class TestSetupLogging:
    def test_debug_level(self):
        logger = logging.getLogger("jsonrequest")
        previous_level = logger.level
        previous_handlers = list(logger.handlers)
        try:
            jsonrequest.setup_logging(should_debug=True)
            assert logger.level == logging.DEBUG

            jsonrequest.setup_logging()
            assert logger.level == logging.INFO
        finally:
            logger.setLevel(previous_level)
            logger.handlers = previous_handlers

    def test_repeated_calls_add_no_package_handlers(self):
        logger = logging.getLogger("jsonrequest")
        previous_level = logger.level
        previous_handlers = list(logger.handlers)
        try:
            jsonrequest.setup_logging(should_debug=True)
            jsonrequest.setup_logging(should_debug=True)

            assert logger.handlers == previous_handlers
            assert logger.propagate
        finally:
            logger.setLevel(previous_level)
