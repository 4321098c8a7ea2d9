import json

import pytest
import requests

from shopappstore.core.bulk import BulkAggregator
from shopappstore.core.errors import ErrorKind, HttpError, ResourceError, TransportError
from shopappstore.core.models import Resource
from shopappstore.sdk.config import SdkConfig
from shopappstore.sdk.errors import ConfigError
from shopappstore.sdk.transport import HttpTransport


class FakeResponse:
    def __init__(self, status_code: int, payload=None, text: str | None = None):
        self.status_code = status_code
        self.payload = payload
        self.text = text if text is not None else json.dumps(payload)
        self.headers = {"Content-Type": "application/json"}

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self.payload is None:
            raise ValueError("no json")
        return self.payload


class FakeSession:
    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.requests = []

    def post(self, url, headers=None, json=None, timeout=None):
        self.requests.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def _config() -> SdkConfig:
    return SdkConfig(entrypoint="https://shop.example/", token="secret", timeout=7)


def test_requires_entrypoint():
    with pytest.raises(ConfigError):
        HttpTransport(SdkConfig())


def test_bulk_request_posts_calls():
    payload = {"items": [{"id": "a", "code": 200, "body": {"list": []}}]}
    session = FakeSession(FakeResponse(200, payload))
    transport = HttpTransport(_config(), session=session)

    response = transport.bulk_request([{"id": "a", "name": "orders"}])

    assert response["headers"]["Code"] == 200
    assert response["data"] == payload
    sent = session.requests[0]
    assert sent["url"] == "https://shop.example/webapi/rest/bulk"
    assert sent["headers"]["Authorization"] == "Bearer secret"
    assert sent["json"] == [{"id": "a", "name": "orders"}]
    assert sent["timeout"] == 7


def test_http_failure_is_chained():
    session = FakeSession(FakeResponse(404, {"error": "not_found"}))
    transport = HttpTransport(_config(), session=session)

    with pytest.raises(TransportError) as excinfo:
        transport.bulk_request([])

    http_error = excinfo.value.http_error
    assert isinstance(http_error, HttpError)
    assert http_error.status_code == 404
    assert http_error.response == {"error": "not_found"}


def test_non_json_failure_keeps_text_body():
    session = FakeSession(FakeResponse(502, None, text="Bad Gateway"))
    with pytest.raises(TransportError) as excinfo:
        HttpTransport(_config(), session=session).bulk_request([])
    assert excinfo.value.http_error.response == "Bad Gateway"


def test_network_failure_has_no_http_cause():
    session = FakeSession(error=requests.ConnectionError("refused"))
    with pytest.raises(TransportError) as excinfo:
        HttpTransport(_config(), session=session).bulk_request([])
    assert excinfo.value.http_error is None
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_non_json_success_body_fails_bulk_get():
    session = FakeSession(FakeResponse(200, None, text="<html>maintenance</html>"))
    aggregator = BulkAggregator(HttpTransport(_config(), session=session))
    with pytest.raises(ResourceError) as excinfo:
        aggregator.get({"a": Resource(name="orders")})
    assert excinfo.value.kind is ErrorKind.RESOURCE
