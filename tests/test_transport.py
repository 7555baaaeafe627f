from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from churn_form.client.transport import PredictionClient, PredictionResponse
from churn_form.errors import DecodeError, HttpStatusError, PredictionError, TransportError
from churn_form.form.features import to_payload


def test_predict_decodes_body(make_client, features) -> None:
    client = make_client(lambda request: httpx.Response(200, json={"prediction": "Yes", "probability": 0.82}))
    result = asyncio.run(client.predict(features))
    assert result == PredictionResponse(prediction="Yes", probability=0.82)


@pytest.mark.parametrize("status_code", [400, 404, 422, 500, 503])
def test_non_success_status(make_client, features, status_code: int) -> None:
    client = make_client(lambda request: httpx.Response(status_code, json={"detail": "nope"}))

    with pytest.raises(HttpStatusError) as excinfo:
        asyncio.run(client.predict(features))

    assert excinfo.value.status_code == status_code
    assert excinfo.value.user_message == f"HTTP error! status: {status_code}"


def test_timeout_is_a_transport_error(make_client, features) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = make_client(handler)
    with pytest.raises(TransportError) as excinfo:
        asyncio.run(client.predict(features))
    assert excinfo.value.user_message == "Failed to get prediction"


def test_empty_body_is_decode_error(make_client, features) -> None:
    client = make_client(lambda request: httpx.Response(204))
    with pytest.raises(DecodeError):
        asyncio.run(client.predict(features))


def test_error_hierarchy() -> None:
    for error in (TransportError, HttpStatusError, DecodeError):
        assert issubclass(error, PredictionError)


def test_from_config_defaults() -> None:
    client = PredictionClient.from_config({})
    assert client.endpoint == "http://localhost:8000/predict"
    assert client.timeout is None
    assert client.retries == 0


@pytest.mark.parametrize("status_code", [307, 308])
def test_redirect_is_followed(make_client, features, status_code: int) -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        if request.url.path == "/predict":
            return httpx.Response(status_code, headers={"Location": "/v2/predict"})
        assert json.loads(request.content) == to_payload(features)
        return httpx.Response(200, json={"prediction": "Yes", "probability": 0.8})

    client = make_client(handler)
    result = asyncio.run(client.predict(features))

    assert result == PredictionResponse(prediction="Yes", probability=0.8)
    assert seen == [("POST", "/predict"), ("POST", "/v2/predict")]


def test_redirect_to_error_status(make_client, features) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/predict":
            return httpx.Response(307, headers={"Location": "/v2/predict"})
        return httpx.Response(502)

    client = make_client(handler)
    with pytest.raises(HttpStatusError) as excinfo:
        asyncio.run(client.predict(features))
    assert excinfo.value.status_code == 502
