import asyncio

import httpx

from cep_weather.health.health_check import (
    is_location_api_available,
    is_weather_api_available,
)
from cep_weather.models.health import ServiceStatus


def use_transport(monkeypatch, handler):
    real_async_client = httpx.AsyncClient

    def client_factory(**kwargs):
        return real_async_client(transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr("cep_weather.health.health_check.httpx.AsyncClient", client_factory)


def test_location_api_available(monkeypatch):
    def handler(request: httpx.Request):
        assert request.url.path == "/ws/01001000/json/"
        return httpx.Response(200, json={"cep": "01001-000", "localidade": "São Paulo"})

    use_transport(monkeypatch, handler)
    assert asyncio.run(is_location_api_available()) == ServiceStatus.available


def test_location_api_not_available_on_bad_status(monkeypatch):
    use_transport(monkeypatch, lambda request: httpx.Response(503, text="down"))
    assert asyncio.run(is_location_api_available()) == ServiceStatus.not_available


def test_location_api_not_available_on_connection_error(monkeypatch):
    def handler(request: httpx.Request):
        raise httpx.ConnectError("connection refused", request=request)

    use_transport(monkeypatch, handler)
    assert asyncio.run(is_location_api_available()) == ServiceStatus.not_available


def test_weather_api_available(monkeypatch):
    def handler(request: httpx.Request):
        assert request.url.params["key"] == "test-key"
        return httpx.Response(200, json={"current": {"temp_c": 22.0}})

    use_transport(monkeypatch, handler)
    assert asyncio.run(is_weather_api_available()) == ServiceStatus.available


def test_weather_api_not_available_on_bad_json(monkeypatch):
    use_transport(monkeypatch, lambda request: httpx.Response(200, text="<html>"))
    assert asyncio.run(is_weather_api_available()) == ServiceStatus.not_available
