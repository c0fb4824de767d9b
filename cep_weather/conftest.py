import pytest

from cep_weather.config import get_settings


@pytest.fixture(autouse=True)
def settings_env(monkeypatch):
    monkeypatch.setenv("WEATHER_API_KEY", "test-key")
    monkeypatch.setenv("VIACEP_BASE_URL", "https://viacep.com.br/ws")
    monkeypatch.setenv("WEATHER_API_BASE_URL", "http://api.weatherapi.com/v1")
    monkeypatch.setenv("HTTP_TIMEOUT_S", "10")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
