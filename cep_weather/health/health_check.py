"""Health checks for the ViaCEP and WeatherAPI upstreams."""

import httpx

from cep_weather.config import get_settings
from cep_weather.logging_config import logger
from cep_weather.models.health import ServiceStatus

HEALTH_TIMEOUT_S = 5
PROBE_CEP = "01001000"
PROBE_CITY = "Sao Paulo"


async def _probe(url: str, params: dict | None, expected_key: str) -> bool:
    """GET an upstream URL and check the JSON body carries a non-empty key."""
    async with httpx.AsyncClient(timeout=HEALTH_TIMEOUT_S) as client:
        response = await client.get(url, params=params)
    if response.status_code != 200:
        return False
    payload = response.json()
    return isinstance(payload, dict) and bool(payload.get(expected_key))


async def is_location_api_available() -> ServiceStatus:
    """Check ViaCEP by resolving a well-known postal code.

    Returns:
        ServiceStatus.available when ViaCEP answers with a city, else not_available.
    """
    settings = get_settings()
    try:
        if await _probe(
            f"{settings.viacep_base_url.rstrip('/')}/{PROBE_CEP}/json/",
            None,
            "localidade",
        ):
            return ServiceStatus.available
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("LOCATION_API_UNAVAILABLE", error=str(exc))
        return ServiceStatus.not_available
    logger.error("LOCATION_API_UNAVAILABLE")
    return ServiceStatus.not_available


async def is_weather_api_available() -> ServiceStatus:
    """Check WeatherAPI for availability with the configured key.

    Returns:
        ServiceStatus.available when the API responds with current weather data.
    """
    settings = get_settings()
    try:
        if await _probe(
            f"{settings.weather_api_base_url.rstrip('/')}/current.json",
            {"key": settings.weather_api_key, "q": PROBE_CITY, "aqi": "no"},
            "current",
        ):
            return ServiceStatus.available
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("WEATHER_API_UNAVAILABLE", error=str(exc))
        return ServiceStatus.not_available
    logger.error("WEATHER_API_UNAVAILABLE")
    return ServiceStatus.not_available
