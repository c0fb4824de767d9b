"""Weather service integration and the postal code to temperature pipeline."""

from pydantic import ValidationError

from cep_weather.config import get_settings
from cep_weather.errors import (
    ExternalAPIError,
    InvalidPostalCodeError,
    PostalCodeMissingError,
)
from cep_weather.location_service.cep import is_valid_cep, normalize_cep
from cep_weather.location_service.location import get_city
from cep_weather.logging_config import logger
from cep_weather.models.temperature import TemperatureResponse
from cep_weather.models.weather import WeatherResult
from cep_weather.upstream import request_json

WEATHER_ERROR_MESSAGE = "error fetching temperature"


def get_weather_data(city: str) -> WeatherResult:
    """Fetch current weather for a city from the weather API.

    Args:
        city: City name, sent URL-encoded as the ``q`` parameter.

    Returns:
        The WeatherResult reported by WeatherAPI.

    Raises:
        ExternalAPIError: If the request fails or the payload lacks a
            Celsius temperature.
    """
    settings = get_settings()
    data = request_json(
        url=f"{settings.weather_api_base_url.rstrip('/')}/current.json",
        params={"key": settings.weather_api_key, "q": city, "aqi": "no"},
        timeout=settings.http_timeout_s,
        event_prefix="WEATHER",
        log_context={"city": city},
        error_message=WEATHER_ERROR_MESSAGE,
    )

    try:
        return WeatherResult.model_validate(data)
    except ValidationError as exc:
        logger.error("WEATHER_BAD_PAYLOAD", city=city, error=str(exc), payload=data)
        raise ExternalAPIError(WEATHER_ERROR_MESSAGE) from exc


def get_temperature(city: str) -> TemperatureResponse:
    """Return the current temperature for a city in Celsius, Fahrenheit and Kelvin.

    Only the Celsius reading is taken from the provider.
    """
    weather = get_weather_data(city)
    return TemperatureResponse.from_celsius(weather.current.temp_c)


def get_weather_for_cep(cep: str | None) -> TemperatureResponse:
    """Resolve a raw postal code to the current temperature of its city.

    Args:
        cep: Postal code as supplied by the client, possibly punctuated.

    Returns:
        The TemperatureResponse for the postal code's city.

    Raises:
        PostalCodeMissingError: If no postal code was supplied.
        InvalidPostalCodeError: If it does not normalize to 8 digits.
        PostalCodeNotFoundError: If the postal code is unknown upstream.
        ExternalAPIError: If either upstream lookup fails.
    """
    if not cep:
        raise PostalCodeMissingError()
    if not is_valid_cep(cep):
        logger.info("INVALID_CEP", cep=cep)
        raise InvalidPostalCodeError()

    cep = normalize_cep(cep)
    logger.info("LOCATION_LOOKUP", cep=cep)
    city = get_city(cep)
    temperature = get_temperature(city)
    logger.info("TEMPERATURE_FOUND", cep=cep, city=city, temp_c=temperature.temp_C)
    return temperature
