"""Postal code to location resolution through the ViaCEP API."""

from pydantic import ValidationError

from cep_weather.config import get_settings
from cep_weather.errors import EmptyCityError, ExternalAPIError, PostalCodeNotFoundError
from cep_weather.logging_config import logger
from cep_weather.models.location import LocationLookupResult
from cep_weather.upstream import request_json

LOCATION_ERROR_MESSAGE = "error fetching location"


def get_location(cep: str) -> LocationLookupResult:
    """Fetch address data for a normalized postal code.

    Args:
        cep: Postal code made of exactly 8 digits.

    Returns:
        The LocationLookupResult reported by ViaCEP.

    Raises:
        PostalCodeNotFoundError: If ViaCEP flags the postal code as unknown.
        EmptyCityError: If ViaCEP returns no city without flagging an error.
        ExternalAPIError: If the request fails or the payload is invalid.
    """
    settings = get_settings()
    data = request_json(
        url=f"{settings.viacep_base_url.rstrip('/')}/{cep}/json/",
        params=None,
        timeout=settings.http_timeout_s,
        event_prefix="LOCATION_LOOKUP",
        log_context={"cep": cep},
        error_message=LOCATION_ERROR_MESSAGE,
    )

    try:
        location = LocationLookupResult.model_validate(data)
    except ValidationError as exc:
        logger.error("LOCATION_LOOKUP_BAD_PAYLOAD", cep=cep, error=str(exc))
        raise ExternalAPIError(LOCATION_ERROR_MESSAGE) from exc

    if location.error:
        logger.info("LOCATION_NOT_FOUND", cep=cep)
        raise PostalCodeNotFoundError()
    if not location.city:
        logger.error("LOCATION_EMPTY_CITY", cep=cep, payload=data)
        raise EmptyCityError(LOCATION_ERROR_MESSAGE)
    return location


def get_city(cep: str) -> str:
    """Return the city name for a normalized postal code."""
    location = get_location(cep)
    logger.info("LOCATION_FOUND", cep=cep, city=location.city, state=location.state)
    return location.city
