"""Outbound HTTP calls to the upstream APIs."""

from typing import Any

import httpx

from cep_weather.errors import ExternalAPIError
from cep_weather.logging_config import logger


def request_json(
    *,
    url: str,
    params: dict | None,
    timeout: float,
    event_prefix: str,
    log_context: dict,
    error_message: str,
) -> Any:
    """Execute an HTTP GET and decode its JSON body with consistent logging.

    No retries are attempted: the first failure is raised to the caller.

    Args:
        url: The URL to call.
        params: Query parameters to include in the request.
        timeout: Request timeout in seconds.
        event_prefix: Log event prefix for consistent names.
        log_context: Extra log fields for all events.
        error_message: Client-safe message to wrap in ExternalAPIError.

    Returns:
        The decoded JSON payload.

    Raises:
        ExternalAPIError: On transport failures, timeouts, non-200 responses
            or bodies that are not valid JSON.
    """
    try:
        response = httpx.get(url, params=params, timeout=timeout)
    except httpx.RequestError as exc:
        logger.error(
            f"{event_prefix}_REQUEST_FAILED",
            **log_context,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        raise ExternalAPIError(error_message) from exc

    logger.info(f"{event_prefix}_RESPONSE", **log_context, status=response.status_code)
    if response.status_code != httpx.codes.OK:
        logger.error(
            f"{event_prefix}_BAD_STATUS",
            **log_context,
            status=response.status_code,
            body=response.text,
        )
        raise ExternalAPIError(error_message)

    try:
        return response.json()
    except ValueError as exc:
        logger.error(
            f"{event_prefix}_BAD_JSON",
            **log_context,
            error=str(exc),
            body=response.text,
        )
        raise ExternalAPIError(error_message) from exc
