"""FastAPI application routes, middleware, and metrics."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from structlog.contextvars import bind_contextvars, clear_contextvars

from cep_weather.config import get_settings
from cep_weather.errors import (
    ExternalAPIError,
    InvalidPostalCodeError,
    PostalCodeMissingError,
    PostalCodeNotFoundError,
    WeatherServiceError,
)
from cep_weather.health.health_check import (
    is_location_api_available,
    is_weather_api_available,
)
from cep_weather.logging_config import logger
from cep_weather.models.error import ErrorResponse
from cep_weather.models.health import Dependencies, HealthResponse
from cep_weather.models.temperature import TemperatureResponse
from cep_weather.weather_service.weather import get_weather_for_cep

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "route", "status_code"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request duration in seconds", ["route"]
)
LOOKUP_COUNT = Counter(
    "cep_weather_lookups_total", "Postal code temperature lookups", ["outcome"]
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log a warning at startup when no weather API key is configured."""
    if not get_settings().weather_api_key:
        logger.warning("WEATHER_API_KEY_MISSING")
    yield


app = FastAPI(title="cep-weather", lifespan=lifespan)


@app.middleware("http")
async def cors_headers(request: Request, call_next):
    """Attach the permissive CORS headers to every response.

    Preflight ``OPTIONS`` requests are answered directly with 204. Errors that
    escape the exception handlers become a JSON 500 here, so they still carry
    the headers and the ``{"message": ...}`` body.
    """
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)
    try:
        response = await call_next(request)
    except Exception as exc:
        logger.exception("UNHANDLED_ERROR", error_type=type(exc).__name__)
        response = _error_response(500, "Unexpected error")
    response.headers.update(CORS_HEADERS)
    return response


def _route_template(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", "unmatched")


@app.middleware("http")
async def request_logging(request: Request, call_next):
    """Bind a request ID for the log context, log the request, and record metrics.

    Metrics are labelled by route template so unknown paths share one series.
    """
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    bind_contextvars(request_id=request_id)
    start = time.perf_counter()
    response = None
    try:
        response = await call_next(request)
        response.headers["x-request-id"] = request_id
        return response
    finally:
        duration_s = time.perf_counter() - start
        status_code = getattr(response, "status_code", 500)
        route = _route_template(request)
        logger.info(
            "HTTP_REQUEST",
            method=request.method,
            route=route,
            query=request.url.query,
            status_code=status_code,
            duration_ms=round(duration_s * 1000, 2),
        )
        REQUEST_COUNT.labels(
            method=request.method, route=route, status_code=status_code
        ).inc()
        REQUEST_LATENCY.labels(route=route).observe(duration_s)
        clear_contextvars()


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(message=message).model_dump()
    )


@app.exception_handler(PostalCodeMissingError)
async def postal_code_missing_handler(request: Request, exc: PostalCodeMissingError):
    """Convert a missing postal code into a 400 response."""
    LOOKUP_COUNT.labels(outcome="missing_cep").inc()
    return _error_response(400, str(exc))


@app.exception_handler(InvalidPostalCodeError)
async def invalid_postal_code_handler(request: Request, exc: InvalidPostalCodeError):
    """Convert a malformed postal code into a 422 response."""
    LOOKUP_COUNT.labels(outcome="invalid_cep").inc()
    return _error_response(422, str(exc))


@app.exception_handler(PostalCodeNotFoundError)
async def postal_code_not_found_handler(request: Request, exc: PostalCodeNotFoundError):
    """Convert postal code lookup misses into 404 responses.

    Args:
        request: Incoming HTTP request.
        exc: Raised postal code lookup error.

    Returns:
        A JSON response with the error message.
    """
    LOOKUP_COUNT.labels(outcome="not_found").inc()
    return _error_response(404, str(exc))


@app.exception_handler(ExternalAPIError)
async def external_api_error_handler(request: Request, exc: ExternalAPIError):
    """Convert upstream API failures into 500 responses.

    The exception message is a fixed, client-safe string; upstream details
    were already logged where the failure happened.

    Args:
        request: Incoming HTTP request.
        exc: Raised external API error.

    Returns:
        A JSON response with the generic error message.
    """
    logger.error("EXTERNAL_API_ERROR", error_type=type(exc).__name__)
    LOOKUP_COUNT.labels(outcome="upstream_error").inc()
    return _error_response(500, str(exc))


@app.exception_handler(WeatherServiceError)
async def weather_service_error_handler(request: Request, exc: WeatherServiceError):
    """Convert unexpected weather service errors into 500 responses.

    Args:
        request: Incoming HTTP request.
        exc: Raised weather service error.

    Returns:
        A JSON response with a generic error message.
    """
    logger.error("WEATHER_SERVICE_ERROR", error=str(exc))
    LOOKUP_COUNT.labels(outcome="error").inc()
    return _error_response(500, "Unexpected error")


@app.get("/weather", response_model=TemperatureResponse)
def get_weather_for_postal_code(cep: str | None = None) -> TemperatureResponse:
    """Fetch the current temperature for the city of a postal code.

    Args:
        cep: Postal code from the query parameter, with or without punctuation.

    Returns:
        A TemperatureResponse in Celsius, Fahrenheit and Kelvin.
    """
    temperature = get_weather_for_cep(cep)
    LOOKUP_COUNT.labels(outcome="ok").inc()
    return temperature


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report API health and upstream availability.

    Returns:
        A HealthResponse containing dependency status.
    """
    return HealthResponse.from_dependencies(
        Dependencies(
            location_api=await is_location_api_available(),
            weather_api=await is_weather_api_available(),
        )
    )


@app.get("/metrics")
async def metrics():
    """Expose Prometheus metrics for scraping."""
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
