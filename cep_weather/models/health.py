"""Health check response models."""

from enum import Enum

from pydantic import BaseModel


class ServiceStatus(str, Enum):
    """Availability status for an upstream API."""

    available = "available"
    not_available = "not_available"


class Dependencies(BaseModel):
    """Availability of the two upstreams a lookup depends on."""

    location_api: ServiceStatus
    weather_api: ServiceStatus


class HealthResponse(BaseModel):
    """API health response payload.

    ``status`` is ``"ok"`` when every upstream is available and ``"degraded"``
    otherwise; the service itself keeps answering either way.
    """

    status: str
    dependencies: Dependencies

    @classmethod
    def from_dependencies(cls, dependencies: Dependencies) -> "HealthResponse":
        statuses = (dependencies.location_api, dependencies.weather_api)
        all_available = all(status == ServiceStatus.available for status in statuses)
        return cls(status="ok" if all_available else "degraded", dependencies=dependencies)
