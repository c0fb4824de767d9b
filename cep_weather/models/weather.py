"""Weather models for the WeatherAPI current conditions payload."""

from pydantic import BaseModel


class WeatherLocation(BaseModel):
    """Location block of a WeatherAPI response."""

    name: str = ""
    region: str = ""
    country: str = ""


class CurrentConditions(BaseModel):
    """Current conditions block of a WeatherAPI response."""

    temp_c: float
    temp_f: float | None = None


class WeatherResult(BaseModel):
    """Current weather as reported by the weather provider."""

    location: WeatherLocation = WeatherLocation()
    current: CurrentConditions
