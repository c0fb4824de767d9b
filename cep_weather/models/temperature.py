"""Temperature response model and unit conversions."""

from pydantic import BaseModel


def to_fahrenheit(celsius: float) -> float:
    return celsius * 1.8 + 32


def to_kelvin(celsius: float) -> float:
    """Convert Celsius to Kelvin using a whole-degree offset of 273."""
    return celsius + 273


class TemperatureResponse(BaseModel):
    """Temperature payload exposed by the API."""

    temp_C: float
    temp_F: float
    temp_K: float

    @classmethod
    def from_celsius(cls, celsius: float) -> "TemperatureResponse":
        """Create a TemperatureResponse deriving the other units from Celsius.

        Args:
            celsius: Temperature in degrees Celsius.

        Returns:
            A populated TemperatureResponse.
        """
        return cls(
            temp_C=celsius,
            temp_F=to_fahrenheit(celsius),
            temp_K=to_kelvin(celsius),
        )
