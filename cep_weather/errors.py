"""Error taxonomy for postal code and weather lookups."""


class WeatherServiceError(Exception):
    """Base exception for weather service failures."""
    pass


class PostalCodeValidationError(WeatherServiceError):
    """Raised when the postal code supplied by the client is unusable."""
    pass


class PostalCodeMissingError(PostalCodeValidationError):
    """Raised when no postal code was provided."""

    def __init__(self, message: str = "postal code not provided"):
        super().__init__(message)


class InvalidPostalCodeError(PostalCodeValidationError):
    """Raised when a postal code does not normalize to 8 digits."""

    def __init__(self, message: str = "invalid zipcode"):
        super().__init__(message)


class PostalCodeNotFoundError(WeatherServiceError):
    """Raised when the geocoding provider reports the postal code as unknown."""

    def __init__(self, message: str = "can not find zipcode"):
        super().__init__(message)


class ExternalAPIError(WeatherServiceError):
    """Raised when an upstream API fails or returns an unusable payload."""
    pass


class EmptyCityError(ExternalAPIError):
    """Raised when the geocoding provider returns no city without flagging an error."""
    pass
