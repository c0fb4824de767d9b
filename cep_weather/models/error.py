"""Error response model."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error payload returned to API clients."""

    message: str
