"""Serve the application with uvicorn."""

import uvicorn

from cep_weather.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "cep_weather.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
