"""structlog configuration shared by the whole service."""

import logging

import structlog

from cep_weather.config import get_settings

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        getattr(logging, get_settings().log_level)
    ),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()
