"""Excecoes utilitarias compartilhadas."""

from .exceptions import (
    ConfigurationMissingError,
    EventProxyError,
    InputParseError,
    MethodNotAllowedError,
    UpstreamRequestError,
    ValidationFailedError,
)

__all__ = [
    "ConfigurationMissingError",
    "EventProxyError",
    "InputParseError",
    "MethodNotAllowedError",
    "UpstreamRequestError",
    "ValidationFailedError",
]
