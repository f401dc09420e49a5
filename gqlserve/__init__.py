"""Configuration for GraphQL servers."""

from .exceptions import (
    ConfigurationError,
    InvalidValidationRulesError,
    UnknownOptionError,
)
from .server import ServerConfig, ServerOptions, option_names

__all__ = [
    "ConfigurationError",
    "InvalidValidationRulesError",
    "ServerConfig",
    "ServerOptions",
    "UnknownOptionError",
    "option_names",
]
