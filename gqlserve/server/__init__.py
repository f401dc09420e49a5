from .config import ServerConfig
from .options import ServerOptions, option_attribute, option_names
from .validation_rules import (
    FixedRules,
    LazyRules,
    classify_validation_rules,
    resolve_validation_rules,
)

__all__ = [
    "FixedRules",
    "LazyRules",
    "ServerConfig",
    "ServerOptions",
    "classify_validation_rules",
    "option_attribute",
    "option_names",
    "resolve_validation_rules",
]
