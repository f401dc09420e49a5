"""Registry of the options a server configuration recognizes.

The option set is closed: `ServerOptions` declares every slot together with
its default, and its camelCase encode names are the only keys accepted when a
configuration is built from a mapping.
"""

from __future__ import annotations

from typing import Any, Final

import msgspec

from gqlserve.exceptions import UnknownOptionError


class ServerOptions(msgspec.Struct, kw_only=True, rename="camel"):
    """Values of every server config option.

    Used both as the option registry and as a snapshot of a configuration,
    see `ServerConfig.to_options`.
    """

    schema: Any = None
    context: Any = None
    root_value: Any = None
    error_formatter: Any = None
    errors_handler: Any = None
    promise_adapter: Any = None
    validation_rules: Any = None
    field_resolver: Any = None
    persistent_query_loader: Any = None
    debug: bool = False
    query_batching: bool = False


def _build_registry() -> dict[str, str]:
    return {
        field_info.encode_name: field_info.name
        for field_info in msgspec.structs.fields(ServerOptions)
    }


_REGISTRY: Final[dict[str, str]] = _build_registry()


def option_names() -> tuple[str, ...]:
    """Return the recognized option keys, in declaration order."""
    return tuple(_REGISTRY)


def option_attribute(option_name: str) -> str:
    """Map a recognized option key (e.g. `rootValue`) to its slot (`root_value`).

    Raises:
        UnknownOptionError: If `option_name` is not a recognized option key.
    """
    try:
        return _REGISTRY[option_name]
    except KeyError:
        raise UnknownOptionError(option_name) from None


__all__ = ["ServerOptions", "option_attribute", "option_names"]
