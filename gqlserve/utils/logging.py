from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from gqlserve.exceptions import ConfigurationError


class ServerLogger:
    logger: Final[logging.Logger] = logging.getLogger("gqlserve")

    @classmethod
    def option_applied(cls, option_name: str, **logger_kwargs: Any) -> None:
        cls.logger.debug("Applied server config option %r", option_name, **logger_kwargs)

    @classmethod
    def option_rejected(
        cls,
        option_name: str,
        error: ConfigurationError,
        **logger_kwargs: Any,
    ) -> None:
        cls.logger.debug(
            "Rejected server config option %r: %s", option_name, error, **logger_kwargs
        )


__all__ = ["ServerLogger"]
