from __future__ import annotations

from typing import Any


class ConfigurationError(Exception):
    """Raised when a server configuration value breaks an invariant.

    These errors are raised while the configuration is being assembled, before
    any request is served, so they should be treated as programming errors in
    the application wiring rather than as request failures.
    """

    message: str

    def __init__(self, message: str) -> None:
        self.message = message

        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class UnknownOptionError(ConfigurationError):
    def __init__(self, option_name: str) -> None:
        self.option_name = option_name

        message = f'Unknown server config option "{option_name}"'

        super().__init__(message)


class InvalidValidationRulesError(ConfigurationError):
    """The validation rules are neither a sequence nor a callable producing one.

    ```python
    config = ServerConfig.create()
    config.set_validation_rules(object())  # raises InvalidValidationRulesError
    ```
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        self.type_name = type(value).__name__

        message = (
            "Server config expects array of validation rules or callable "
            f"returning such array, but got instance of {self.type_name}"
        )

        super().__init__(message)


__all__ = [
    "ConfigurationError",
    "InvalidValidationRulesError",
    "UnknownOptionError",
]
