from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final
from typing_extensions import Self

from gqlserve.exceptions import ConfigurationError, UnknownOptionError
from gqlserve.utils.logging import ServerLogger

from .options import ServerOptions
from .validation_rules import classify_validation_rules, resolve_validation_rules

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from graphql import GraphQLSchema

    from gqlserve.types import (
        ErrorFormatter,
        ErrorsHandler,
        FieldResolver,
        PersistedQueryLoader,
        PromiseAdapter,
        ValidationRule,
        ValidationRulesValue,
    )


class ServerConfig:
    """Configuration for a GraphQL server.

    Build it with fluent setters:

    ```python
    config = (
        ServerConfig.create()
        .set_schema(schema)
        .set_root_value(root)
        .set_debug(True)
    )
    ```

    or in one go from a mapping of option names to values:

    ```python
    config = ServerConfig.create({"schema": schema, "rootValue": root, "debug": True})
    ```

    Only the validation rules are checked when assigned, every other value is
    stored as given and used by the execution pipeline later on. The config is
    not synchronized, finish configuring it before sharing it between threads
    or tasks.
    """

    __slots__ = (
        "_schema",
        "_context",
        "_root_value",
        "_error_formatter",
        "_errors_handler",
        "_promise_adapter",
        "_validation_rules",
        "_field_resolver",
        "_persistent_query_loader",
        "_debug",
        "_query_batching",
    )

    def __init__(self) -> None:
        self._schema: GraphQLSchema | None = None
        self._context: Any = None
        self._root_value: Any = None
        self._error_formatter: ErrorFormatter | None = None
        self._errors_handler: ErrorsHandler | None = None
        self._promise_adapter: PromiseAdapter | None = None
        self._validation_rules: ValidationRulesValue = None
        self._field_resolver: FieldResolver | None = None
        self._persistent_query_loader: PersistedQueryLoader | None = None
        self._debug: bool = False
        self._query_batching: bool = False

    @classmethod
    def create(cls, config: Mapping[str, Any] | None = None) -> Self:
        """Create a config, optionally applying every entry of `config`.

        Each key must be one of the option names from `option_names()` and
        its value goes through the matching setter.

        Raises:
            UnknownOptionError: If a key is not a recognized option name.
            InvalidValidationRulesError: If `validationRules` has an invalid shape.
        """
        instance = cls()

        if not config:
            return instance

        for option_name, value in config.items():
            try:
                setter = _OPTION_SETTERS.get(option_name)

                if setter is None:
                    raise UnknownOptionError(option_name)

                setter(instance, value)
            except ConfigurationError as error:
                ServerLogger.option_rejected(option_name, error)
                raise

            ServerLogger.option_applied(option_name)

        return instance

    def get_schema(self) -> GraphQLSchema | None:
        return self._schema

    def set_schema(self, schema: GraphQLSchema | None) -> Self:
        self._schema = schema
        return self

    def get_context(self) -> Any:
        return self._context

    def set_context(self, context: Any) -> Self:
        """Set the value passed to resolvers as `info.context`."""
        self._context = context
        return self

    def get_root_value(self) -> Any:
        return self._root_value

    def set_root_value(self, root_value: Any) -> Self:
        self._root_value = root_value
        return self

    def get_error_formatter(self) -> ErrorFormatter | None:
        return self._error_formatter

    def set_error_formatter(self, error_formatter: ErrorFormatter | None) -> Self:
        """Set the callable that turns a single error into its response form."""
        self._error_formatter = error_formatter
        return self

    def get_errors_handler(self) -> ErrorsHandler | None:
        return self._errors_handler

    def set_errors_handler(self, errors_handler: ErrorsHandler | None) -> Self:
        """Set the callable that receives all errors plus the formatter.

        Useful to log, filter or reorder errors before they are formatted.
        """
        self._errors_handler = errors_handler
        return self

    def get_promise_adapter(self) -> PromiseAdapter | None:
        return self._promise_adapter

    def set_promise_adapter(self, promise_adapter: PromiseAdapter | None) -> Self:
        self._promise_adapter = promise_adapter
        return self

    def get_validation_rules(self) -> ValidationRulesValue:
        return self._validation_rules

    def set_validation_rules(self, validation_rules: ValidationRulesValue) -> Self:
        """Set the rules used to validate incoming queries.

        Accepts `None`, a list or tuple of rules, or a callable taking no
        arguments that returns such a list. The callable is stored as is and
        only called by `resolve_validation_rules`.

        Raises:
            InvalidValidationRulesError: For a value of any other shape, the
                previous rules are left untouched.
        """
        classify_validation_rules(validation_rules)

        self._validation_rules = validation_rules
        return self

    def resolve_validation_rules(self) -> tuple[ValidationRule, ...]:
        """Return the rules to validate a query with, calling a rules factory if set.

        Falls back to the standard `specified_rules` when no rules are set.
        """
        return resolve_validation_rules(self._validation_rules)

    def get_field_resolver(self) -> FieldResolver | None:
        return self._field_resolver

    def set_field_resolver(self, field_resolver: FieldResolver | None) -> Self:
        """Set the resolver used for fields that don't define their own."""
        self._field_resolver = field_resolver
        return self

    def get_persistent_query_loader(self) -> PersistedQueryLoader | None:
        return self._persistent_query_loader

    def set_persistent_query_loader(
        self, persistent_query_loader: PersistedQueryLoader | None
    ) -> Self:
        """Set the callable that loads a persisted query by its id."""
        self._persistent_query_loader = persistent_query_loader
        return self

    def get_debug(self) -> bool:
        return self._debug

    def set_debug(self, debug: bool) -> Self:
        """Include debugging information (messages, traces) in formatted errors."""
        self._debug = debug
        return self

    def get_query_batching(self) -> bool:
        return self._query_batching

    def set_query_batching(self, query_batching: bool) -> Self:
        """Allow several operations to be sent in a single request."""
        self._query_batching = query_batching
        return self

    def to_options(self) -> ServerOptions:
        """Snapshot the current values as `ServerOptions`."""
        return ServerOptions(
            schema=self._schema,
            context=self._context,
            root_value=self._root_value,
            error_formatter=self._error_formatter,
            errors_handler=self._errors_handler,
            promise_adapter=self._promise_adapter,
            validation_rules=self._validation_rules,
            field_resolver=self._field_resolver,
            persistent_query_loader=self._persistent_query_loader,
            debug=self._debug,
            query_batching=self._query_batching,
        )

    def __repr__(self) -> str:
        slots = ", ".join(
            f"{name.lstrip('_')}={getattr(self, name)!r}" for name in self.__slots__
        )
        return f"{self.__class__.__name__}({slots})"


# bulk option key to the setter it goes through, see `option_names()`
_OPTION_SETTERS: Final[dict[str, Callable[[ServerConfig, Any], ServerConfig]]] = {
    "schema": ServerConfig.set_schema,
    "context": ServerConfig.set_context,
    "rootValue": ServerConfig.set_root_value,
    "errorFormatter": ServerConfig.set_error_formatter,
    "errorsHandler": ServerConfig.set_errors_handler,
    "promiseAdapter": ServerConfig.set_promise_adapter,
    "validationRules": ServerConfig.set_validation_rules,
    "fieldResolver": ServerConfig.set_field_resolver,
    "persistentQueryLoader": ServerConfig.set_persistent_query_loader,
    "debug": ServerConfig.set_debug,
    "queryBatching": ServerConfig.set_query_batching,
}


__all__ = ["ServerConfig"]
