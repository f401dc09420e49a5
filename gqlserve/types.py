"""Shapes of the values a server configuration holds.

None of these are enforced at assignment time. They document what the
execution pipeline expects to find in each slot.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeAlias
from typing_extensions import Protocol, runtime_checkable

from graphql import ASTValidationRule, DocumentNode, GraphQLError, GraphQLFieldResolver

ValidationRule: TypeAlias = type[ASTValidationRule]
ValidationRulesFactory: TypeAlias = Callable[[], Sequence[ValidationRule]]
ValidationRulesValue: TypeAlias = Sequence[ValidationRule] | ValidationRulesFactory | None

FormattedError: TypeAlias = dict[str, Any]
ErrorFormatter: TypeAlias = Callable[[GraphQLError], FormattedError]
ErrorsHandler: TypeAlias = Callable[
    [list[GraphQLError], ErrorFormatter], list[FormattedError]
]

FieldResolver: TypeAlias = GraphQLFieldResolver

# query id and the raw request params in, query source or parsed document out
PersistedQueryLoader: TypeAlias = Callable[[str, dict[str, Any]], str | DocumentNode]


@runtime_checkable
class PromiseAdapter(Protocol):
    """Strategy the execution engine uses to create and resolve promises."""

    def is_thenable(self, value: Any) -> bool: ...

    def convert_thenable(self, thenable: Any) -> Any: ...

    def create_fulfilled(self, value: Any = None) -> Any: ...

    def create_rejected(self, reason: BaseException) -> Any: ...

    def all(self, promises: Sequence[Any]) -> Any: ...


__all__ = [
    "ErrorFormatter",
    "ErrorsHandler",
    "FieldResolver",
    "FormattedError",
    "PersistedQueryLoader",
    "PromiseAdapter",
    "ValidationRule",
    "ValidationRulesFactory",
    "ValidationRulesValue",
]
