from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import msgspec
from graphql import ASTValidationRule, specified_rules

from gqlserve.exceptions import InvalidValidationRulesError
from gqlserve.types import ValidationRule, ValidationRulesFactory


class FixedRules(msgspec.Struct, frozen=True):
    """Validation rules given up front as a sequence."""

    rules: Sequence[ValidationRule]


class LazyRules(msgspec.Struct, frozen=True):
    """Validation rules produced on demand by calling `factory()`."""

    factory: ValidationRulesFactory


def _is_rules_sequence(value: Any) -> bool:
    # strings and other iterables are not rule lists
    return isinstance(value, (list, tuple))


def _is_rule_class(value: Any) -> bool:
    # a rule class is callable but needs a validation context, it is not a factory
    return isinstance(value, type) and issubclass(value, ASTValidationRule)


def classify_validation_rules(value: Any) -> FixedRules | LazyRules | None:
    """Sort a validation rules value into one of its accepted shapes.

    The elements of a sequence are not inspected and a factory is not called,
    both are checked when the rules are actually used.

    Raises:
        InvalidValidationRulesError: If `value` is not `None`, a list or tuple,
            or a callable. A single rule class is rejected too, it has to be
            wrapped in a list.
    """
    if value is None:
        return None

    if _is_rules_sequence(value):
        return FixedRules(value)

    if _is_rule_class(value):
        raise InvalidValidationRulesError(value)

    if callable(value):
        return LazyRules(value)

    raise InvalidValidationRulesError(value)


def resolve_validation_rules(value: Any) -> tuple[ValidationRule, ...]:
    """Turn a validation rules value into the rules to validate a query with.

    No rules means the standard rule set of the GraphQL specification.
    """
    source = classify_validation_rules(value)

    if source is None:
        return tuple(specified_rules)

    if isinstance(source, FixedRules):
        return tuple(source.rules)

    rules = source.factory()

    if not _is_rules_sequence(rules):
        raise InvalidValidationRulesError(rules)

    return tuple(rules)


__all__ = [
    "FixedRules",
    "LazyRules",
    "classify_validation_rules",
    "resolve_validation_rules",
]
