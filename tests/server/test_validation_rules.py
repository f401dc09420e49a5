"""Tests for classifying and resolving validation rules."""

import types

import msgspec
import pytest
from graphql import ExecutableDefinitionsRule, NoUnusedFragmentsRule, specified_rules

from gqlserve import InvalidValidationRulesError, ServerConfig
from gqlserve.server.validation_rules import (
    FixedRules,
    LazyRules,
    classify_validation_rules,
    resolve_validation_rules,
)


class TestClassify:
    def test_none(self):
        assert classify_validation_rules(None) is None

    def test_list(self):
        rules = [ExecutableDefinitionsRule]

        source = classify_validation_rules(rules)

        assert isinstance(source, FixedRules)
        assert source.rules is rules

    def test_empty_tuple(self):
        source = classify_validation_rules(())

        assert source == FixedRules(())

    def test_elements_are_not_checked(self):
        source = classify_validation_rules([1, "two"])

        assert isinstance(source, FixedRules)

    def test_callable(self):
        def factory():
            return [ExecutableDefinitionsRule]

        source = classify_validation_rules(factory)

        assert isinstance(source, LazyRules)
        assert source.factory is factory

    def test_rejects_rule_class(self):
        with pytest.raises(InvalidValidationRulesError) as exc_info:
            classify_validation_rules(NoUnusedFragmentsRule)

        assert exc_info.value.value is NoUnusedFragmentsRule
        assert exc_info.value.type_name == type(NoUnusedFragmentsRule).__name__

    def test_factory_class_is_accepted(self):
        class RulesFactory:
            def __call__(self):
                return [NoUnusedFragmentsRule]

        source = classify_validation_rules(RulesFactory())

        assert isinstance(source, LazyRules)

    @pytest.mark.parametrize(
        ("value", "type_name"),
        [
            (types.SimpleNamespace(), "SimpleNamespace"),
            ("rules", "str"),
            ({"rule": ExecutableDefinitionsRule}, "dict"),
            (42, "int"),
        ],
    )
    def test_rejects_other_values(self, value, type_name):
        with pytest.raises(InvalidValidationRulesError) as exc_info:
            classify_validation_rules(value)

        assert exc_info.value.value is value
        assert exc_info.value.type_name == type_name


class TestResolve:
    def test_none_uses_specified_rules(self):
        assert resolve_validation_rules(None) == tuple(specified_rules)

    def test_fixed_rules(self):
        rules = [ExecutableDefinitionsRule, NoUnusedFragmentsRule]

        assert resolve_validation_rules(rules) == (
            ExecutableDefinitionsRule,
            NoUnusedFragmentsRule,
        )

    def test_empty_rules_disable_validation(self):
        assert resolve_validation_rules([]) == ()

    def test_lazy_rules_are_called_on_every_resolve(self):
        calls = []

        def factory():
            calls.append(True)
            return [NoUnusedFragmentsRule]

        assert resolve_validation_rules(factory) == (NoUnusedFragmentsRule,)
        assert resolve_validation_rules(factory) == (NoUnusedFragmentsRule,)
        assert len(calls) == 2

    def test_lazy_rules_returning_invalid_value(self):
        with pytest.raises(
            InvalidValidationRulesError, match="but got instance of NoneType"
        ):
            resolve_validation_rules(lambda: None)


class TestServerConfigResolve:
    def test_defaults_to_specified_rules(self):
        config = ServerConfig.create()

        assert config.resolve_validation_rules() == tuple(specified_rules)

    def test_does_not_replace_stored_factory(self):
        def factory():
            return (ExecutableDefinitionsRule,)

        config = ServerConfig.create({"validationRules": factory})

        assert config.resolve_validation_rules() == (ExecutableDefinitionsRule,)
        assert config.get_validation_rules() is factory


class TestRuleShapes:
    def test_fixed_rules_fields(self):
        fields = msgspec.structs.fields(FixedRules)

        assert [field.name for field in fields] == ["rules"]

    def test_lazy_rules_fields(self):
        fields = msgspec.structs.fields(LazyRules)

        assert [field.name for field in fields] == ["factory"]
