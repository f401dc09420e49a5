"""Benchmarks for building server configs.

Run with: pytest tests/benchmarks/test_server_config.py --codspeed
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from graphql import specified_rules

from gqlserve import ServerConfig

if TYPE_CHECKING:
    from pytest_codspeed.plugin import BenchmarkFixture


OPTIONS = {
    "context": {},
    "rootValue": {},
    "errorFormatter": lambda error: {},
    "validationRules": lambda: specified_rules,
    "fieldResolver": lambda source, info: None,
    "debug": True,
    "queryBatching": True,
}


@pytest.mark.benchmark
class TestServerConfigBenchmarks:
    def test_create_from_mapping(self, benchmark: BenchmarkFixture):
        def run():
            return [ServerConfig.create(OPTIONS) for _ in range(1000)]

        benchmark(run)

    def test_fluent_setters(self, benchmark: BenchmarkFixture):
        def run():
            return [
                ServerConfig.create()
                .set_context({})
                .set_validation_rules(specified_rules)
                .set_debug(True)
                for _ in range(1000)
            ]

        benchmark(run)

    def test_resolve_lazy_rules(self, benchmark: BenchmarkFixture):
        config = ServerConfig.create(OPTIONS)

        benchmark(config.resolve_validation_rules)
