import itertools
from collections.abc import Callable
from typing import Any

import nox

nox.options.reuse_existing_virtualenvs = True
nox.options.error_on_external_run = True
nox.options.default_venv_backend = "uv"

PYTHON_VERSIONS = ["3.14", "3.13", "3.12", "3.11", "3.10"]

GQL_CORE_VERSIONS = [
    "3.2.6",
    "3.3.0a9",
]

MSGSPEC_VERSIONS = [
    "0.18.6",
    "0.19.0",
]

COMMON_PYTEST_OPTIONS = [
    "--cov=gqlserve",
    "--cov-append",
    "--cov-report=xml",
    "-n",
    "auto",
    "--showlocals",
    "-vv",
    "--ignore=tests/benchmarks",
]


def _install_gql_core(session: nox.Session, version: str) -> None:
    session.run("uv", "pip", "install", f"graphql-core=={version}", external=True)


gql_core_parametrize = nox.parametrize(
    "gql_core",
    GQL_CORE_VERSIONS,
)


def with_gql_core_parametrize(name: str, params: list[str]) -> Callable[[Any], Any]:
    # github cache doesn't support comma in the name, this is a workaround.
    arg_names = f"{name}, gql_core"
    combinations = list(itertools.product(params, GQL_CORE_VERSIONS))
    ids = [f"{name}-{comb[0]}__graphql-core-{comb[1]}" for comb in combinations]
    return lambda fn: nox.parametrize(arg_names, combinations, ids=ids)(fn)


@nox.session(python=PYTHON_VERSIONS, name="Tests", tags=["tests"])
@gql_core_parametrize
def tests(session: nox.Session, gql_core: str) -> None:
    session.run_always("uv", "sync", "--group", "dev", external=True)
    _install_gql_core(session, gql_core)

    session.run("uv", "run", "--no-sync", "pytest", *COMMON_PYTEST_OPTIONS, external=True)


@nox.session(python=["3.12"], name="msgspec tests", tags=["tests"])
@with_gql_core_parametrize("msgspec", MSGSPEC_VERSIONS)
def tests_msgspec(session: nox.Session, msgspec: str, gql_core: str) -> None:
    session.run_always("uv", "sync", "--group", "dev", external=True)
    _install_gql_core(session, gql_core)
    session.run("uv", "pip", "install", f"msgspec=={msgspec}", external=True)

    session.run("uv", "run", "--no-sync", "pytest", *COMMON_PYTEST_OPTIONS, external=True)


@nox.session(python=["3.12"], name="Benchmarks", tags=["benchmarks"])
def benchmarks(session: nox.Session) -> None:
    session.run_always("uv", "sync", "--group", "dev", external=True)

    session.run(
        "uv", "run", "--no-sync",
        "pytest",
        "tests/benchmarks",
        "--override-ini=addopts=",
        "--codspeed",
        external=True,
    )


@nox.session(python=PYTHON_VERSIONS, name="Mypy", tags=["typecheck"])
def mypy(session: nox.Session) -> None:
    session.run_always("uv", "sync", "--group", "dev", external=True)

    session.run("uv", "run", "--no-sync", "mypy", "gqlserve", external=True)
