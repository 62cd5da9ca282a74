"""Shared pytest fixtures for typecomb tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

import typecomb as t
from typecomb.combinators.irreducible import IRREDUCIBLE_REGISTRY
from typecomb.update import commands as commands_module
from typecomb.util import DEFAULT_MAX_VALUE_REPR, reset_failure_hook, set_max_value_repr


@pytest.fixture(autouse=True)
def _restore_engine_state() -> Generator[None]:
    """Restore process-wide registries and the failure hook after each test."""
    saved_commands = dict(commands_module.COMMAND_REGISTRY)
    saved_irreducibles = dict(IRREDUCIBLE_REGISTRY)
    saved_frozen = commands_module._frozen
    yield
    commands_module.COMMAND_REGISTRY.clear()
    commands_module.COMMAND_REGISTRY.update(saved_commands)
    commands_module._frozen = saved_frozen
    IRREDUCIBLE_REGISTRY.clear()
    IRREDUCIBLE_REGISTRY.update(saved_irreducibles)
    reset_failure_hook()
    set_max_value_repr(DEFAULT_MAX_VALUE_REPR)


@pytest.fixture
def point() -> t.StructType:
    """A fresh two-field struct (fresh so methods can still be attached)."""
    return t.struct({"x": t.Num, "y": t.Num}, "Point")


@pytest.fixture
def recorded_failures() -> list[t.TypeCombError]:
    """Install a non-raising failure hook that records errors and returns None."""
    failures: list[t.TypeCombError] = []

    def hook(error: t.TypeCombError) -> None:
        failures.append(error)

    t.set_failure_hook(hook)
    return failures
