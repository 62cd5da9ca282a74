"""Tests for PluginManager: registration and registry contributions."""

from __future__ import annotations

from typing import Any

import pytest

import typecomb as t
from typecomb.plugins import PluginManager, hookimpl
from typecomb.update.commands import COMMAND_REGISTRY

Email = t.irreducible("Email", lambda x: isinstance(x, str) and "@" in x)


def _double(value: Any, argument: Any) -> Any:
    return value * 2


class _CommandPlugin:
    @hookimpl
    def register_update_commands(self) -> dict[str, Any]:
        return {"$double": _double}


class _IrreduciblePlugin:
    @hookimpl
    def register_irreducibles(self) -> list[t.IrreducibleType]:
        return [Email]


class _ConflictingCommandPlugin:
    @hookimpl
    def register_update_commands(self) -> dict[str, Any]:
        return {"$set": _double, "$triple": lambda v, a: v * 3}


class _BrokenPlugin:
    @hookimpl
    def register_update_commands(self) -> dict[str, Any]:
        raise RuntimeError("boom")


class _BadShapePlugin:
    @hookimpl
    def register_irreducibles(self) -> Any:
        return {"Email": Email}


class TestPluginManager:
    def test_hook_relay_accessible(self) -> None:
        pm = PluginManager()
        assert hasattr(pm.hook, "register_update_commands")
        assert hasattr(pm.hook, "register_irreducibles")

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_CommandPlugin())
        assert "_CommandPlugin" in pm.list_plugin_names()

    def test_unregister(self) -> None:
        pm = PluginManager()
        plugin = _CommandPlugin()
        pm.register_plugin(plugin, name="cmd")
        pm.unregister(plugin)
        assert "cmd" not in pm.list_plugin_names()

    def test_contributions_applied_on_load(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_CommandPlugin(), name="cmd")
        assert "$double" not in COMMAND_REGISTRY
        pm.discover_and_load()
        assert pm.is_loaded
        assert t.update(2, {"$double": None}) == 4

    def test_late_registration_applied_immediately(self) -> None:
        pm = PluginManager()
        pm.discover_and_load()
        pm.register_plugin(_IrreduciblePlugin(), name="irr")
        assert t.get_irreducible("Email") is Email

    def test_rejected_registrations_are_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        pm = PluginManager()
        pm.register_plugin(_ConflictingCommandPlugin(), name="conflict")
        pm.discover_and_load()
        assert COMMAND_REGISTRY["$set"] is not _double
        assert "$triple" in COMMAND_REGISTRY
        assert "Skipping update command '$set'" in caplog.text

    def test_broken_plugin_is_a_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        pm = PluginManager()
        pm.register_plugin(_BrokenPlugin(), name="broken")
        pm.discover_and_load()
        assert "Failed to collect update commands from plugin broken" in caplog.text

    def test_bad_return_shape_is_a_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        pm = PluginManager()
        pm.register_plugin(_BadShapePlugin(), name="shape")
        pm.discover_and_load()
        assert "non-list irreducible registrations" in caplog.text

    def test_frozen_registry_skips_commands(self, caplog: pytest.LogCaptureFixture) -> None:
        t.freeze_commands()
        pm = PluginManager()
        pm.register_plugin(_CommandPlugin(), name="cmd")
        pm.discover_and_load()
        assert "$double" not in COMMAND_REGISTRY

    def test_disabled_plugins_blocked(self) -> None:
        pm = PluginManager(disabled=["cmd"])
        pm.register_plugin(_CommandPlugin(), name="cmd")
        assert "cmd" not in pm.list_plugin_names()

    def test_has_hook_impls(self) -> None:
        assert PluginManager._has_hook_impls(_CommandPlugin)
        assert not PluginManager._has_hook_impls(object)
