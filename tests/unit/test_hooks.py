# tests/unit/test_hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import Any, List

import pytest

from stateful_controller.core.controller import Controller, DummyController
from stateful_controller.core.errors import MissingStateMethodError
from stateful_controller.core.hooks import HookManager, settle
from stateful_controller.interfaces.protocols import TransitionHook

# -----------------------------------------------------------------------------
# MOCK IMPLEMENTATIONS
# -----------------------------------------------------------------------------


class MockHook:
    """A hook recording every notification it receives."""

    def __init__(self, name: str = "MockHook", fail_on: str = None):
        self.name = name
        self.fail_on = fail_on
        self.calls: List[Any] = []

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method,) + args)
        if method == self.fail_on:
            raise RuntimeError(f"{self.name} {method} failed")

    def on_enter(self, controller, state):
        self._record("on_enter", controller, state)

    def on_leave(self, controller, state):
        self._record("on_leave", controller, state)

    def on_error(self, controller, error):
        self._record("on_error", controller, error)

    def __repr__(self) -> str:
        return f"MockHook({self.name!r})"


class AsyncHook:
    def __init__(self):
        self.entered = []

    async def on_enter(self, controller, state):
        self.entered.append(state)


class PartialHook:
    """Implements only on_leave."""

    def __init__(self):
        self.left = []

    def on_leave(self, controller, state):
        self.left.append(state)


# -----------------------------------------------------------------------------
# HOOK MANAGER
# -----------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_settle():
    async def coro():
        return 5

    assert await settle(None) is None
    assert await settle("value") == "value"
    assert await settle(coro()) == 5


def test_mock_hook_satisfies_protocol():
    assert isinstance(MockHook(), TransitionHook)


@pytest.mark.asyncio
async def test_hook_manager_notifies_in_registration_order():
    order = []

    class Ordered:
        def __init__(self, name):
            self.name = name

        def on_enter(self, controller, state):
            order.append(self.name)

    manager = HookManager([Ordered("first")])
    manager.register_hook(Ordered("second"))
    manager.register_hook(PartialHook())

    await manager.notify_enter(None, "foo")
    assert order == ["first", "second"]
    assert len(manager) == 3


@pytest.mark.asyncio
async def test_hook_manager_skips_missing_methods():
    partial = PartialHook()
    manager = HookManager([partial])

    await manager.notify_enter(None, "foo")
    await manager.notify_error(None, RuntimeError())
    await manager.notify_leave(None, "foo")
    assert partial.left == ["foo"]


@pytest.mark.asyncio
async def test_failing_error_hook_is_logged(caplog):
    failing = MockHook("failing", fail_on="on_error")
    after = MockHook("after")
    manager = HookManager([failing, after])

    with caplog.at_level(logging.ERROR, logger="stateful_controller.core.hooks"):
        await manager.notify_error(None, ValueError("original"))

    assert len(after.calls) == 1
    assert any("failing" in rec.message for rec in caplog.records)


# -----------------------------------------------------------------------------
# CONTROLLER INTEGRATION
# -----------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_controller_notifies_hooks():
    hook = MockHook()
    async_hook = AsyncHook()
    controller = DummyController(hooks=[hook, async_hook])

    await controller.assign_state(["foo"])
    await controller.assign_state(["bar"])

    assert hook.calls == [
        ("on_enter", controller, "foo"),
        ("on_leave", controller, "foo"),
        ("on_enter", controller, "bar"),
    ]
    assert async_hook.entered == ["foo", "bar"]
    assert controller.hook_manager.hooks == [hook, async_hook]


@pytest.mark.asyncio
async def test_controller_notifies_error_and_reraises():
    hook = MockHook()
    controller = Controller(hooks=[hook])

    with pytest.raises(MissingStateMethodError):
        await controller.assign_state(["foo"])

    method, notified, error = hook.calls[-1]
    assert method == "on_error"
    assert notified is controller
    assert isinstance(error, MissingStateMethodError)


@pytest.mark.asyncio
async def test_failing_enter_hook_fails_the_transition():
    hook = MockHook(fail_on="on_enter")
    controller = DummyController(hooks=[hook])

    with pytest.raises(RuntimeError, match="on_enter failed"):
        await controller.assign_state(["foo"])

    assert controller.get_current_state() is None
    assert hook.calls[-1][0] == "on_error"


@pytest.mark.asyncio
async def test_failing_error_hook_does_not_replace_error():
    controller = Controller(hooks=[MockHook(fail_on="on_error")])

    with pytest.raises(MissingStateMethodError):
        await controller.assign_state(["foo"])
