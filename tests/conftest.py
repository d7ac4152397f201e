# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, List, Optional, Tuple

import pytest

from stateful_controller.core.controller import Controller, DummyController


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


class RecordingController(Controller):
    """
    Controller recording every lifecycle hook call into a shared log.

    ``children`` maps a state to the controller attached as child when that
    state is entered; ``fail_on`` maps a hook name to the state it raises on.
    """

    def __init__(
        self,
        name: str,
        log: List[Tuple[str, str, Any]],
        children: Optional[Dict[Any, Controller]] = None,
        fail_on: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> None:
        self.name = name
        self.log = log
        self.children = children or {}
        self.fail_on = fail_on or {}
        super().__init__(**kwargs)

    def _record(self, hook: str, state: Any) -> None:
        self.log.append((self.name, hook, state))
        if hook in self.fail_on and self.fail_on[hook] == state:
            raise RuntimeError(f"{self.name} {hook} failed")

    def before_enter(self, state, upgrade=False):
        self._record("before_enter", state)

    def enter(self, state, upgrade=False):
        self._record("enter", state)
        if state in self.children:
            self.set_child(self.children[state])

    def leave(self, state):
        self._record("leave", state)

    def after_leave(self, state, upgrade=False):
        self._record("after_leave", state)

    def __repr__(self) -> str:
        return f"RecordingController({self.name!r})"


@pytest.fixture
def log() -> List[Tuple[str, str, Any]]:
    """Shared call log for recording controllers."""
    return []


@pytest.fixture
def recording_factory(log):
    """Returns a factory creating recording controllers that share ``log``."""

    def _factory(name: str, **kwargs: Any) -> RecordingController:
        return RecordingController(name, log, **kwargs)

    return _factory


@pytest.fixture
def dummy_chain():
    """Four dummy controllers linked a -> b -> c -> d."""
    a, b, c, d = (DummyController() for _ in range(4))
    a.set_child(b)
    b.set_child(c)
    c.set_child(d)
    return a, b, c, d
