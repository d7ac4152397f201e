# stateful_controller/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Protocol, runtime_checkable

from stateful_controller.interfaces.types import HookResult, StateValue


@runtime_checkable
class StateObject(Protocol):
    """
    Protocol for capability-bearing states.

    Attributes:
        state_name: Text used to derive handler names, e.g. ``"foo"`` -> ``enterFoo``.

    Methods:
        is_state_equal(other): True if ``other`` describes the same state, even
            when it is a different instance.

    Runtime Invariants:
    - State objects are immutable once they have been used in a transition.
    - Only the left operand's ``is_state_equal`` is consulted when comparing.
    """

    state_name: str

    def is_state_equal(self, other: Any) -> bool:
        """Return True if ``other`` is the same state."""
        ...


@runtime_checkable
class TransitionHook(Protocol):
    """
    Observer notified while a controller changes state.

    A hook may implement any subset of these methods, either as plain
    functions or as coroutines.

    Error Handling:
    - Failures in ``on_enter`` / ``on_leave`` fail the transition.
    - Failures in ``on_error`` are logged; the original error is re-raised.
    """

    def on_enter(self, controller: Any, state: StateValue) -> HookResult:
        """Called after ``controller`` entered ``state``."""
        ...

    def on_leave(self, controller: Any, state: StateValue) -> HookResult:
        """Called after ``controller`` left ``state``."""
        ...

    def on_error(self, controller: Any, error: Exception) -> HookResult:
        """Called when a transition of ``controller`` failed and was rolled back."""
        ...
