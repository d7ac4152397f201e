# stateful_controller/core/base.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from stateful_controller.core.hooks import HookManager
from stateful_controller.interfaces.protocols import TransitionHook
from stateful_controller.interfaces.types import HookResult, StateValue

if TYPE_CHECKING:
    from stateful_controller.core.transitions import TransitionDescriptor


class ControllerNode:
    """
    Base class for the nodes of a controller hierarchy.

    Holds the fields the transition engine and the linkage manager operate on,
    and declares the lifecycle hooks the engine invokes. Each node has at most
    one parent and at most one child. The links are read-only here; use
    :mod:`stateful_controller.core.linkage` to change them.
    """

    def __init__(self, context: Any = None, hooks: Optional[List[TransitionHook]] = None) -> None:
        """
        :param context: Opaque value owned by the creator, shared with child
                        controllers by reference and never mutated here.
        :param hooks: Optional observer hooks notified on enter, leave and error.
        """
        self.context = context
        self._current_state: StateValue = None
        self._child: Optional[ControllerNode] = None
        self._parent: Optional[ControllerNode] = None
        self._active_transition: Optional["TransitionDescriptor"] = None
        self._hooks = HookManager(hooks)

    @property
    def current_state(self) -> StateValue:
        """The state this node is in, or None."""
        return self._current_state

    @property
    def child(self) -> Optional["ControllerNode"]:
        return self._child

    @property
    def parent(self) -> Optional["ControllerNode"]:
        return self._parent

    @property
    def active_transition(self) -> Optional["TransitionDescriptor"]:
        """The transition in flight on this node, or None."""
        return self._active_transition

    @property
    def hook_manager(self) -> HookManager:
        return self._hooks

    # Lifecycle hooks, invoked by the transition engine in this order:
    # leave -> after_leave -> before_enter -> enter

    def enter(self, state: StateValue, upgrade: bool = False) -> HookResult:
        raise NotImplementedError()

    def leave(self, state: StateValue) -> HookResult:
        return None

    def before_enter(self, state: StateValue, upgrade: bool = False) -> HookResult:
        return None

    def after_leave(self, state: StateValue, upgrade: bool = False) -> HookResult:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._current_state!r})"
