# stateful_controller/core/controller.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, List, Optional

from stateful_controller.core import linkage, queries
from stateful_controller.core.base import ControllerNode
from stateful_controller.core.errors import MissingStateMethodError
from stateful_controller.core.handlers import StateHandlerRegistry
from stateful_controller.core.states import state_method_name
from stateful_controller.core.transitions import assign_state
from stateful_controller.interfaces.protocols import TransitionHook
from stateful_controller.interfaces.types import UNSET, HookResult, OptionalStateChain, StateValue


class Controller(ControllerNode):
    """
    Base class for stateful controllers.

    A controller owns a slice of application state and may delegate a
    sub-slice to exactly one child controller, which it usually creates and
    attaches while entering one of its own states. Subclass it and provide
    handlers named after your states:

        class FrontController(Controller):
            def enterPages(self, state, upgrade):
                self.set_child(PagesController(self.context))

            def leavePages(self, state):
                ...

        await FrontController(context).assign_state(["pages", "contact"])

    Handlers can also be registered explicitly through ``handlers``, or the
    ``enter`` / ``leave`` hooks overridden to resolve states some other way.
    """

    def __init__(
        self,
        context: Any = None,
        handlers: Optional[StateHandlerRegistry] = None,
        hooks: Optional[List[TransitionHook]] = None,
    ) -> None:
        """
        :param context: Opaque value shared with the controller's children.
        :param handlers: Explicit enter/leave handlers; defaults to the
                         ``enterFoo`` / ``leaveFoo`` methods of this object.
        :param hooks: Optional observer hooks notified on enter, leave and error.
        """
        super().__init__(context, hooks)
        self.handlers = handlers if handlers is not None else StateHandlerRegistry.from_methods(self)

    async def assign_state(self, states: OptionalStateChain, upgrade: bool = False) -> None:
        """
        Assign a chain of states to this controller and its children.

        Example:
            # this controller enters "pages", its child "contact", and so on
            await controller.assign_state(["pages", "contact", "foo"])

        :param states: The state chain, or None to leave the current state
                       without entering a new one.
        :param upgrade: If True, the results of the given states are already
                        present, produced by the same transition in a different
                        execution context (e.g. server side rendering). Hooks
                        must adopt those results so that later, non-upgrade
                        transitions are able to modify them.
        """
        await assign_state(self, states, upgrade)

    def enter(self, state: StateValue, upgrade: bool = False) -> HookResult:
        """
        Invoked when this controller should enter ``state``. The default
        dispatches to the handler derived from the state name,
        e.g. "foo" -> ``enterFoo(state, upgrade)``.

        :raises MissingStateMethodError: If no such handler exists.
        """
        name = state_method_name("enter", state)
        handler = self.handlers.lookup(name)
        if handler is None:
            raise MissingStateMethodError(f"State method {name} does not exist")
        return handler(state, bool(upgrade))

    def leave(self, state: StateValue) -> HookResult:
        """
        Invoked when ``state`` is being left. The default dispatches to e.g.
        ``leaveFoo(state)``; unlike ``enter`` a missing handler is not an error.
        """
        handler = self.handlers.lookup(state_method_name("leave", state))
        if handler is None:
            return None
        return handler(state)

    def get_current_state(self) -> StateValue:
        return self._current_state

    def get_child(self) -> Optional[ControllerNode]:
        return self._child

    def set_child(self, child: Optional[ControllerNode]) -> Optional[ControllerNode]:
        """Set (or clear) the child controller; the child's parent is updated too."""
        linkage.attach_child(self, child)
        return child

    def get_parent(self) -> Optional[ControllerNode]:
        return self._parent

    def set_parent(self, parent: Optional[ControllerNode]) -> Optional[ControllerNode]:
        """Set (or clear) the parent controller; the parent's child is updated too."""
        linkage.attach_parent(self, parent)
        return parent

    def root(self) -> ControllerNode:
        return queries.root(self)

    def descendant_states(self) -> List[StateValue]:
        return queries.descendant_states(self)

    def ancestor_states(self) -> List[StateValue]:
        return queries.ancestor_states(self)

    def full_state_chain(self, replacement: StateValue = UNSET) -> List[StateValue]:
        """Without ``replacement`` this equals the root's state followed by ``root().descendant_states()``."""
        return queries.full_state_chain(self, replacement)


class DummyController(Controller):
    """A controller that does nothing and accepts a transition to any state."""

    def enter(self, state: StateValue, upgrade: bool = False) -> HookResult:
        return None

    def leave(self, state: StateValue) -> HookResult:
        return None
