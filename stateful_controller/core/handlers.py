# stateful_controller/core/handlers.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional

from stateful_controller.core.states import state_method_name
from stateful_controller.interfaces.types import Handler, StateValue

# Every name state_method_name can derive starts with one of these, followed
# by at least one more character ("enterFoo", "enter_draft", "enterÉtat").
_HANDLER_PREFIXES = ("enter", "leave")


def _is_handler_name(name: str) -> bool:
    return any(name.startswith(prefix) and len(name) > len(prefix) for prefix in _HANDLER_PREFIXES)


class StateHandlerRegistry:
    """
    Explicit dispatch table used by the default ``enter`` / ``leave`` hooks of
    a controller.

    Handlers are stored under their derived name (see
    :func:`~stateful_controller.core.states.state_method_name`), so the state
    ``"foo bar"`` is entered through the handler registered as
    ``"enterFooBar"`` and left through ``"leaveFooBar"``. Enter handlers are
    called with ``(state, upgrade)``, leave handlers with ``(state)``.

    Example:
        handlers = StateHandlerRegistry()

        @handlers.on_enter("foo")
        def enter_foo(state, upgrade):
            ...
    """

    def __init__(self, handlers: Optional[Dict[str, Handler]] = None) -> None:
        self._handlers: Dict[str, Handler] = {}
        for name, handler in (handlers or {}).items():
            self.register(name, handler)

    @classmethod
    def from_methods(cls, obj: Any) -> "StateHandlerRegistry":
        """
        Populate a registry from the methods of ``obj`` whose names start with
        ``enter`` or ``leave`` (``enterFoo``, ``leave_draft``). Names no state
        derives to are registered too but never looked up.
        """
        registry = cls()
        for name in dir(type(obj)):
            if not _is_handler_name(name):
                continue
            handler = getattr(obj, name)
            if callable(handler):
                registry.register(name, handler)
        return registry

    def register(self, name: str, handler: Handler) -> Handler:
        """
        Register ``handler`` under ``name``, replacing any previous handler.

        :raises TypeError: If handler is not callable.
        """
        if not callable(handler):
            raise TypeError(f"Handler for '{name}' must be callable")
        self._handlers[name] = handler
        return handler

    def unregister(self, name: str) -> None:
        self._handlers.pop(name, None)

    def lookup(self, name: str) -> Optional[Handler]:
        """Return the handler registered under ``name``, or None."""
        return self._handlers.get(name)

    def on_enter(self, state: StateValue) -> Callable[[Handler], Handler]:
        """Decorator registering an enter handler for ``state``."""
        return self._decorator(state_method_name("enter", state))

    def on_leave(self, state: StateValue) -> Callable[[Handler], Handler]:
        """Decorator registering a leave handler for ``state``."""
        return self._decorator(state_method_name("leave", state))

    def _decorator(self, name: str) -> Callable[[Handler], Handler]:
        def decorator(handler: Handler) -> Handler:
            return self.register(name, handler)

        return decorator

    def names(self) -> List[str]:
        return sorted(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._handlers)
