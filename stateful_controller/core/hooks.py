# stateful_controller/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import inspect
import logging
from typing import Any, List, Optional

from stateful_controller.interfaces.protocols import TransitionHook
from stateful_controller.interfaces.types import StateValue

logger = logging.getLogger(__name__)


async def settle(result: Any) -> Any:
    """Await ``result`` if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(result):
        return await result
    return result


class HookManager:
    """
    Manages the registration and execution of observer hooks that listen to
    controller lifecycle events (on_enter, on_leave, on_error). Users can attach
    logging, monitoring, or rendering side effects without altering the
    controller itself.
    """

    def __init__(self, hooks: Optional[List[TransitionHook]] = None) -> None:
        self._hooks: List[Any] = list(hooks or [])

    def register_hook(self, hook: TransitionHook) -> None:
        """
        Add a new hook to the manager's list of hooks.

        :param hook: An object implementing any of the TransitionHook methods.
        """
        self._hooks.append(hook)

    @property
    def hooks(self) -> List[Any]:
        return list(self._hooks)

    async def notify_enter(self, controller: Any, state: StateValue) -> None:
        """Run all hooks' on_enter logic, in registration order."""
        for hook in self._hooks:
            if hasattr(hook, "on_enter"):
                await settle(hook.on_enter(controller, state))

    async def notify_leave(self, controller: Any, state: StateValue) -> None:
        """Run all hooks' on_leave logic, in registration order."""
        for hook in self._hooks:
            if hasattr(hook, "on_leave"):
                await settle(hook.on_leave(controller, state))

    async def notify_error(self, controller: Any, error: Exception) -> None:
        """
        Run all hooks' on_error logic. A failing hook is logged and does not
        stop the remaining hooks.
        """
        for hook in self._hooks:
            if not hasattr(hook, "on_error"):
                continue
            try:
                await settle(hook.on_error(controller, error))
            except Exception:
                logger.exception(f"Hook {hook!r} failed while handling {error!r}")

    def __len__(self) -> int:
        return len(self._hooks)
