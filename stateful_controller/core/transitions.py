# stateful_controller/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
The state assignment protocol.

:func:`assign_state` moves a controller and its descendants to a chain of
target states. A full transition runs these steps strictly in sequence, each
awaiting the previous one:

1. the child subtree is driven to no state (leave order is leaf to root)
2. ``leave`` with the previous state, then the state and child link are cleared
3. ``after_leave`` with the previous state
4. ``before_enter`` with the target state (may abort the transition)
5. the current state is set, then ``enter`` runs with the target state
6. the remainder of the chain is assigned to the child (enter order is root to leaf)

If any step fails the node's own state is restored and the error re-raised.
A node accepts one transition at a time.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Tuple

from stateful_controller.core.base import ControllerNode
from stateful_controller.core.errors import (
    ConcurrentTransitionError,
    InvalidArgumentError,
    MissingChildControllerError,
    MissingChildStateError,
)
from stateful_controller.core.hooks import settle
from stateful_controller.core.linkage import attach_child
from stateful_controller.core.states import is_state_chain, states_equal
from stateful_controller.interfaces.types import UNSET, OptionalStateChain, StateValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransitionDescriptor:
    """Record of one ``assign_state`` call; lives only while that call runs."""

    previous: StateValue
    target: StateValue
    child_target: StateValue = UNSET
    child_chain: Tuple[StateValue, ...] = ()
    upgrade: bool = False

    @classmethod
    def from_chain(
        cls, previous: StateValue, states: Tuple[StateValue, ...], upgrade: bool = False
    ) -> "TransitionDescriptor":
        return cls(
            previous=previous,
            target=states[0],
            child_target=states[1] if len(states) > 1 else UNSET,
            child_chain=tuple(states[1:]),
            upgrade=bool(upgrade),
        )

    @property
    def has_child_target(self) -> bool:
        return self.child_target is not UNSET


def _normalize_chain(states: OptionalStateChain) -> Tuple[StateValue, ...]:
    if states is None:
        return (None,)
    if not is_state_chain(states):
        raise InvalidArgumentError(f'Invalid argument, "states" must be a list or tuple: {states!r}')
    if not states:
        return (None,)
    return tuple(states)


@contextmanager
def _transition_scope(node: ControllerNode, descriptor: TransitionDescriptor) -> Iterator[TransitionDescriptor]:
    """Hold ``descriptor`` as the node's active transition until the block exits."""
    if node._active_transition is not None:
        raise ConcurrentTransitionError(f"A previous state transition of {node!r} is still in progress")

    node._active_transition = descriptor
    try:
        yield descriptor
    finally:
        node._active_transition = None


async def assign_state(node: ControllerNode, states: OptionalStateChain, upgrade: bool = False) -> None:
    """
    Assign a chain of states to ``node`` and its descendants.

    :param node: The controller receiving ``states[0]``.
    :param states: The state chain, or None to leave the current state without
                   entering a new one.
    :param upgrade: True if the results of the target states already exist in
                    some form (for example rendered by another process) and the
                    hooks should adopt them instead of creating them.

    When ``node`` already is in ``states[0]`` its own hooks do not run and the
    rest of the chain is passed to the child. Only the missing child check is
    made in that case: ``["x"]`` on a node in ``x`` that has a child keeps the
    child's subtree and does not raise MissingChildStateError.

    :raises InvalidArgumentError: If ``states`` is not None, a list or a tuple.
    :raises ConcurrentTransitionError: If a transition of ``node`` is in progress.
    """
    chain = _normalize_chain(states)
    descriptor = TransitionDescriptor.from_chain(node._current_state, chain, upgrade)

    with _transition_scope(node, descriptor):
        if states_equal(descriptor.previous, descriptor.target):
            logger.debug(f"{node!r} already in {descriptor.target!r}, delegating {descriptor.child_chain!r}")
            if descriptor.has_child_target:
                await _assign_child_state(node, descriptor)
            return

        logger.debug(f"{node!r} transition {descriptor.previous!r} -> {descriptor.target!r}")
        await _FullTransition(node, descriptor).run()


async def _assign_child_state(node: ControllerNode, t: TransitionDescriptor) -> None:
    if t.has_child_target:
        if node._child is None:
            raise MissingChildControllerError(
                f'Attempting to set child state "{t.child_target}", '
                f'but no child controller has been set by the state "{t.target}".'
            )
        await assign_state(node._child, t.child_chain, t.upgrade)
    elif t.target is not None and node._child is not None:
        raise MissingChildStateError(
            f'Attempting to set state "{t.target}", '
            f"but a child state is missing (a child controller has been set)"
        )


class _FullTransition:
    """
    Runs the leave/enter steps of a transition that changes the node's own
    state, restoring the previous state on failure.
    """

    def __init__(self, node: ControllerNode, descriptor: TransitionDescriptor) -> None:
        self._node = node
        self._t = descriptor

    async def run(self) -> None:
        node, t = self._node, self._t
        try:
            await self._leave_child()
            await self._leave_self()
            await self._after_leave()
            await self._before_enter()
            await self._enter()
            await _assign_child_state(node, t)
        except Exception as e:
            # Assume we are still in the previous state
            node._current_state = t.previous
            logger.warning(f"{node!r} transition {t.previous!r} -> {t.target!r} failed: {e!r}")
            await node.hook_manager.notify_error(node, e)
            raise

        logger.debug(f"{node!r} entered {t.target!r}")

    async def _leave_child(self) -> None:
        child = self._node._child
        if child is not None:
            await assign_state(child, None, self._t.upgrade)

    async def _leave_self(self) -> None:
        node, previous = self._node, self._t.previous
        if previous is None:
            return

        try:
            await settle(node.leave(previous))
        finally:
            node._current_state = None
            attach_child(node, None)

        await node.hook_manager.notify_leave(node, previous)

    async def _after_leave(self) -> None:
        if self._t.previous is not None:
            await settle(self._node.after_leave(self._t.previous, self._t.upgrade))

    async def _before_enter(self) -> None:
        if self._t.target is not None:
            await settle(self._node.before_enter(self._t.target, self._t.upgrade))

    async def _enter(self) -> None:
        node, target = self._node, self._t.target
        if target is None:
            return

        node._current_state = target
        await settle(node.enter(target, self._t.upgrade))
        await node.hook_manager.notify_enter(node, target)
