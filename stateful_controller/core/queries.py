# stateful_controller/core/queries.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import List

from stateful_controller.core.base import ControllerNode
from stateful_controller.interfaces.types import UNSET, StateValue


def root(node: ControllerNode) -> ControllerNode:
    """Find the top most controller by following parent links."""
    current = node
    while current.parent is not None:
        current = current.parent
    return current


def descendant_states(node: ControllerNode) -> List[StateValue]:
    """
    Return the states of all (grand)children of ``node``: our own child at
    index 0, the child of our child at index 1, etc.
    """
    states = []
    current = node.child
    while current is not None:
        states.append(current.current_state)
        current = current.child
    return states


def ancestor_states(node: ControllerNode) -> List[StateValue]:
    """
    Return the states of all (grand)parents of ``node``: the root at index 0,
    our own parent at the last index.
    """
    states = []
    current = node.parent
    while current is not None:
        states.append(current.current_state)
        current = current.parent
    states.reverse()
    return states


def full_state_chain(node: ControllerNode, replacement: StateValue = UNSET) -> List[StateValue]:
    """
    Return the full state chain of the hierarchy ``node`` is part of, the same
    from every node in it.

    :param replacement: If given, used instead of the node's own state.
    """
    own = node.current_state if replacement is UNSET else replacement
    return ancestor_states(node) + [own] + descendant_states(node)
