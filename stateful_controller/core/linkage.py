# stateful_controller/core/linkage.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Parent/child bookkeeping for controller hierarchies.

For any two nodes A and B, ``A.child is B`` if and only if ``B.parent is A``.
Every function here keeps that relation intact: the previous partners of both
endpoints are detached before the new link is made. Nothing else changes; no
lifecycle hook runs and no current state is touched.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from stateful_controller.core.base import ControllerNode
from stateful_controller.core.errors import InvalidArgumentError


def _check_node(value: Any, allow_none: bool = True) -> None:
    if value is None and allow_none:
        return
    if not isinstance(value, ControllerNode):
        raise InvalidArgumentError(f"Invalid value, it must be a Controller or None: {value!r}")


def _would_create_cycle(parent: ControllerNode, child: ControllerNode) -> bool:
    """Check if linking child under parent would make child its own ancestor."""
    current: Optional[ControllerNode] = parent
    while current is not None:
        if current is child:
            return True
        current = current._parent
    return False


def attach_child(
    parent: ControllerNode, child: Optional[ControllerNode]
) -> Tuple[ControllerNode, Optional[ControllerNode]]:
    """
    Make ``child`` the child of ``parent``, or clear the child of ``parent``
    when ``child`` is None.

    :return: The updated ``(parent, child)`` pair.
    :raises InvalidArgumentError: If an endpoint is not a controller, or the
        link would create a cycle.
    """
    _check_node(parent, allow_none=False)
    _check_node(child)

    if child is not None and _would_create_cycle(parent, child):
        raise InvalidArgumentError(f"Linking {child!r} under {parent!r} would create a cycle")

    if parent._child is not None:
        parent._child._parent = None

    if child is not None:
        if child._parent is not None:
            child._parent._child = None
        child._parent = parent

    parent._child = child
    return parent, child


def attach_parent(
    child: ControllerNode, parent: Optional[ControllerNode]
) -> Tuple[Optional[ControllerNode], ControllerNode]:
    """
    Make ``parent`` the parent of ``child``, or detach ``child`` from its
    parent when ``parent`` is None. The mirror view of :func:`attach_child`.

    :return: The updated ``(parent, child)`` pair.
    """
    _check_node(child, allow_none=False)
    _check_node(parent)

    if parent is not None:
        attach_child(parent, child)
        return parent, child

    if child._parent is not None:
        child._parent._child = None
        child._parent = None
    return None, child


def detach(node: ControllerNode) -> ControllerNode:
    """Remove ``node`` from its hierarchy: clear both its parent and child links."""
    attach_parent(node, None)
    attach_child(node, None)
    return node
