# stateful_controller/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from stateful_controller.core.errors import ContractViolationError, InvalidArgumentError
from stateful_controller.interfaces.types import StateValue

# States of these types are plain identifiers, compared by value.
IDENTIFIER_TYPES = (str, int, float, Enum)

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True, eq=False)
class CustomState:
    """
    A capability-bearing state: a name used for handler dispatch plus an
    arbitrary payload.

    Equality is decided by ``equals(self, other)`` when given. Without it, a
    CustomState matches another CustomState with the same name and payload.

    Example:
        page = CustomState("page", payload={"id": 5})
        page.is_state_equal(CustomState("page", payload={"id": 5}))  # True
    """

    name: str
    payload: Any = None
    equals: Optional[Callable[["CustomState", Any], bool]] = None

    @property
    def state_name(self) -> str:
        return self.name

    def is_state_equal(self, other: Any) -> bool:
        if self.equals is not None:
            return bool(self.equals(self, other))
        if not isinstance(other, CustomState):
            return False
        return self.name == other.name and self.payload == other.payload

    def __str__(self) -> str:
        return self.name


def is_identifier(state: StateValue) -> bool:
    """Return True if ``state`` is a plain identifier rather than a state object."""
    return isinstance(state, IDENTIFIER_TYPES)


def is_state_chain(value: Any) -> bool:
    """Only lists and tuples are accepted as state chains; strings are not."""
    return isinstance(value, (list, tuple))


def states_equal(state_a: StateValue, state_b: StateValue) -> bool:
    """
    Are two states equal?

    Identifiers are compared by value. If ``state_a`` is a state object, the
    result of ``state_a.is_state_equal(state_b)`` is returned; the right
    operand is never consulted.

    :raises ContractViolationError: If ``state_a`` is an object without ``is_state_equal``.
    """
    if state_a is None or state_b is None:
        return state_a is state_b

    if is_identifier(state_a):
        return state_a == state_b

    is_state_equal = getattr(state_a, "is_state_equal", None)
    if not callable(is_state_equal):
        raise ContractViolationError(
            f"If a state is an object, it must implement an is_state_equal(other) method: {state_a!r}"
        )
    return bool(is_state_equal(state_b))


def state_chains_equal(states_a: Any, states_b: Any) -> bool:
    """
    Are two state chains equal? Each pair is matched with :func:`states_equal`.

    :raises InvalidArgumentError: If either argument is not a list or tuple.
    """
    if not is_state_chain(states_a) or not is_state_chain(states_b):
        raise InvalidArgumentError("Invalid arguments, both state chains must be a list or tuple")

    if states_a is states_b:
        return True

    if len(states_a) != len(states_b):
        return False

    return all(states_equal(a, b) for a, b in zip(states_a, states_b))


def state_method_name(prefix: str, state: StateValue) -> str:
    """
    Derive a handler name from a state.

    Examples:
        state_method_name("enter", "foo")          # "enterFoo"
        state_method_name("enter", "foo bar baz")  # "enterFooBarBaz"
        state_method_name("", "foo bar")           # "fooBar"
        state_method_name("leave", CustomState("bar"))  # "leaveBar"
    """
    text = getattr(state, "state_name", state)
    parts = [part for part in _WHITESPACE.split(str(text)) if part]

    start = 0 if prefix else 1
    for i in range(start, len(parts)):
        parts[i] = parts[i][0].upper() + parts[i][1:]

    return (prefix or "") + "".join(parts)
