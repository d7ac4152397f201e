# stateful_controller/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Awaitable, Callable, Optional, Sequence, Union

StateValue = Any
StateChain = Sequence[StateValue]
OptionalStateChain = Optional[StateChain]

# Lifecycle hooks may return nothing or something awaitable.
HookResult = Optional[Awaitable[Any]]
EnterHandler = Callable[[StateValue, bool], HookResult]
LeaveHandler = Callable[[StateValue], HookResult]
Handler = Union[EnterHandler, LeaveHandler]


class _Unset:
    """Marker for "no value supplied", distinct from ``None`` (the empty state)."""

    _instance = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()
