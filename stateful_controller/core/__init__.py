"""
Core package providing controller hierarchies and the state assignment protocol.
"""

from .errors import (
    ConcurrentTransitionError,
    ContractViolationError,
    ControllerError,
    InvalidArgumentError,
    MissingChildControllerError,
    MissingChildStateError,
    MissingStateMethodError,
)
from .states import CustomState, state_chains_equal, state_method_name, states_equal
from .base import ControllerNode
from .linkage import attach_child, attach_parent, detach
from .handlers import StateHandlerRegistry
from .hooks import HookManager
from .transitions import TransitionDescriptor, assign_state
from .controller import Controller, DummyController

__all__ = [
    # Errors
    "ControllerError",
    "InvalidArgumentError",
    "ConcurrentTransitionError",
    "ContractViolationError",
    "MissingStateMethodError",
    "MissingChildControllerError",
    "MissingChildStateError",
    # States
    "CustomState",
    "states_equal",
    "state_chains_equal",
    "state_method_name",
    # Hierarchy
    "ControllerNode",
    "attach_child",
    "attach_parent",
    "detach",
    # Transitions
    "StateHandlerRegistry",
    "HookManager",
    "TransitionDescriptor",
    "assign_state",
    "Controller",
    "DummyController",
]
