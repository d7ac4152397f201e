"""stateful_controller: hierarchical, asynchronous stateful controllers

A controller owns a slice of application state and may delegate a sub-slice to
exactly one child controller, recursively forming a chain. Assigning a chain of
states to the top controller transitions every controller in the chain, leaving
old states from the leaf up and entering new ones from the root down.

Responsibilities:
    - State equality and handler naming
    - Parent/child bookkeeping
    - The state assignment protocol (ordered hooks, rollback, one transition
      per controller at a time)
    - Hierarchy queries

Cross-cutting Concerns:
    Concurrency:
        - Cooperative, asyncio based; hooks may be plain functions or coroutines

    Error Handling:
        - Structured error hierarchy rooted at ControllerError
        - Failed transitions restore the controller's previous state

    Logging:
        - Standard library logging, one logger per module
"""

from stateful_controller.core import (
    ConcurrentTransitionError,
    ContractViolationError,
    Controller,
    ControllerError,
    ControllerNode,
    CustomState,
    DummyController,
    InvalidArgumentError,
    MissingChildControllerError,
    MissingChildStateError,
    MissingStateMethodError,
    StateHandlerRegistry,
    attach_child,
    attach_parent,
    state_chains_equal,
    state_method_name,
    states_equal,
)
from stateful_controller.interfaces.types import UNSET

__version__ = "0.1.0"

__all__ = [
    "Controller",
    "DummyController",
    "ControllerNode",
    "CustomState",
    "StateHandlerRegistry",
    "attach_child",
    "attach_parent",
    "states_equal",
    "state_chains_equal",
    "state_method_name",
    "UNSET",
    "ControllerError",
    "InvalidArgumentError",
    "ConcurrentTransitionError",
    "ContractViolationError",
    "MissingStateMethodError",
    "MissingChildControllerError",
    "MissingChildStateError",
]
