# stateful_controller/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class ControllerError(Exception):
    """
    Base exception class for errors raised by stateful controllers.
    """


class InvalidArgumentError(ControllerError):
    """
    Raised when a state chain is not a sequence, or when a link target is not
    a controller (or would create a cycle in the hierarchy).
    """


class ConcurrentTransitionError(ControllerError):
    """
    Raised when a state transition is requested while a previous one is still
    in progress on the same controller.
    """


class ContractViolationError(ControllerError):
    """
    Raised when an object used as a state does not implement ``is_state_equal``.
    """


class MissingStateMethodError(ControllerError):
    """
    Raised when no enter handler exists for the state being entered.
    """


class MissingChildControllerError(ControllerError):
    """
    Raised when a child state was requested but entering the state did not set
    a child controller.
    """


class MissingChildStateError(ControllerError):
    """
    Raised when entering a state set a child controller but no state was
    supplied for it.
    """
