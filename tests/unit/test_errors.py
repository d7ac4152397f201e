# tests/unit/test_errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

import stateful_controller
from stateful_controller.core.errors import (
    ConcurrentTransitionError,
    ContractViolationError,
    ControllerError,
    InvalidArgumentError,
    MissingChildControllerError,
    MissingChildStateError,
    MissingStateMethodError,
)

ERRORS = [
    InvalidArgumentError,
    ConcurrentTransitionError,
    ContractViolationError,
    MissingStateMethodError,
    MissingChildControllerError,
    MissingChildStateError,
]


@pytest.mark.parametrize("error_class", ERRORS)
def test_errors_share_a_base_class(error_class):
    assert issubclass(error_class, ControllerError)
    assert issubclass(error_class, Exception)

    with pytest.raises(ControllerError, match="details"):
        raise error_class("details")


@pytest.mark.parametrize("error_class", ERRORS + [ControllerError])
def test_errors_are_exported(error_class):
    assert getattr(stateful_controller, error_class.__name__) is error_class
