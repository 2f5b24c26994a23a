# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""Conditions gating whether a log call commits."""

from collections.abc import Callable, Iterable
from decimal import Decimal
from numbers import Real
from typing import Any, Union

from .level import Level, _is_number

Condition = Union[bool, Level, Real, Decimal, Callable[[Level], Any]]


def check_condition(condition: Any) -> Condition:
    """Validate a condition before it is stored on a logger.

    Args:
        condition: A bool, a severity floor (Level or number) or a
            ``level -> bool`` predicate

    Returns:
        The condition, unchanged

    Raises:
        TypeError: If the condition is none of the accepted kinds
    """
    if isinstance(condition, (bool, Level)) or _is_number(condition) or callable(condition):
        return condition
    raise TypeError(
        f"Invalid condition: {condition!r}. "
        "Must be a bool, a severity floor or a callable taking the level"
    )


def _passes(condition: Condition, level: Level) -> bool:
    # bool is a Real subclass, so it has to be checked first
    if isinstance(condition, bool):
        return condition
    if isinstance(condition, Level) or _is_number(condition):
        return level >= condition
    return bool(condition(level))


def conditions_pass(conditions: Iterable[Condition], level: Level) -> bool:
    """Evaluate conditions in order, stopping at the first that fails."""
    return all(_passes(condition, level) for condition in conditions)
