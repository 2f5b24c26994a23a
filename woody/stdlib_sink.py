# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""Sink bridging into the standard library ``logging`` module."""

import logging
from collections.abc import Callable
from typing import Any, Union

from .level import Level


def to_logging(target: Union[str, logging.Logger]) -> Callable[[Level, Any], None]:
    """Commit to a stdlib logger.

    Levels are mapped with :meth:`Level.to_stdlib_level`, so handlers,
    filters and ``caplog`` see records at the matching stdlib level.

    Args:
        target: A ``logging.Logger`` or the name of one

    Returns:
        A sink function
    """
    stdlib_logger = logging.getLogger(target) if isinstance(target, str) else target

    def commit(level: Level, rendered: Any) -> None:
        stdlib_logger.log(level.to_stdlib_level(), rendered)

    return commit
