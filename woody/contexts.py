# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""Context producers evaluated on every log call."""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Optional

from .level import current_level


def timestamp(fmt: Optional[str] = None) -> Callable[[], str]:
    """Producer for the current UTC time.

    Args:
        fmt: Optional ``strftime`` format. Defaults to ISO-8601 with a
            ``Z`` suffix.
    """

    def produce() -> str:
        now = datetime.now(timezone.utc)
        if fmt:
            return now.strftime(fmt)
        return now.isoformat().replace("+00:00", "Z")

    return produce


def level_name() -> Callable[[], str]:
    """Producer for the upper-case name of the level being logged."""

    def produce() -> str:
        level = current_level()
        if level is None:
            raise RuntimeError("level_name() producer called outside of a log call")
        return level.name

    return produce
