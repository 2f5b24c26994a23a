# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""Exceptions raised by woody."""

from typing import Any


class SinkError(Exception):
    """A sink reported a failure that was not itself an exception.

    Callback-style sinks may complete with any truthy value as the error;
    such values are wrapped so the handle can raise them.
    """

    def __init__(self, reason: Any):
        super().__init__(f"Sink failed: {reason!r}")
        self.reason = reason
