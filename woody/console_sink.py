# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""Console sink."""

import sys
from typing import Any

from .level import Level


def to_console(level: Level, rendered: Any) -> None:
    """Print a rendered record, flushing each line.

    Records at WARN and above go to stderr, everything else to stdout.
    """
    stream = sys.stderr if level >= Level.WARN else sys.stdout
    print(rendered, file=stream, flush=True)
