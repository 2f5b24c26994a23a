# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""Woody: composable structured logging.

A logger is an immutable value built from sinks, a renderer, a context
stack and a condition stack. Loggers are combined rather than configured:

- ``fork(context)`` pushes a context annotation,
- ``if_(condition)`` gates calls on a bool, a severity floor or a predicate,
- ``to(*sinks)`` fans out to more sinks,
- ``sequence(other)`` drives two loggers from one call site.

Every severity method returns a handle that can be awaited until all sinks
have committed, and that exposes the same methods for chained calls.

Example:
    >>> import woody
    >>>
    >>> log = woody.as_(woody.bracketed()).to(woody.to_console)
    >>> db = log.fork(woody.timestamp()).fork("db")
    >>> db.info("connected", "pool=4").warn("slow query")
    >>>
    >>> # Only WARN and above
    >>> quiet = db.if_(woody.Level.WARN)
    >>>
    >>> # Or bundle the defaults, configured from LOG_* environment variables
    >>> service_log = woody.create_logger(level="DEBUG", name="my-service")
"""

__version__ = "0.1.0"

from .console_sink import to_console
from .contexts import level_name, timestamp
from .errors import SinkError
from .factory import as_, create_logger
from .handle import LogHandle
from .level import Level, current_level, to_string
from .logger import Logger
from .memory_sink import MemorySink
from .renderers import bracketed, json_lines
from .sink import Sink, SinkKind, as_sink, to_nowhere
from .stdlib_sink import to_logging

__all__ = [
    "__version__",
    "Level",
    "LogHandle",
    "Logger",
    "MemorySink",
    "Sink",
    "SinkError",
    "SinkKind",
    "as_",
    "as_sink",
    "bracketed",
    "create_logger",
    "current_level",
    "json_lines",
    "level_name",
    "timestamp",
    "to_console",
    "to_logging",
    "to_nowhere",
    "to_string",
]
