# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""Factory functions for creating logger instances."""

import logging
import os
from collections.abc import Callable
from typing import Any

from .console_sink import to_console
from .contexts import level_name, timestamp
from .level import Level
from .logger import Logger, Render
from .memory_sink import MemorySink
from .renderers import bracketed, json_lines
from .sink import to_nowhere
from .stdlib_sink import to_logging

logger = logging.getLogger(__name__)


def _default(value: str | None, env_var: str, fallback: str) -> str:
    """Helper to pick an explicit value, then env var, then fallback."""
    return (value or os.getenv(env_var) or fallback)


def as_(render: Render) -> Logger:
    """Start a logger with the given renderer and no sinks.

    Example:
        >>> import woody
        >>> log = woody.as_(woody.bracketed()).to(woody.to_console)
        >>> log.fork("db").info("connected")
    """
    return Logger([], render)


def _build_sink(sink_type: str, name: str) -> Callable[..., Any]:
    if sink_type == "console":
        return to_console
    elif sink_type == "memory":
        return MemorySink()
    elif sink_type == "stdlib":
        return to_logging(name)
    elif sink_type == "nowhere":
        return to_nowhere
    raise ValueError(
        f"Unknown sink_type: {sink_type}. "
        f"Must be one of: console, memory, stdlib, nowhere"
    )


def create_logger(
    sink_type: str | None = None,
    level: str | None = None,
    name: str | None = None,
    fmt: str | None = None,
) -> Logger:
    """Factory function to create a logger with sensible defaults.

    Args:
        sink_type: Where records go. Options: "console", "memory", "stdlib",
            "nowhere". Defaults to LOG_TYPE env or "console".
        level: Minimum level to commit. Options: TRACE, DEBUG, VERBOSE, INFO,
            WARN, ERROR, FATAL. Defaults to LOG_LEVEL env or "INFO".
        name: Logger name for identification. Defaults to LOG_NAME env or "woody".
        fmt: Output format. Options: "text", "json". Defaults to LOG_FORMAT
            env or "text".

    Returns:
        Logger instance

    Raises:
        ValueError: If sink_type, level or fmt is not recognized

    Example:
        >>> # Bracketed text on the console, INFO and above
        >>> log = create_logger(sink_type="console", level="INFO", name="my-service")
        >>>
        >>> # JSON lines into the stdlib "my-service" logger
        >>> log = create_logger(sink_type="stdlib", fmt="json", name="my-service")
        >>>
        >>> # Capture records in memory for tests
        >>> log = create_logger(sink_type="memory", level="DEBUG")
    """
    sink_type = _default(sink_type, "LOG_TYPE", "console").lower()
    floor = Level.from_string(_default(level, "LOG_LEVEL", "INFO"))
    name = _default(name, "LOG_NAME", "woody")
    fmt = _default(fmt, "LOG_FORMAT", "text").lower()

    sink = _build_sink(sink_type, name)

    if fmt == "text":
        created = Logger(sink, bracketed(), [timestamp(), level_name(), name], [floor])
    elif fmt == "json":
        created = Logger(sink, json_lines(name), [], [floor])
    else:
        raise ValueError(f"Unknown fmt: {fmt}. Must be one of: text, json")

    logger.debug("Created %s logger %r at %s with %s format", sink_type, name, floor.name, fmt)
    return created
