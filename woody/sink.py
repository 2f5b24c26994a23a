# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""Sink dispatch.

A sink receives the rendered record of a log call and delivers it
somewhere. Three calling styles are supported:

- ``SYNC``: ``fn(level, rendered)``. If it happens to return an awaitable,
  the awaitable completes the sink.
- ``ASYNC``: ``fn(level, rendered)`` must return an awaitable.
- ``CALLBACK``: ``fn(level, rendered, done)``; the sink calls ``done()`` on
  success or ``done(err)`` on failure.

Sinks may be given to a logger as a tagged :class:`Sink` or as a plain
callable, in which case :func:`as_sink` picks the style from its signature.
"""

import concurrent.futures
import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from .errors import SinkError
from .level import Level

SinkOutcome = Optional[Union[Awaitable[Any], concurrent.futures.Future]]


class SinkKind(str, Enum):
    """Calling style of a sink."""

    SYNC = "sync"
    ASYNC = "async"
    CALLBACK = "callback"


@dataclass(frozen=True)
class Sink:
    """A sink callable tagged with its calling style."""

    kind: SinkKind
    fn: Callable[..., Any]

    @classmethod
    def sync(cls, fn: Callable[[Level, Any], Any]) -> "Sink":
        return cls(SinkKind.SYNC, fn)

    @classmethod
    def awaitable(cls, fn: Callable[[Level, Any], Awaitable[Any]]) -> "Sink":
        return cls(SinkKind.ASYNC, fn)

    @classmethod
    def callback(cls, fn: Callable[[Level, Any, Callable[..., None]], Any]) -> "Sink":
        return cls(SinkKind.CALLBACK, fn)

    def commit(self, level: Level, rendered: Any) -> SinkOutcome:
        """Start committing a rendered record.

        Args:
            level: Severity of the log call
            rendered: Output of the logger's renderer

        Returns:
            None if the sink finished synchronously, otherwise something
            that completes when the sink does

        Raises:
            Exception: Whatever the sink raised synchronously
        """
        if self.kind is SinkKind.CALLBACK:
            return self._commit_with_callback(level, rendered)

        result = self.fn(level, rendered)
        if inspect.isawaitable(result):
            return result
        if self.kind is SinkKind.ASYNC:
            raise TypeError(f"Async sink {self.fn!r} returned a non-awaitable {result!r}")
        return None

    def _commit_with_callback(self, level: Level, rendered: Any) -> concurrent.futures.Future:
        future: concurrent.futures.Future = concurrent.futures.Future()

        def done(err: Any = None) -> None:
            try:
                if err:
                    future.set_exception(err if isinstance(err, BaseException) else SinkError(err))
                else:
                    future.set_result(None)
            except concurrent.futures.InvalidStateError:
                # done() was already called; the first outcome wins
                pass

        self.fn(level, rendered, done)
        return future


def _arity(fn: Callable[..., Any]) -> int:
    """Count leading positional parameters without defaults."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 0

    count = 0
    for param in signature.parameters.values():
        if param.kind not in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            break
        if param.default is not param.empty:
            break
        count += 1
    return count


def _is_coroutine_function(fn: Any) -> bool:
    return inspect.iscoroutinefunction(fn) or inspect.iscoroutinefunction(
        getattr(fn, "__call__", None)
    )


def as_sink(sink: Union[Sink, Callable[..., Any]]) -> Sink:
    """Lift a plain callable into a tagged :class:`Sink`.

    Callables taking three or more positional parameters are treated as
    callback-style, coroutine functions as async, anything else as sync.

    Raises:
        TypeError: If ``sink`` is not callable
    """
    if isinstance(sink, Sink):
        return sink
    if not callable(sink):
        raise TypeError(f"Sink must be callable, got {type(sink).__name__}")
    if _arity(sink) >= 3:
        return Sink.callback(sink)
    if _is_coroutine_function(sink):
        return Sink.awaitable(sink)
    return Sink.sync(sink)


def to_nowhere(level: Level, rendered: Any) -> None:
    """Sink that discards everything."""
