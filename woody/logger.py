# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""The immutable logger value and its combinators."""

import warnings
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Union

from .conditions import Condition, check_condition, conditions_pass
from .handle import Commit, LogHandle
from .level import Level, _current_level
from .sink import Sink, as_sink

Render = Callable[[Level, list, list], Any]
SinkLike = Union[Sink, Callable[..., Any]]


def _lift_sinks(sinks: Union[SinkLike, Iterable[SinkLike], None]) -> tuple[Sink, ...]:
    if sinks is None:
        return ()
    if isinstance(sinks, Sink) or callable(sinks):
        return (as_sink(sinks),)
    return tuple(as_sink(sink) for sink in sinks)


class Logger:
    """An immutable logger.

    A logger is the aggregate of its sinks, a renderer, a context stack and
    a condition stack. It is never modified after construction: ``fork``,
    ``if_``, ``to`` and ``sequence`` all return new loggers.

    Each severity method performs one log call. If every condition passes,
    the context stack is materialized (context producers are invoked with
    :func:`woody.level.current_level` set), the renderer is called exactly
    once and its output is handed to every sink in order. The returned
    :class:`LogHandle` can be awaited for the sinks to finish and exposes
    the same methods for chaining.

    Args:
        sinks: A single sink or a sequence of sinks. Plain callables are
            adapted with :func:`woody.sink.as_sink`.
        render: ``render(level, contexts, messages) -> rendered``
        contexts: Initial context stack, oldest first
        conditions: Initial condition stack

    Raises:
        TypeError: If ``render`` is not callable, or a sink or condition is
            of an unsupported kind
    """

    __slots__ = ("_sinks", "_render", "_contexts", "_conditions")

    def __init__(
        self,
        sinks: Union[SinkLike, Iterable[SinkLike], None],
        render: Render,
        contexts: Sequence[Any] = (),
        conditions: Sequence[Condition] = (),
    ):
        if not callable(render):
            raise TypeError(f"render must be callable, got {type(render).__name__}")

        self._sinks = _lift_sinks(sinks)
        self._render = render
        self._contexts = tuple(contexts)
        self._conditions = tuple(check_condition(cond) for cond in conditions if cond is not None)

    @property
    def sinks(self) -> tuple[Sink, ...]:
        return self._sinks

    @property
    def render(self) -> Render:
        return self._render

    @property
    def contexts(self) -> tuple[Any, ...]:
        return self._contexts

    @property
    def conditions(self) -> tuple[Condition, ...]:
        return self._conditions

    def __repr__(self) -> str:
        return (
            f"Logger(sinks={len(self._sinks)}, contexts={list(self._contexts)!r}, "
            f"conditions={len(self._conditions)})"
        )

    def _materialize(self, level: Level) -> list[Any]:
        token = _current_level.set(level)
        try:
            return [context() if callable(context) else context for context in self._contexts]
        finally:
            _current_level.reset(token)

    def _commit(self, level: Level, rendered: Any) -> Commit:
        commit = Commit()
        for sink in self._sinks:
            commit.start(sink, level, rendered)
        return commit

    def _log(self, level: Level, messages: tuple) -> LogHandle:
        try:
            if not conditions_pass(self._conditions, level):
                return LogHandle(self, Commit())
            rendered = self._render(level, self._materialize(level), list(messages))
        except Exception as e:
            return LogHandle(self, Commit.failed(e))
        return LogHandle(self, self._commit(level, rendered))

    def fatal(self, *messages: Any) -> LogHandle:
        return self._log(Level.FATAL, messages)

    def error(self, *messages: Any) -> LogHandle:
        return self._log(Level.ERROR, messages)

    def warn(self, *messages: Any) -> LogHandle:
        return self._log(Level.WARN, messages)

    def info(self, *messages: Any) -> LogHandle:
        return self._log(Level.INFO, messages)

    def log(self, *messages: Any) -> LogHandle:
        return self._log(Level.LOG, messages)

    def verbose(self, *messages: Any) -> LogHandle:
        return self._log(Level.VERBOSE, messages)

    def debug(self, *messages: Any) -> LogHandle:
        return self._log(Level.DEBUG, messages)

    def trace(self, *messages: Any) -> LogHandle:
        return self._log(Level.TRACE, messages)

    def fork(self, context: Any = None) -> "Logger":
        """Contextualize the logger.

        Args:
            context: Value or zero-argument producer to push onto the
                context stack. None leaves the stack as it is.

        Returns:
            A new logger with the context appended
        """
        contexts = self._contexts if context is None else self._contexts + (context,)
        return Logger(self._sinks, self._render, contexts, self._conditions)

    def push(self, context: Any = None) -> "Logger":
        """Alias for :meth:`fork`.

        .. deprecated:: Use :meth:`fork` instead.
        """
        warnings.warn("Logger.push() is deprecated, use Logger.fork()", DeprecationWarning, stacklevel=2)
        return self.fork(context)

    def module(self, context: Any = None) -> "Logger":
        """Alias for :meth:`fork`."""
        return self.fork(context)

    def if_(self, condition: Any = None) -> "Logger":
        """Conditionally cull logs.

        Args:
            condition: A bool, a severity floor (the call passes when its
                level is at least the floor) or a ``level -> bool``
                predicate. None adds nothing.

        Returns:
            A new logger with the condition appended
        """
        conditions = self._conditions
        if condition is not None:
            conditions = conditions + (check_condition(condition),)
        return Logger(self._sinks, self._render, self._contexts, conditions)

    def to(self, *sinks: SinkLike) -> "Logger":
        """Route traffic to these sinks as well.

        Returns:
            A new logger with the sinks appended, or this logger when no
            sinks are given
        """
        if not sinks:
            return self
        return Logger(self._sinks + _lift_sinks(sinks), self._render, self._contexts, self._conditions)

    def sequence(self, other: "Logger") -> "Logger":
        """Drive this logger and ``other`` from a single call site.

        The combined logger renders with both renderers, using this
        logger's contexts and conditions, then commits the left result
        through this logger's sinks and the right one through ``other``'s.
        The left side is always started first, and the handle completes
        once both sides have.

        Args:
            other: The logger to sequence after this one

        Returns:
            A new logger
        """
        first = self

        def render_pair(level: Level, contexts: list, messages: list) -> tuple[Any, Any]:
            return (
                first._render(level, contexts, messages),
                other._render(level, contexts, list(messages)),
            )

        def commit_pair(level: Level, rendered: tuple[Any, Any]) -> Commit:
            left, right = rendered
            left_commit = first._commit(level, left)
            return Commit.join(left_commit, other._commit(level, right))

        return Logger(Sink.sync(commit_pair), render_pair, self._contexts, self._conditions)
