# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""Completion tracking for log calls and the chainable handle."""

import asyncio
import concurrent.futures
import warnings
from collections.abc import Awaitable, Generator
from typing import TYPE_CHECKING, Any, Optional

from .level import Level

if TYPE_CHECKING:
    from .sink import Sink

# Tasks started for fire-and-forget log calls; the event loop only keeps
# weak references to them.
_in_flight: set[asyncio.Future] = set()

_FACADE = frozenset({
    "fatal",
    "error",
    "warn",
    "info",
    "log",
    "verbose",
    "debug",
    "trace",
    "fork",
    "push",
    "module",
    "if_",
    "to",
    "sequence",
})


def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


async def _complete(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


def _schedule(pending: Any, loop: asyncio.AbstractEventLoop) -> asyncio.Future:
    """Turn a sink outcome into a future on the running loop.

    Coroutines are started eagerly: they run up to their first suspension
    before this returns, so sinks start in the order they are committed.
    """
    if isinstance(pending, asyncio.Future):
        return pending
    if isinstance(pending, concurrent.futures.Future):
        future = asyncio.wrap_future(pending, loop=loop)
    else:
        coro = pending if asyncio.iscoroutine(pending) else _complete(pending)
        future = asyncio.Task(coro, loop=loop, eager_start=True)
    _in_flight.add(future)
    future.add_done_callback(_in_flight.discard)
    return future


class Commit:
    """Combined completion of every sink started by one log call.

    Synchronous sinks are done as soon as they return. With a running event
    loop, awaitable sinks are started as eager tasks; without one they are
    run to completion before the log call returns. Callback sinks stay
    pending until they call ``done``.

    A failure that nobody retrieves by awaiting is reported when the commit
    is garbage collected, through the running loop's exception handler or
    as a ``RuntimeWarning``.
    """

    def __init__(self) -> None:
        self._pending: list[Any] = []
        self._error: Optional[BaseException] = None
        self._retrieved = False

    def __del__(self) -> None:
        if self._error is None or self._retrieved:
            return
        message = f"Log call exception was never retrieved: {self._error!r}"
        loop = _running_loop()
        if loop is not None:
            loop.call_exception_handler({
                "message": message,
                "exception": self._error,
            })
        else:
            warnings.warn(message, RuntimeWarning, stacklevel=2)

    @classmethod
    def failed(cls, error: BaseException) -> "Commit":
        commit = cls()
        commit._fail(error)
        return commit

    @classmethod
    def join(cls, *commits: "Commit") -> "Commit":
        joined = cls()
        for commit in commits:
            joined._absorb(commit)
        return joined

    @property
    def done(self) -> bool:
        """True once every sink has finished, successfully or not."""
        return all(
            isinstance(pending, (asyncio.Future, concurrent.futures.Future)) and pending.done()
            for pending in self._pending
        )

    def _fail(self, error: BaseException) -> None:
        if self._error is None:
            self._error = error

    def _absorb(self, other: "Commit") -> None:
        self._pending.extend(other._pending)
        if other._error is not None:
            self._fail(other._error)
        other._retrieved = True

    def _collect(self, future: concurrent.futures.Future) -> None:
        if not future.cancelled() and future.exception() is not None:
            self._fail(future.exception())

    def start(self, sink: "Sink", level: Level, rendered: Any) -> None:
        """Start one sink and track its completion.

        A failing sink never prevents the next one from being started.
        """
        try:
            outcome = sink.commit(level, rendered)
        except Exception as e:
            self._fail(e)
            return

        if outcome is None:
            return
        if isinstance(outcome, Commit):
            self._absorb(outcome)
            return
        if isinstance(outcome, concurrent.futures.Future) and outcome.done():
            error = outcome.exception()
            if error is not None:
                self._fail(error)
            return

        loop = _running_loop()
        if loop is not None:
            self._pending.append(_schedule(outcome, loop))
        elif isinstance(outcome, concurrent.futures.Future):
            # completed by the sink from another thread
            outcome.add_done_callback(self._collect)
            self._pending.append(outcome)
        else:
            try:
                asyncio.run(_complete(outcome))
            except Exception as e:
                self._fail(e)

    async def wait(self) -> None:
        """Wait for every sink, raising the first failure observed."""
        loop = asyncio.get_running_loop()
        self._pending = [_schedule(pending, loop) for pending in self._pending]
        self._retrieved = True
        if self._error is not None:
            raise self._error
        if self._pending:
            await asyncio.gather(*self._pending)

    def __await__(self) -> Generator[Any, None, None]:
        return self.wait().__await__()


class LogHandle:
    """Value returned by every severity method.

    Awaiting it waits for the sinks of that call. It also carries the
    severity methods and combinators of the logger that produced it, so
    calls can be chained: ``log.info("a").warn("b")``. Chained calls do not
    wait for each other.
    """

    __slots__ = ("_logger", "_commit")

    def __init__(self, logger: Any, commit: Commit):
        self._logger = logger
        self._commit = commit

    @property
    def done(self) -> bool:
        return self._commit.done

    def __await__(self) -> Generator[Any, None, None]:
        return self._commit.__await__()

    def __getattr__(self, name: str) -> Any:
        if name in _FACADE:
            return getattr(self._logger, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __repr__(self) -> str:
        state = "done" if self.done else "pending"
        return f"<LogHandle {state}>"
