# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""Tests for the logger value and its combinators."""

from decimal import Decimal

import pytest

import woody
from woody import Level, Logger, MemorySink


@pytest.fixture
def captured():
    """Contexts seen by the renderer, one list per rendered call."""
    return []


@pytest.fixture
def context_logger(captured):
    """Logger whose renderer records the materialized contexts."""

    def render(level, contexts, messages):
        captured.append(contexts)

    return woody.as_(render).to(woody.to_nowhere)


class TestBaseline:
    """Tests for severity methods."""

    def test_logs_level_and_message(self):
        """Test that every severity method commits its level and message in order."""
        sink = MemorySink()
        logger = woody.as_(woody.bracketed()).to(sink)

        logger.info("foo-0") \
              .warn("foo-1") \
              .error("foo-2") \
              .verbose("foo-3") \
              .debug("foo-4") \
              .trace("foo-5") \
              .log("foo-6")

        expected = [
            (Level.INFO, "foo-0"),
            (Level.WARN, "foo-1"),
            (Level.ERROR, "foo-2"),
            (Level.VERBOSE, "foo-3"),
            (Level.DEBUG, "foo-4"),
            (Level.TRACE, "foo-5"),
            (Level.LOG, "foo-6"),
        ]
        assert [(log["level"], log["rendered"]) for log in sink.logs] == expected

    def test_fatal(self):
        """Test logging a fatal message."""
        sink = MemorySink()
        logger = woody.as_(woody.bracketed()).to(sink)

        logger.fatal("going down")

        assert sink.logs == [{"level": Level.FATAL, "rendered": "going down"}]

    def test_messages_passed_as_list(self):
        """Test that variadic arguments reach the renderer as an ordered list."""
        seen = []
        logger = woody.as_(lambda level, contexts, messages: seen.append(messages))

        logger.info("a", 1, {"b": 2})
        logger.info()

        assert seen == [["a", 1, {"b": 2}], []]

    def test_no_sinks(self):
        """Test that a logger without sinks still renders."""
        seen = []
        logger = Logger(None, lambda level, contexts, messages: seen.append(level))

        logger.warn("x")

        assert seen == [Level.WARN]

    def test_single_sink_is_lifted(self):
        """Test that a single sink is accepted in place of a sequence."""
        sink = MemorySink()
        logger = Logger(sink, woody.bracketed())

        assert len(logger.sinks) == 1
        logger.info("hello")
        assert sink.has_log("hello")

    def test_render_must_be_callable(self):
        """Test that a logger cannot be built without a renderer."""
        with pytest.raises(TypeError, match="render must be callable"):
            Logger([], None)


class TestFork:
    """Tests for fork and its aliases."""

    def test_stacks_contexts(self, context_logger, captured):
        """Test that forks stack their contexts oldest first."""
        context_logger.log()
        context_logger.fork("ctx").info()
        context_logger.log()
        context_logger.fork("ctx").fork("foo").fork("bar").log()

        assert captured == [[], ["ctx"], [], ["ctx", "foo", "bar"]]

    def test_context_producer_is_evaluated_per_call(self, context_logger, captured):
        """Test that a callable context is invoked on every call."""
        counter = iter(range(10))
        forked = context_logger.fork(lambda: str(next(counter)))

        forked.log()
        forked.log()

        assert captured == [["0"], ["1"]]

    def test_producer_sees_current_level(self, context_logger, captured):
        """Test that producers observe the level of the call they render for."""
        forked = context_logger.fork(woody.current_level)

        forked.debug()
        forked.error()

        assert captured == [[Level.DEBUG], [Level.ERROR]]

    def test_current_level_outside_call(self):
        """Test that no level is set outside of a log call."""
        assert woody.current_level() is None

    def test_null_context_returns_equal_but_distinct_logger(self, context_logger, captured):
        """Test that forking with nothing keeps the contexts but returns a new logger."""
        context_logger.log("test")
        context_logger.fork().log("test")
        context_logger.fork("cat").log("test")
        context_logger.fork("cat").fork(None).log("test")

        assert captured == [[], [], ["cat"], ["cat"]]

        forked = context_logger.fork(None)
        assert forked is not context_logger
        assert forked.contexts == context_logger.contexts

    def test_fork_does_not_affect_parent(self, context_logger, captured):
        """Test that forks on parent and child are independent."""
        parent = context_logger.fork("parent")
        child = parent.fork("child")
        parent.fork("sibling")

        parent.log()
        child.log()

        assert captured == [["parent"], ["parent", "child"]]
        assert parent.contexts == ("parent",)

    def test_module_alias(self, context_logger, captured):
        """Test that module behaves like fork."""
        context_logger.module("mod").info()

        assert captured == [["mod"]]

    def test_push_is_deprecated(self, context_logger, captured):
        """Test that push behaves like fork and warns."""
        with pytest.deprecated_call():
            pushed = context_logger.push("old")

        pushed.info()
        assert captured == [["old"]]


class TestIf:
    """Tests for conditions."""

    @pytest.fixture
    def sink(self):
        return MemorySink()

    @pytest.fixture
    def logger(self, sink):
        return woody.as_(woody.bracketed()).to(sink)

    def test_false_suppresses(self, logger, sink):
        """Test that a false condition suppresses all calls."""
        logger.if_(False).fatal("nope")

        assert sink.logs == []

    def test_true_passes(self, logger, sink):
        """Test that a true condition lets calls through."""
        logger.if_(True).info("yes")

        assert sink.has_log("yes")

    def test_severity_floor(self, logger, sink):
        """Test that a level condition passes calls at or above it."""
        gated = logger.if_(Level.WARN)

        gated.debug("debug")
        gated.info("info")
        gated.warn("warn")
        gated.fatal("fatal")

        assert [log["rendered"] for log in sink.logs] == ["warn", "fatal"]

    def test_numeric_floor(self, logger, sink):
        """Test that a plain number is treated as a severity floor."""
        gated = logger.if_(Level.ERROR.severity)

        gated.warn("warn")
        gated.error("error")

        assert [log["rendered"] for log in sink.logs] == ["error"]

    def test_decimal_floor(self, logger, sink):
        """Test that a Decimal is accepted as a severity floor."""
        gated = logger.if_(Decimal("50"))

        gated.info("info")
        gated.warn("warn")

        assert gated.conditions == (Decimal("50"),)
        assert [log["rendered"] for log in sink.logs] == ["warn"]

    def test_predicate_receives_level(self, logger, sink):
        """Test that a predicate is called with the level of the call."""
        seen = []

        def only_debug(level):
            seen.append(level)
            return level is Level.DEBUG

        gated = logger.if_(only_debug)
        gated.info("info")
        gated.debug("debug")

        assert seen == [Level.INFO, Level.DEBUG]
        assert [log["rendered"] for log in sink.logs] == ["debug"]

    def test_conditions_and_together(self, logger, sink):
        """Test that adding a truthy condition keeps commits and a falsy one removes them."""
        gated = logger.if_(Level.INFO)

        gated.if_(True).info("kept")
        gated.if_(lambda level: 1).info("also kept")
        gated.if_(lambda level: 0).info("dropped")

        assert [log["rendered"] for log in sink.logs] == ["kept", "also kept"]

    def test_short_circuits(self, logger, sink):
        """Test that conditions after a failing one are not evaluated."""
        called = []
        logger.if_(False).if_(lambda level: called.append(level)).info("x")

        assert called == []

    def test_none_adds_nothing(self, logger):
        """Test that a None condition is ignored."""
        gated = logger.if_(None)

        assert gated is not logger
        assert gated.conditions == ()

    @pytest.mark.parametrize("condition", ["WARN", object(), [1]])
    def test_rejects_unsupported_conditions(self, logger, condition):
        """Test that conditions of unsupported kinds are rejected up front."""
        with pytest.raises(TypeError, match="Invalid condition"):
            logger.if_(condition)

    def test_constructor_rejects_unsupported_conditions(self):
        """Test that the constructor validates conditions too."""
        with pytest.raises(TypeError, match="Invalid condition"):
            Logger([], woody.bracketed(), [], ["loud"])

    def test_gated_out_call_skips_rendering(self, sink):
        """Test that nothing is rendered when a condition fails."""
        rendered = []
        logger = woody.as_(lambda level, contexts, messages: rendered.append(level)).to(sink)

        logger.if_(False).info("x")

        assert rendered == []


class TestTo:
    """Tests for routing to sinks."""

    def test_to_without_sinks_is_identity(self):
        """Test that to() returns the same logger."""
        logger = woody.as_(woody.bracketed())

        assert logger.to() is logger

    def test_appends_in_order(self):
        """Test that sinks are appended and started in argument order."""
        order = []
        logger = woody.as_(woody.bracketed()) \
            .to(lambda level, rendered: order.append("a")) \
            .to(lambda level, rendered: order.append("b"),
                lambda level, rendered: order.append("c"))

        logger.info("x")

        assert order == ["a", "b", "c"]

    def test_render_once_for_many_sinks(self):
        """Test that the renderer runs once no matter how many sinks there are."""
        calls = []

        def render(level, contexts, messages):
            calls.append(messages)
            return len(calls)

        first, second, third = MemorySink(), MemorySink(), MemorySink()
        logger = woody.as_(render).to(first, second, third)

        logger.info("x")

        assert len(calls) == 1
        assert first.logs == second.logs == third.logs == [{"level": Level.INFO, "rendered": 1}]

    def test_parent_unchanged(self):
        """Test that to() leaves the receiver's sinks alone."""
        first, second = MemorySink(), MemorySink()
        parent = woody.as_(woody.bracketed()).to(first)
        parent.to(second)

        parent.info("x")

        assert len(first.logs) == 1
        assert second.logs == []
        assert len(parent.sinks) == 1

    def test_rejects_non_callable_sink(self):
        """Test that non-callable sinks are rejected."""
        with pytest.raises(TypeError, match="Sink must be callable"):
            woody.as_(woody.bracketed()).to("stdout")


class TestImmutability:
    """Tests that combinators never alter their receiver."""

    def test_combinators_leave_receiver_unchanged(self):
        """Test that every combinator leaves the original logger's state intact."""
        sink = MemorySink()
        logger = woody.as_(woody.bracketed()).to(sink).fork("base")
        before = (logger.sinks, logger.render, logger.contexts, logger.conditions)

        logger.fork("more")
        logger.module("more")
        logger.if_(False)
        logger.to(MemorySink())
        logger.sequence(woody.as_(woody.bracketed()))

        assert (logger.sinks, logger.render, logger.contexts, logger.conditions) == before
        logger.info("still works")
        assert sink.logs == [{"level": Level.INFO, "rendered": "[base] still works"}]

    def test_stacks_are_tuples(self):
        """Test that the stacks are exposed as immutable sequences."""
        logger = woody.as_(woody.bracketed()).fork("a").if_(True)

        assert isinstance(logger.contexts, tuple)
        assert isinstance(logger.conditions, tuple)
        assert isinstance(logger.sinks, tuple)

    def test_constructor_copies_stacks(self):
        """Test that the logger doesn't share storage with the lists it was built from."""
        contexts = ["a"]
        conditions = [True]
        logger = Logger([], woody.bracketed(), contexts, conditions)

        contexts.append("b")
        conditions.append(False)

        assert logger.contexts == ("a",)
        assert logger.conditions == (True,)
