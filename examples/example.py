#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""Example usage of the woody module.

This script demonstrates how loggers are built by combining sinks,
renderers, contexts and conditions.
"""

import asyncio

import woody
from woody import Level


async def main():
    """Demonstrate logging functionality."""

    print("=" * 60)
    print("Woody Examples")
    print("=" * 60)
    print()

    # Example 1: Bracketed text on the console
    print("Example 1: Bracketed console logger")
    print("-" * 60)
    log = woody.as_(woody.bracketed()).to(woody.to_console)

    log.info("Service started successfully")
    log.fork("db").fork("pool-1").info("Connection opened", "size=4")
    print()

    # Example 2: Context producers run on every call
    print("Example 2: Timestamp and level contexts")
    print("-" * 60)
    stamped = log.fork(woody.timestamp()).fork(woody.level_name())

    stamped.info("Processing request")
    stamped.debug("Cache lookup", "hit=False")
    print()

    # Example 3: Conditions
    print("Example 3: Gating by severity and predicate")
    print("-" * 60)
    quiet = stamped.if_(Level.WARN)

    quiet.info("This INFO message won't appear (below WARN)")
    quiet.warn("Rate limit approaching", "current=95", "limit=100")

    only_errors = stamped.if_(lambda level: level is Level.ERROR)
    only_errors.fatal("This FATAL message won't appear (predicate wants ERROR)")
    only_errors.error("Failed to connect", "host=localhost")
    print()

    # Example 4: Capturing records in memory for tests
    print("Example 4: MemorySink for testing")
    print("-" * 60)
    sink = woody.MemorySink()
    test_log = woody.as_(woody.bracketed()).to(sink).fork("test-service")

    test_log.info("Test message 1").warn("Test warning").error("Test error")

    print(f"Total logs captured: {len(sink.logs)}")
    print(f"Has 'Test message 1': {sink.has_log('Test message 1')}")
    print(f"Warning logs: {len(sink.get_logs(Level.WARN))}")
    print()

    # Example 5: Async sinks and awaiting the handle
    print("Example 5: Async sink")
    print("-" * 60)

    async def slow_sink(level, rendered):
        await asyncio.sleep(0.1)
        print(f"  (after 100ms) {rendered}")

    await log.to(slow_sink).info("Flushed before moving on")
    print()

    # Example 6: One call site, two outputs
    print("Example 6: Sequencing text and JSON loggers")
    print("-" * 60)
    structured = woody.as_(woody.json_lines("app")).to(woody.to_console)
    both = log.sequence(structured)

    await both.fork("auth").info(
        "User authentication successful",
        {"user_id": 12345, "method": "oauth2"},
    )
    print()

    # Example 7: Defaults from the environment
    print("Example 7: create_logger")
    print("-" * 60)
    service_log = woody.create_logger(level="DEBUG", name="example-service")
    service_log.debug("Now debug messages are visible")
    print()

    print("=" * 60)
    print("Examples completed!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
