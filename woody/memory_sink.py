# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""In-memory sink for testing."""

from typing import Any, Optional

from .level import Level


class MemorySink:
    """Sink that stores rendered records in memory without output.

    Useful for testing to verify logging behavior without cluttering test
    output. Every record that reaches the sink is kept; filtering is the
    job of the logger's conditions.
    """

    def __init__(self) -> None:
        self.logs: list[dict[str, Any]] = []

    def __call__(self, level: Level, rendered: Any) -> None:
        self.logs.append({"level": level, "rendered": rendered})

    def clear_logs(self) -> None:
        """Clear all stored records."""
        self.logs.clear()

    def get_logs(self, level: Optional[Level] = None) -> list[dict[str, Any]]:
        """Get stored records, optionally filtered by level.

        Args:
            level: Optional level to filter by

        Returns:
            List of log entries
        """
        if level is None:
            return self.logs
        return [log for log in self.logs if log["level"] is level]

    def has_log(self, text: str, level: Optional[Level] = None) -> bool:
        """Check if a record containing ``text`` was committed.

        Args:
            text: Substring to search for in the string form of each record
            level: Optional level to filter by

        Returns:
            True if the text is found, False otherwise
        """
        return any(text in str(log["rendered"]) for log in self.get_logs(level))
