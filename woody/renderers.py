# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Woody contributors

"""Renderers turning a log call into the value sinks receive."""

import json
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, Optional

from .level import Level


def _format(message: Any) -> str:
    if isinstance(message, str):
        return message
    if isinstance(message, (dict, list, tuple)):
        return json.dumps(message, default=str)
    return str(message)


def bracketed() -> Callable[[Level, list, list], str]:
    """Render contexts as ``[ctx]`` prefixes followed by the messages.

    Example:
        >>> render = bracketed()
        >>> render(Level.INFO, ["2025-01-01T00:00:00Z", "INFO"], ["started", 3])
        '[2025-01-01T00:00:00Z] [INFO] started 3'
    """

    def render(level: Level, contexts: list, messages: list) -> str:
        parts = [f"[{_format(context)}]" for context in contexts]
        parts.extend(_format(message) for message in messages)
        return " ".join(parts)

    return render


def json_lines(name: Optional[str] = None) -> Callable[[Level, list, list], str]:
    """Render each log call as a single JSON object.

    Dict messages are merged into an ``extra`` object; all other messages
    are joined into ``message``.

    Args:
        name: Optional logger name for identification

    Returns:
        A renderer producing one JSON document per call
    """

    def render(level: Level, contexts: list, messages: list) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level.name,
        }
        if name:
            log_entry["logger"] = name
        if contexts:
            log_entry["context"] = contexts

        extra: dict[str, Any] = {}
        text = []
        for message in messages:
            if isinstance(message, dict):
                extra.update(message)
            else:
                text.append(_format(message))
        log_entry["message"] = " ".join(text)

        if extra:
            log_entry["extra"] = extra

        return json.dumps(log_entry, default=str)

    return render
