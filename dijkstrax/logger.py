"""Lightweight structured event logging."""

from __future__ import annotations

import json
import math
import sys
from typing import Any, Dict, List, Protocol, Tuple


class Logger(Protocol):
    """Protocol for minimal logger implementations."""

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING``-level event."""
        ...


class NoopLogger:
    """Logger that discards all events."""

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return


def _jsonable(value: Any) -> Any:
    # JSON has no infinity
    if isinstance(value, float) and math.isinf(value):
        return None
    return value


class StdLogger:
    """Logger writing ``key=value`` lines or JSON objects to a stream."""

    _levels: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: Any | None = None,
    ) -> None:
        if level not in self._levels:
            raise ValueError(f"unknown log level {level!r}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def enabled(self, level: str) -> bool:
        """Return ``True`` if events at ``level`` would be written."""
        return self._levels[level] >= self._levels[self.level]

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit ``event`` at ``level`` with additional ``fields``."""
        if not self.enabled(level):
            return
        if self.json_fmt:
            obj = {"level": level, "event": event}
            obj.update({k: _jsonable(v) for k, v in fields.items()})
            self.stream.write(json.dumps(obj) + "\n")
        else:
            kv = " ".join(f"{k}={v}" for k, v in fields.items())
            self.stream.write(f"{level} {event} {kv}".rstrip() + "\n")

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self.log("warning", event, **fields)


class RecordingLogger:
    """Logger that keeps every event in memory.

    Useful for asserting on what the solver did, e.g. the sequence of
    relaxations for a vertex.
    """

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def info(self, event: str, **fields: Any) -> None:
        self.records.append(("info", event, fields))

    def debug(self, event: str, **fields: Any) -> None:
        self.records.append(("debug", event, fields))

    def warning(self, event: str, **fields: Any) -> None:
        self.records.append(("warning", event, fields))

    def events(self, name: str) -> List[Dict[str, Any]]:
        """Return the fields of every recorded event called ``name``."""
        return [fields for _, event, fields in self.records if event == name]


__all__ = ["Logger", "NoopLogger", "StdLogger", "RecordingLogger"]
