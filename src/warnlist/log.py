"""Debug events emitted by collectors.

A collector reports what it absorbed ("warning collected", "fatal collected",
"collector finished") as structured events. Events go to a sink chosen by
configure_logging(): human-readable text, JSON Lines, or nowhere.

Quick Start:
    >>> from warnlist.log import configure_logging
    >>> configure_logging(format="text", level="DEBUG")
    >>> c = Collector(is_fatal)   # events now appear on stderr
"""

from __future__ import annotations

import logging
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol, TextIO, runtime_checkable

Fields = dict[str, object]


@dataclass(frozen=True, slots=True)
class Event:
    """One collector event with the logger's bound fields merged in."""

    at: float
    level: str
    name: str
    fields: Fields

    def as_dict(self) -> Fields:
        ts = datetime.fromtimestamp(self.at, tz=UTC).isoformat()
        return {"time": ts, "level": self.level, "event": self.name, **self.fields}


@runtime_checkable
class EventSink(Protocol):
    def emit(self, event: Event) -> None: ...


@dataclass(slots=True)
class TextSink:
    """``12:00:01.250 [debug] fatal collected collector=7f3a error_type=OSError warnings=2``"""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None  # None = color when output is a tty

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = getattr(self.output, "isatty", lambda: False)()

    def emit(self, event: Event) -> None:
        clock = datetime.fromtimestamp(event.at, tz=UTC).strftime("%H:%M:%S.%f")[:-3]
        level = f"[{event.level}]"
        if self.colors:
            level = f"{_TINT.get(event.level, '')}{level}\033[0m"
        pairs = " ".join(f"{k}={v}" for k, v in sorted(event.fields.items()))
        print(f"{clock} {level} {event.name} {pairs}".rstrip(), file=self.output)


@dataclass(slots=True)
class JsonSink:
    """One JSON object per line."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def emit(self, event: Event) -> None:
        import orjson
        print(orjson.dumps(event.as_dict(), default=str).decode(), file=self.output)


class NullSink:
    """Discards every event."""

    def emit(self, event: Event) -> None:
        pass


_TINT = {"debug": "\033[2m", "info": "\033[32m", "warning": "\033[33m", "error": "\033[31m"}


@dataclass(frozen=True, slots=True)
class BoundLogger:
    """Logger carrying fields that are attached to every event it emits.

    Sink and level default to the global configuration, looked up only when
    an event is actually emitted.
    """

    context: Fields = field(default_factory=dict)
    sink: EventSink | None = None
    level: int | None = None

    def bind(self, **fields: object) -> BoundLogger:
        return BoundLogger({**self.context, **fields}, self.sink, self.level)

    def enabled_for(self, level: int) -> bool:
        return level >= (self.level if self.level is not None else _global_level())

    def debug(self, event: str, **fields: object) -> None:
        if self.enabled_for(logging.DEBUG):
            (self.sink or _global_sink()).emit(Event(time.time(), "debug", event, {**self.context, **fields}))


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────


_sink: ContextVar[EventSink | None] = ContextVar("warnlist_sink", default=None)
_level: ContextVar[int | None] = ContextVar("warnlist_level", default=None)


def configure_logging(
    format: str | None = None,  # noqa: A002
    level: str | None = None,
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
) -> EventSink:
    """Pick where events go: "text", "json" or "none". Unset arguments come from WARNLIST_LOG_* settings."""
    from .config import get_settings
    cfg = get_settings().logging
    format, level = format or cfg.format, level or cfg.level
    match format:
        case "text": sink: EventSink = TextSink(output or sys.stderr, cfg.colors if colors is None else colors)
        case "json": sink = JsonSink(output or sys.stdout)
        case "none": sink = NullSink()
        case _: raise ValueError(f"Unknown format: {format}. Use 'text', 'json', or 'none'")
    _level.set(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))
    _sink.set(sink)
    return sink


def reset_logging() -> None:
    """Forget the configured sink and level; the next event reloads them from settings."""
    _sink.set(None)
    _level.set(None)


def get_logger(name: str | None = None, **fields: object) -> BoundLogger:
    """Logger with the given fields bound. Reads no configuration until it emits."""
    return BoundLogger({**fields, **({"logger": name} if name else {})})


def _global_level() -> int:
    if (level := _level.get()) is None:
        configure_logging()
        level = _level.get()
    return level  # type: ignore[return-value]


def _global_sink() -> EventSink:
    if (sink := _sink.get()) is None:
        sink = configure_logging()
    return sink
