"""Composite error value and the collector misuse signal.

ErrorList bundles zero or more warnings with at most one fatal error into a
single exception, so it can travel anywhere a plain error is expected.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from collections.abc import Iterator


class ErrorList(Exception):
    """Warnings plus an optional fatal error, rendered as one message.

    Immutable once constructed. A Collector never hands out an empty list,
    but building one directly is allowed.

    Example:
        >>> err = ErrorList([ValueError("w1"), ValueError("w2")], fatal=RuntimeError("boom"))
        >>> print(err, end="")
        fatal:
        boom
        warnings:
        w1
        w2
    """

    __slots__ = ("_warnings", "_fatal")

    def __init__(self, warnings: Iterable[Exception] = (), fatal: Exception | None = None) -> None:
        self._warnings: tuple[Exception, ...] = tuple(warnings)
        self._fatal = fatal
        super().__init__(self._warnings, fatal)

    @property
    def warnings(self) -> tuple[Exception, ...]:
        """Warnings in the order they were collected."""
        return self._warnings

    @property
    def fatal(self) -> Exception | None:
        return self._fatal

    @property
    def errors(self) -> Iterator[Exception]:
        """Every contained error, fatal first."""
        if self._fatal is not None:
            yield self._fatal
        yield from self._warnings

    def render(self) -> str:
        """Multi-line message for logs. Not a stable format."""
        buf = StringIO()
        if self._fatal is not None:
            buf.write(f"fatal:\n{self._fatal}\n")
        match len(self._warnings):
            case 0: pass
            case 1: buf.write("warning:\n")
            case _: buf.write("warnings:\n")
        for w in self._warnings:
            buf.write(f"{w}\n")
        return buf.getvalue()

    __str__ = render

    def as_group(self) -> ExceptionGroup[Exception]:
        """Convert to a builtin ExceptionGroup for use with ``except*``.

        Raises:
            ValueError: if the list holds no errors at all
        """
        if not (errs := list(self.errors)):
            raise ValueError("cannot build an ExceptionGroup from an empty ErrorList")
        return ExceptionGroup("fatal error with warnings" if self._fatal is not None else "warnings", errs)

    def __repr__(self) -> str:
        return f"ErrorList(warnings={list(self._warnings)!r}, fatal={self._fatal!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorList):
            return NotImplemented
        return self._fatal == other._fatal and self._warnings == other._warnings

    def __hash__(self) -> int:
        return hash((self._fatal, self._warnings))


class CollectorClosedError(BaseException):
    """Raised when errors are fed to a Collector that has already closed.

    Signals a bug in the calling code rather than a pipeline outcome, so it
    derives from BaseException and slips past ``except Exception`` handlers.
    """

    def __init__(self, message: str = "Collector already done") -> None:
        super().__init__(message)
