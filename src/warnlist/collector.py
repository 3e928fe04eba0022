"""Sequential collection of warnings up to the first fatal error.

Example:
    >>> c = Collector(lambda e: str(e) == "boom")
    >>> c.collect(ValueError("w1")) is None
    True
    >>> c.collect(ValueError("boom"))
    ValueError('boom')
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

from .errors import CollectorClosedError, ErrorList

if TYPE_CHECKING:
    from .log import BoundLogger

P = ParamSpec("P")
T = TypeVar("T")

Classifier = Callable[[Exception], bool]


class Collector:
    """Collects errors up to the first fatal error.

    Attributes:
        is_fatal: Distinguishes fatal errors (True) from warnings (False)
        fatal_with_warnings: When True a fatal error is returned as an ErrorList
            together with the warnings collected so far. When False (default)
            only the fatal error is returned and the warnings are discarded.

    Not safe for concurrent use.
    """

    __slots__ = ("is_fatal", "fatal_with_warnings", "_warnings", "_fatal", "_closed", "_result", "_log")

    def __init__(
        self,
        is_fatal: Classifier,
        *,
        fatal_with_warnings: bool | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        if fatal_with_warnings is None:
            from .config import get_settings
            fatal_with_warnings = get_settings().fatal_with_warnings
        if logger is None:
            from .log import get_logger
            logger = get_logger("warnlist.collector")
        self.is_fatal = is_fatal
        self.fatal_with_warnings = fatal_with_warnings
        self._warnings: list[Exception] = []
        self._fatal: Exception | None = None
        self._closed = False
        self._result: Exception | None = None
        self._log = logger.bind(collector=f"{id(self):x}")

    # ─── State ─────────────────────────────────────────────────────────

    @property
    def closed(self) -> bool:
        """True once a fatal error was collected or finish() was called."""
        return self._closed

    @property
    def warnings(self) -> tuple[Exception, ...]:
        return tuple(self._warnings)

    @property
    def fatal(self) -> Exception | None:
        return self._fatal

    # ─── Collection ────────────────────────────────────────────────────

    def collect(self, err: Exception | None) -> Exception | None:
        """Collect a single error (warning or fatal).

        Returns None while collection can continue (only warnings so far),
        otherwise the terminal result. Must not be called after the first
        fatal error or after finish().

        Raises:
            CollectorClosedError: if the collector is already closed
        """
        if self._closed:
            raise CollectorClosedError()
        if err is None:
            return None
        if self.is_fatal(err):
            self._fatal = err
            result = self._close()
            self._log.debug("fatal collected", error_type=type(err).__name__, warnings=len(self._warnings),
                            fatal_with_warnings=self.fatal_with_warnings)
            return result
        self._warnings.append(err)
        self._log.debug("warning collected", error_type=type(err).__name__, warnings=len(self._warnings))
        return None

    def run(self, fn: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs) -> tuple[T | None, Exception | None]:
        """Call fn and collect whatever Exception it raises.

        Returns (value, None) on success, (None, None) when the raised error
        was a warning and (None, terminal_result) when it was fatal.
        """
        if self._closed:
            raise CollectorClosedError()
        try:
            value = fn(*args, **kwargs)
        except Exception as e:
            return None, self.collect(e)
        return value, None

    def finish(self) -> Exception | None:
        """End collection and return the collected error(s). Safe to call repeatedly."""
        if self._closed:
            return self._result
        result = self._close()
        self._log.debug("collector finished", warnings=len(self._warnings))
        return result

    def _close(self) -> Exception | None:
        # State is final before any event is emitted.
        self._closed = True
        self._result = self._terminal()
        return self._result

    def _terminal(self) -> Exception | None:
        if not self.fatal_with_warnings and self._fatal is not None:
            return self._fatal
        if self._fatal is None and not self._warnings:
            return None
        # A single warning is also wrapped so fatal-ness can be read the same way for every result.
        return ErrorList(self._warnings, self._fatal)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"Collector({state}, warnings={len(self._warnings)}, fatal={self._fatal!r})"
