"""Read the fatal error and warnings out of a Collector result of any shape."""

from __future__ import annotations

from .errors import ErrorList


def fatal_only(err: BaseException | None) -> BaseException | None:
    """Fatal error, if any, in an error returned by a Collector.

    Returns None if and only if err is None or an ErrorList without a fatal
    error. Any other error is returned unchanged: a bare error only comes out
    of a Collector when it was fatal.
    """
    return err.fatal if isinstance(err, ErrorList) else err


def warnings_only(err: BaseException | None) -> tuple[Exception, ...]:
    """Warnings in an error returned by a Collector; empty for None or a bare error."""
    return err.warnings if isinstance(err, ErrorList) else ()
