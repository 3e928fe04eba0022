"""Warnlist - collect non-fatal errors up to the first fatal one.

A Collector absorbs the errors of a multi-step operation one by one. Errors
its classifier calls fatal stop the operation; everything else is kept as a
warning and handed back at the end in a single ErrorList.

Quick Start:
    >>> from warnlist import Collector, fatal_only, warnings_only
    >>>
    >>> c = Collector(lambda e: isinstance(e, PermissionError))
    >>> for row in rows:
    ...     if c.collect(validate(row)) is not None:
    ...         break
    >>> err = c.finish()
    >>> fatal_only(err), warnings_only(err)

Keep warnings next to a fatal error:
    >>> c = Collector(is_fatal, fatal_with_warnings=True)

Classifier builders:
    >>> from warnlist.classify import any_of, by_type, by_pattern
    >>> c = Collector(any_of(by_type(OSError), by_pattern("corrupt")))
"""

from __future__ import annotations

__version__ = "0.1.0"

from .collector import Classifier, Collector
from .errors import CollectorClosedError, ErrorList
from .extract import fatal_only, warnings_only
from .outcome import Outcome, OutcomeKind, outcome_of

__all__ = [
    "__version__",
    # Core
    "Collector", "Classifier", "ErrorList", "CollectorClosedError",
    # Extraction
    "fatal_only", "warnings_only",
    # Tagged view
    "Outcome", "OutcomeKind", "outcome_of",
]
