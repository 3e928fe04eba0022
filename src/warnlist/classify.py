"""Ready-made classifiers for Collector.

Each builder returns a predicate ``(Exception) -> bool`` answering "is this
error fatal?". Combine them with any_of / all_of.

Example:
    >>> is_fatal = any_of(by_type(PermissionError), by_pattern("corrupt"))
    >>> is_fatal(ValueError("corrupt header"))
    True
"""

from __future__ import annotations

from .collector import Classifier


def always_fatal(err: Exception) -> bool:
    """Every error stops collection."""
    return True


def never_fatal(err: Exception) -> bool:
    """Every error is a warning."""
    return False


def by_type(*exc_types: type[BaseException]) -> Classifier:
    """Fatal when the error is an instance of any of exc_types."""
    if not exc_types:
        raise ValueError("by_type() needs at least one exception type")
    return lambda err: isinstance(err, exc_types)


def by_message(*messages: str) -> Classifier:
    """Fatal when str(err) equals one of messages exactly."""
    wanted = frozenset(messages)
    return lambda err: str(err) in wanted


def by_pattern(*substrings: str) -> Classifier:
    """Fatal when any substring occurs in "<TypeName> <message>", ignoring case."""
    if not substrings:
        raise ValueError("by_pattern() needs at least one substring")
    patterns = tuple(s.lower() for s in substrings)

    def classify(err: Exception) -> bool:
        haystack = f"{type(err).__name__} {err}".lower()
        return any(p in haystack for p in patterns)

    return classify


def any_of(*classifiers: Classifier) -> Classifier:
    """Fatal when any classifier says so. With no classifiers nothing is fatal."""
    return lambda err: any(c(err) for c in classifiers)


def all_of(*classifiers: Classifier) -> Classifier:
    """Fatal only when every classifier agrees. With no classifiers everything is fatal."""
    return lambda err: all(c(err) for c in classifiers)
