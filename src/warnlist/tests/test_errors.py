"""Tests for ErrorList rendering and value semantics."""

from __future__ import annotations

import pytest

from warnlist import ErrorList


def test_render_fatal_and_warnings() -> None:
    """Fatal block comes first, then the plural warnings block."""
    err = ErrorList([ValueError("w1"), ValueError("w2")], fatal=RuntimeError("boom"))
    assert str(err) == "fatal:\nboom\nwarnings:\nw1\nw2\n"


def test_render_single_warning_uses_singular_header() -> None:
    """One warning uses the singular header."""
    assert str(ErrorList([ValueError("w1")])) == "warning:\nw1\n"


def test_render_fatal_only() -> None:
    """Without warnings only the fatal block is rendered."""
    assert ErrorList(fatal=RuntimeError("boom")).render() == "fatal:\nboom\n"


def test_render_empty() -> None:
    """An empty list renders as an empty string."""
    assert str(ErrorList()) == ""


def test_is_raisable_as_plain_exception() -> None:
    """ErrorList can be raised and caught as any Exception."""
    with pytest.raises(Exception, match="warning:\nw1"):
        raise ErrorList([ValueError("w1")])


def test_warnings_are_immutable() -> None:
    """Later changes to the source list and field assignment have no effect."""
    source = [ValueError("w1")]
    err = ErrorList(source)
    source.append(ValueError("w2"))

    assert len(err.warnings) == 1
    assert isinstance(err.warnings, tuple)
    with pytest.raises(AttributeError):
        err.fatal = RuntimeError("x")  # type: ignore[misc]


def test_equality_by_members() -> None:
    """Equality compares the fatal error and warnings."""
    w1, boom = ValueError("w1"), RuntimeError("boom")
    assert ErrorList([w1], boom) == ErrorList([w1], boom)
    assert ErrorList([w1], boom) != ErrorList([w1])
    # Exceptions compare by identity
    assert ErrorList([ValueError("w1")]) != ErrorList([ValueError("w1")])
    assert hash(ErrorList([w1], boom)) == hash(ErrorList((w1,), boom))


def test_errors_yields_fatal_first() -> None:
    """errors iterates the fatal error before warnings."""
    w1, w2, boom = ValueError("w1"), ValueError("w2"), RuntimeError("boom")
    assert list(ErrorList([w1, w2], boom).errors) == [boom, w1, w2]
    assert list(ErrorList([w1]).errors) == [w1]


def test_repr_names_fields() -> None:
    """repr shows both fields."""
    text = repr(ErrorList([ValueError("w1")]))
    assert text.startswith("ErrorList(")
    assert "ValueError('w1')" in text
    assert "fatal=None" in text


def test_as_group_supports_except_star() -> None:
    """as_group() works with except* handlers."""
    w1, boom = ValueError("w1"), RuntimeError("boom")
    caught: list[BaseException] = []

    try:
        raise ErrorList([w1], boom).as_group()
    except* RuntimeError as eg:
        caught.extend(eg.exceptions)
    except* ValueError as eg:
        caught.extend(eg.exceptions)

    assert caught == [boom, w1]


def test_as_group_rejects_empty_list() -> None:
    """An empty list cannot become an ExceptionGroup."""
    with pytest.raises(ValueError):
        ErrorList().as_group()
