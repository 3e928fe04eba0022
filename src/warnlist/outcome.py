"""Tagged view of a Collector result.

A Collector returns None, a bare fatal error or an ErrorList. Outcome names
which of the three it is, so callers can branch on ``kind`` instead of on
isinstance checks.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Callable, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .errors import ErrorList
from .extract import fatal_only, warnings_only

U = TypeVar("U")


class OutcomeKind(StrEnum):
    NONE = "none"
    FATAL = "fatal"
    COMPOSITE = "composite"


class Outcome(BaseModel):
    """Result of a collection cycle with its shape made explicit.

    Attributes:
        kind: Which shape the original result had
        fatal: The fatal error, if any
        warnings: Collected warnings (empty for none/fatal kinds)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: OutcomeKind
    fatal: Exception | None = None
    warnings: tuple[Exception, ...] = Field(default_factory=tuple)

    @computed_field
    @property
    def ok(self) -> bool:
        """No fatal error occurred (warnings are allowed)."""
        return self.fatal is None

    @computed_field
    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def match(
        self,
        *,
        none: Callable[[], U],
        fatal: Callable[[Exception], U],
        composite: Callable[[Exception | None, tuple[Exception, ...]], U],
    ) -> U:
        """Exhaustive dispatch on kind."""
        match self.kind:
            case OutcomeKind.NONE: return none()
            case OutcomeKind.FATAL: return fatal(self.fatal)  # type: ignore[arg-type]
            case OutcomeKind.COMPOSITE: return composite(self.fatal, self.warnings)


def outcome_of(err: Exception | None) -> Outcome:
    """Classify a Collector result into an Outcome."""
    if err is None:
        kind = OutcomeKind.NONE
    elif isinstance(err, ErrorList):
        kind = OutcomeKind.COMPOSITE
    else:
        kind = OutcomeKind.FATAL
    return Outcome(kind=kind, fatal=fatal_only(err), warnings=warnings_only(err))
