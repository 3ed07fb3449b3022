"""Check result aggregate for one checker run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paramcheck.domain.exceptions.base import ParamCheckError
    from paramcheck.domain.model.parameter import Parameter


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of validating one parameter collection.

    Immutable aggregate consumed by ReporterProtocol.report().
    Validation is fail-fast, so at most one error is carried.

    Attributes:
        subject: What was checked, e.g. "GET /pets/{id}"
        parameters: Parameters of the collection in order, reference members
            included when the context resolver materialized them
        unresolved: Pointers of reference members, resolvable or not
        error: First error found, None if passed
        duration_ms: Wall time of validation
    """

    subject: str
    parameters: tuple[Parameter, ...] = ()
    unresolved: tuple[str, ...] = ()
    error: ParamCheckError | None = None
    duration_ms: float = 0.0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.subject:
            raise ValueError("subject must not be empty")
        if self.duration_ms < 0:
            raise ValueError(f"duration_ms must be >= 0, got {self.duration_ms}")

    @property
    def passed(self) -> bool:
        """Check if validation passed (no error)."""
        return self.error is None

    @property
    def error_type(self) -> str | None:
        """Class name of error, None if passed."""
        if self.error is None:
            return None
        return type(self.error).__name__
