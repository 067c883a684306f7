"""Exception types and error aggregation shared by the operator."""

import logging
from typing import Callable, Iterable, Optional, Sequence

logger = logging.getLogger(__name__)


class FieldInvariantViolation(ValueError):
    """Raised when a single field invariant of an ExternalDNS spec is violated."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class AggregateRejection(Exception):
    """
    One or more invariant violations rejected together.

    The string form follows the Kubernetes API machinery aggregate format:
    a single reason is rendered as-is, several reasons as ``[r1, r2]``.
    """

    def __init__(self, reasons: Sequence[str]):
        if not reasons:
            raise ValueError("AggregateRejection requires at least one reason")
        self.reasons: tuple[str, ...] = tuple(reasons)
        super().__init__(self._render())

    def _render(self) -> str:
        if len(self.reasons) == 1:
            return self.reasons[0]
        return "[" + ", ".join(self.reasons) + "]"

    def __str__(self) -> str:
        return self._render()


class SchemaConversionError(ValueError):
    """Raised when a versioned ExternalDNS document cannot be converted."""

    pass


class NameValidationError(ValueError):
    """Raised when a derived name is not a valid DNS-1123 label."""

    pass


def unique_reasons(reasons: Iterable[str]) -> tuple[str, ...]:
    """Drop repeated reasons, keeping first-seen order."""
    seen: set[str] = set()
    ordered = []
    for reason in reasons:
        if reason in seen:
            continue
        seen.add(reason)
        ordered.append(reason)
    return tuple(ordered)


def collect_violations(checks: Iterable[Callable[[], None]]) -> list[str]:
    """
    Run every check and gather the reasons of the ones that fail.

    Checks signal failure by raising :class:`FieldInvariantViolation`.
    A failing check never prevents the following ones from running.

    Args:
        checks: Zero-argument callables

    Returns:
        Violation reasons in check order
    """
    reasons = []
    for check in checks:
        try:
            check()
        except FieldInvariantViolation as e:
            logger.debug(f"Check failed: {e.reason}")
            reasons.append(e.reason)
    return reasons


def violation_reason(check: Callable[[], None]) -> Optional[str]:
    """Non-raising form of a single check: the reason if it fails, else None."""
    try:
        check()
        return None
    except FieldInvariantViolation as e:
        return e.reason
