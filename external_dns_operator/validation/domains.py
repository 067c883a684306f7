"""Domain filter validation."""

import logging
from typing import Callable, Iterable, Optional

import re2

from external_dns_operator.errors import FieldInvariantViolation, violation_reason
from external_dns_operator.models.externaldns import (
    MATCH_TYPE_EXACT,
    MATCH_TYPE_PATTERN,
    DomainFilter,
)

logger = logging.getLogger(__name__)


def validate_domain_filter(domain: DomainFilter) -> None:
    """
    Validate a single domain filter.

    Args:
        domain: Filter to validate

    Raises:
        FieldInvariantViolation: If the filter is incomplete or its pattern
            is not a valid RE2 expression
    """
    if domain.match_type == MATCH_TYPE_EXACT:
        if not domain.name:
            raise FieldInvariantViolation(
                '"Name" cannot be empty when match type is "Exact"'
            )
    elif domain.match_type == MATCH_TYPE_PATTERN:
        if not domain.pattern:
            raise FieldInvariantViolation(
                '"Pattern" cannot be empty when match type is "Pattern"'
            )
        try:
            re2.compile(domain.pattern)
        except re2.error as e:
            raise FieldInvariantViolation(
                f'invalid pattern for "Pattern" match type: {e}'
            ) from e
    else:
        raise FieldInvariantViolation(f'unsupported match type "{domain.match_type}"')


def domain_filter_error(domain: DomainFilter) -> Optional[str]:
    """Reason the filter is rejected, or None if it is valid."""
    return violation_reason(lambda: validate_domain_filter(domain))


def domain_filter_checks(domains: Iterable[DomainFilter]) -> list[Callable[[], None]]:
    """One independent check per filter, in list order."""
    return [lambda d=d: validate_domain_filter(d) for d in domains]
