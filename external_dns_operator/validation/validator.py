"""Admission validation of ExternalDNS resources."""

import logging
from dataclasses import dataclass
from typing import Optional

from external_dns_operator.errors import (
    AggregateRejection,
    collect_violations,
    unique_reasons,
)
from external_dns_operator.models.externaldns import ExternalDNSSpec
from external_dns_operator.validation.domains import domain_filter_checks
from external_dns_operator.validation.provider import ProviderCredentialValidator
from external_dns_operator.validation.source import SourceConsistencyValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdmissionVerdict:
    """Outcome of validating one admission request."""

    allowed: bool
    reasons: tuple[str, ...] = ()

    @classmethod
    def accept(cls) -> "AdmissionVerdict":
        return cls(allowed=True)

    @classmethod
    def reject(cls, reasons: tuple[str, ...]) -> "AdmissionVerdict":
        return cls(allowed=False, reasons=reasons)

    @property
    def error(self) -> Optional[AggregateRejection]:
        """The rejection as an exception, None when allowed."""
        if self.allowed:
            return None
        return AggregateRejection(self.reasons)

    def raise_for_rejection(self) -> None:
        """Raise :class:`AggregateRejection` if the request was rejected."""
        if not self.allowed:
            raise AggregateRejection(self.reasons)


class ExternalDNSValidator:
    """
    Validates ExternalDNS specs before they are persisted.

    Every rule runs on every request; all violations are reported together
    in evaluation order: domain filters, then source, then provider.
    """

    def __init__(self, platform_aware: bool = False):
        """
        Initialize the validator.

        Args:
            platform_aware: True when running on a platform that supplies
                cloud credentials (OpenShift)
        """
        self.platform_aware = platform_aware
        self.source_validator = SourceConsistencyValidator()
        self.provider_validator = ProviderCredentialValidator(
            platform_managed_credentials=platform_aware
        )

    def validate(
        self, spec: ExternalDNSSpec, old_spec: Optional[ExternalDNSSpec] = None
    ) -> AdmissionVerdict:
        """
        Run all rules against a spec.

        Args:
            spec: Spec being created or updated
            old_spec: Spec before the update, None on create

        Returns:
            Accept, or Reject carrying every distinct violation
        """
        checks = domain_filter_checks(spec.domains)
        checks.append(lambda: self.source_validator.validate(spec.source, old_spec))
        checks.append(lambda: self.provider_validator.validate(spec.provider))

        reasons = unique_reasons(collect_violations(checks))
        if reasons:
            logger.debug(f"Spec rejected with {len(reasons)} violation(s)")
            return AdmissionVerdict.reject(reasons)
        return AdmissionVerdict.accept()

    def validate_create(self, spec: ExternalDNSSpec) -> AdmissionVerdict:
        """Validate a resource being created."""
        return self.validate(spec)

    def validate_update(
        self, spec: ExternalDNSSpec, old_spec: ExternalDNSSpec
    ) -> AdmissionVerdict:
        """Validate a resource being updated."""
        return self.validate(spec, old_spec)

    def validate_delete(self) -> AdmissionVerdict:
        """Deletion is never validated."""
        return AdmissionVerdict.accept()
