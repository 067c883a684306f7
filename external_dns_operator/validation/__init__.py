"""Admission validation for ExternalDNS resources."""

from external_dns_operator.validation.domains import (
    domain_filter_error,
    validate_domain_filter,
)
from external_dns_operator.validation.provider import ProviderCredentialValidator
from external_dns_operator.validation.source import (
    PlatformCapabilities,
    SourceConsistencyValidator,
)
from external_dns_operator.validation.validator import (
    AdmissionVerdict,
    ExternalDNSValidator,
)

__all__ = [
    "AdmissionVerdict",
    "ExternalDNSValidator",
    "PlatformCapabilities",
    "ProviderCredentialValidator",
    "SourceConsistencyValidator",
    "domain_filter_error",
    "validate_domain_filter",
]
