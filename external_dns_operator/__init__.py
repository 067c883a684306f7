"""
ExternalDNS Operator - admission validation and naming for ExternalDNS

Validates ExternalDNS custom resources before they are persisted and
derives the names of the objects the operator manages for them.

This operator uses Kopf (Kubernetes Operator Pythonic Framework) to serve
the validating admission webhook and to track ExternalDNS resources.
"""

__version__ = "1.3.0"
__license__ = "Apache-2.0"

from external_dns_operator.models.conversion import parse_spec
from external_dns_operator.models.externaldns import ExternalDNSSpec, ExternalDNSStatus
from external_dns_operator.utils.names import resource_name
from external_dns_operator.validation.validator import AdmissionVerdict, ExternalDNSValidator

__all__ = [
    "AdmissionVerdict",
    "ExternalDNSSpec",
    "ExternalDNSStatus",
    "ExternalDNSValidator",
    "parse_spec",
    "resource_name",
]
