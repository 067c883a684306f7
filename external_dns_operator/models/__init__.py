"""Pydantic models for ExternalDNS custom resources."""

from external_dns_operator.models.conversion import parse_resource, parse_spec
from external_dns_operator.models.externaldns import (
    AWSProvider,
    AssumeRole,
    AzureProvider,
    BlueCatProvider,
    CRDSource,
    DomainFilter,
    ExternalDNSSpec,
    ExternalDNSStatus,
    GCPProvider,
    InfobloxProvider,
    IngressSource,
    OpenShiftRouteSource,
    SecretReference,
    ServiceSource,
)

__all__ = [
    "AWSProvider",
    "AssumeRole",
    "AzureProvider",
    "BlueCatProvider",
    "CRDSource",
    "DomainFilter",
    "ExternalDNSSpec",
    "ExternalDNSStatus",
    "GCPProvider",
    "InfobloxProvider",
    "IngressSource",
    "OpenShiftRouteSource",
    "SecretReference",
    "ServiceSource",
    "parse_resource",
    "parse_spec",
]
