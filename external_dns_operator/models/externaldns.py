"""ExternalDNS Custom Resource models (version independent).

Both served API versions are converted into these models before any
validation happens, see :mod:`external_dns_operator.models.conversion`.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Domain filter match types
MATCH_TYPE_EXACT = "Exact"
MATCH_TYPE_PATTERN = "Pattern"

# Domain filter types
FILTER_TYPE_INCLUDE = "Include"
FILTER_TYPE_EXCLUDE = "Exclude"

# Provider types
PROVIDER_TYPE_AWS = "AWS"
PROVIDER_TYPE_GCP = "GCP"
PROVIDER_TYPE_AZURE = "Azure"
PROVIDER_TYPE_BLUECAT = "BlueCat"
PROVIDER_TYPE_INFOBLOX = "Infoblox"

# Source types
SOURCE_TYPE_SERVICE = "Service"
SOURCE_TYPE_ROUTE = "OpenShiftRoute"
SOURCE_TYPE_CRD = "CRD"
SOURCE_TYPE_INGRESS = "Ingress"

# Hostname annotation policies
HOSTNAME_POLICY_IGNORE = "Ignore"
HOSTNAME_POLICY_ALLOW = "Allow"

MAX_ZONES = 10

AssumeRoleStrategy = Literal["irsa", "kiam", "kube2iam"]


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class SecretReference(_FrozenModel):
    """Reference to a secret in the operator namespace."""

    name: str = Field(default="", description="Secret name")


class DomainFilter(_FrozenModel):
    """
    Include or exclude rule for the domains ExternalDNS manages.

    ``match_type`` is kept as a plain string so that unsupported values
    are reported by the validator instead of failing conversion.
    """

    match_type: str = Field(description="Match type (Exact, Pattern)")
    name: Optional[str] = Field(default=None, description="Exact domain name")
    pattern: Optional[str] = Field(default=None, description="RE2 domain pattern")
    filter_type: str = Field(
        default=FILTER_TYPE_INCLUDE, description="Filter type (Include, Exclude)"
    )


class AssumeRole(_FrozenModel):
    """AWS IAM role assumed by ExternalDNS instead of static credentials."""

    arn: Optional[str] = Field(default=None, description="IAM role ARN")
    strategy: AssumeRoleStrategy = Field(
        default="irsa", description="Assume role strategy (irsa, kiam, kube2iam)"
    )


class AWSProvider(_FrozenModel):
    """AWS Route53 provider configuration."""

    type: Literal["AWS"] = PROVIDER_TYPE_AWS
    credentials: Optional[SecretReference] = None
    assume_role: Optional[AssumeRole] = None


class GCPProvider(_FrozenModel):
    """Google Cloud DNS provider configuration."""

    type: Literal["GCP"] = PROVIDER_TYPE_GCP
    project: Optional[str] = None
    credentials: Optional[SecretReference] = None


class AzureProvider(_FrozenModel):
    """Azure DNS provider configuration."""

    type: Literal["Azure"] = PROVIDER_TYPE_AZURE
    config_file: Optional[SecretReference] = None


class BlueCatProvider(_FrozenModel):
    """BlueCat gateway provider configuration."""

    type: Literal["BlueCat"] = PROVIDER_TYPE_BLUECAT
    config_file: Optional[SecretReference] = None


class InfobloxProvider(_FrozenModel):
    """Infoblox WAPI provider configuration."""

    type: Literal["Infoblox"] = PROVIDER_TYPE_INFOBLOX
    credentials: Optional[SecretReference] = None
    grid_host: str = ""
    wapi_port: int = 0
    wapi_version: str = ""


ProviderConfig = Annotated[
    Union[AWSProvider, GCPProvider, AzureProvider, BlueCatProvider, InfobloxProvider],
    Field(discriminator="type"),
]


class _SourceBase(_FrozenModel):
    hostname_annotation_policy: str = Field(
        default=HOSTNAME_POLICY_IGNORE, description="Hostname annotation policy"
    )
    fqdn_templates: tuple[str, ...] = Field(
        default=(), description="FQDN templates for generated hostnames"
    )
    label_filter: Optional[dict[str, Any]] = Field(
        default=None, description="Label selector for source objects"
    )
    annotation_filter: Optional[dict[str, str]] = Field(
        default=None, description="Annotation filter for source objects"
    )
    namespace: Optional[str] = Field(
        default=None, description="Namespace to watch for source objects"
    )


class ServiceSource(_SourceBase):
    """Kubernetes Service source."""

    type: Literal["Service"] = SOURCE_TYPE_SERVICE
    service_types: tuple[str, ...] = ()


class OpenShiftRouteSource(_SourceBase):
    """OpenShift Route source."""

    type: Literal["OpenShiftRoute"] = SOURCE_TYPE_ROUTE
    router_name: Optional[str] = None


class CRDSource(_SourceBase):
    """DNSEndpoint custom resource source."""

    type: Literal["CRD"] = SOURCE_TYPE_CRD
    kind: Optional[str] = None
    version: Optional[str] = None


class IngressSource(_SourceBase):
    """Kubernetes Ingress source."""

    type: Literal["Ingress"] = SOURCE_TYPE_INGRESS


SourceConfig = Annotated[
    Union[ServiceSource, OpenShiftRouteSource, CRDSource, IngressSource],
    Field(discriminator="type"),
]


class ExternalDNSSpec(_FrozenModel):
    """
    ExternalDNS Custom Resource Specification.

    Defines which domains are published, through which DNS provider,
    and from which cluster objects the records are derived.
    """

    domains: tuple[DomainFilter, ...] = Field(
        default=(), description="Ordered domain filters"
    )
    provider: ProviderConfig = Field(description="DNS provider configuration")
    source: SourceConfig = Field(description="Source of DNS records")
    zones: tuple[str, ...] = Field(
        default=(), max_length=MAX_ZONES, description="Hosted zone identifiers"
    )


class ExternalDNSStatus(BaseModel):
    """
    ExternalDNS Custom Resource Status.

    Represents the observed state of an ExternalDNS instance.
    """

    conditions: list[dict[str, Any]] = Field(
        default_factory=list, description="Status conditions"
    )
    observed_generation: Optional[int] = Field(
        default=None, description="Generation observed by the operator"
    )
    zones: list[str] = Field(default_factory=list, description="Managed zones")

    def add_condition(
        self,
        type_: str,
        status: str,
        reason: str,
        message: str,
        last_transition_time: Optional[str] = None,
    ) -> None:
        """Add or update a status condition."""
        if last_transition_time is None:
            last_transition_time = (
                datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"
            )

        # One condition per type
        self.conditions = [c for c in self.conditions if c.get("type") != type_]

        self.conditions.append(
            {
                "type": type_,
                "status": status,
                "reason": reason,
                "message": message,
                "lastTransitionTime": last_transition_time,
            }
        )
