"""ExternalDNS v1beta1 wire schema (storage version)."""

from typing import Any, Optional

from pydantic import Field

from external_dns_operator.errors import SchemaConversionError
from external_dns_operator.models.externaldns import (
    FILTER_TYPE_INCLUDE,
    HOSTNAME_POLICY_IGNORE,
    SOURCE_TYPE_CRD,
    SOURCE_TYPE_INGRESS,
    SOURCE_TYPE_ROUTE,
    SOURCE_TYPE_SERVICE,
    AssumeRole,
    AssumeRoleStrategy,
    CRDSource,
    DomainFilter,
    ExternalDNSSpec,
    IngressSource,
    OpenShiftRouteSource,
    ServiceSource,
    SourceConfig,
)
from external_dns_operator.models.wire import (
    AWSOptions,
    ProviderSpec,
    ServiceOptions,
    WireModel,
    source_common_fields,
)

VERSION = "v1beta1"


class Domain(WireModel):
    match_type: str = Field(default="", alias="matchType")
    name: Optional[str] = None
    pattern: Optional[str] = None
    filter_type: str = Field(default=FILTER_TYPE_INCLUDE, alias="filterType")

    def to_internal(self) -> DomainFilter:
        return DomainFilter(
            match_type=self.match_type,
            name=self.name,
            pattern=self.pattern,
            filter_type=self.filter_type,
        )


class AssumeRoleOptions(WireModel):
    id: Optional[str] = None
    strategy: AssumeRoleStrategy = "irsa"


class AWSOptionsWithAssumeRole(AWSOptions):
    assume_role: Optional[AssumeRoleOptions] = Field(default=None, alias="assumeRole")


class Provider(ProviderSpec):
    """Provider block; AWS may assume an IAM role in this version."""

    aws: Optional[AWSOptionsWithAssumeRole] = None

    def _assume_role(self) -> Optional[AssumeRole]:
        if self.aws is None or self.aws.assume_role is None:
            return None
        return AssumeRole(arn=self.aws.assume_role.id, strategy=self.aws.assume_role.strategy)


class RouteOptions(WireModel):
    router_name: str = Field(default="", alias="routerName")


class Source(WireModel):
    type: str
    label_filter: Optional[dict[str, Any]] = Field(default=None, alias="labelFilter")
    service: Optional[ServiceOptions] = None
    openshift_route_options: Optional[RouteOptions] = Field(
        default=None, alias="openshiftRouteOptions"
    )
    hostname_annotation: str = Field(
        default=HOSTNAME_POLICY_IGNORE, alias="hostnameAnnotation"
    )
    fqdn_template: Optional[list[str]] = Field(default=None, alias="fqdnTemplate")

    def to_internal(self) -> SourceConfig:
        common = source_common_fields(self.hostname_annotation, self.fqdn_template)
        common["label_filter"] = self.label_filter

        if self.type == SOURCE_TYPE_SERVICE:
            service_types = tuple(self.service.service_type) if self.service else ()
            return ServiceSource(service_types=service_types, **common)
        if self.type == SOURCE_TYPE_ROUTE:
            router_name = (
                self.openshift_route_options.router_name
                if self.openshift_route_options
                else None
            )
            return OpenShiftRouteSource(router_name=router_name, **common)
        if self.type == SOURCE_TYPE_CRD:
            return CRDSource(**common)
        if self.type == SOURCE_TYPE_INGRESS:
            return IngressSource(**common)
        raise SchemaConversionError(f'unsupported source type "{self.type}"')


class Spec(WireModel):
    """ExternalDNS v1beta1 spec."""

    domains: list[Domain] = Field(default_factory=list)
    provider: Provider
    source: Source
    zones: list[str] = Field(default_factory=list)

    def to_internal(self) -> ExternalDNSSpec:
        return ExternalDNSSpec(
            domains=tuple(d.to_internal() for d in self.domains),
            provider=self.provider.to_internal(),
            source=self.source.to_internal(),
            zones=tuple(self.zones),
        )
