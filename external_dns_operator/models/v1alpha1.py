"""ExternalDNS v1alpha1 wire schema."""

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
    CRDSource,
    DomainFilter,
    ExternalDNSSpec,
    IngressSource,
    OpenShiftRouteSource,
    ServiceSource,
    SourceConfig,
)
from external_dns_operator.models.wire import (
    ProviderSpec,
    ServiceOptions,
    WireModel,
    source_common_fields,
)

VERSION = "v1alpha1"


class Domain(WireModel):
    """Domain filter; the exact name lives under ``names`` in this version."""

    match_type: str = Field(default="", alias="matchType")
    name: Optional[str] = Field(default=None, alias="names")
    pattern: Optional[str] = None
    filter_type: str = Field(default=FILTER_TYPE_INCLUDE, alias="filterType")

    def to_internal(self) -> DomainFilter:
        return DomainFilter(
            match_type=self.match_type,
            name=self.name,
            pattern=self.pattern,
            filter_type=self.filter_type,
        )


class CRDOptions(WireModel):
    kind: str = ""
    version: str = ""
    label_filter: Optional[dict[str, Any]] = Field(default=None, alias="labelFilter")


class Source(WireModel):
    type: str
    annotation_filter: Optional[dict[str, str]] = Field(
        default=None, alias="annotationFilter"
    )
    namespace: Optional[str] = None
    service: Optional[ServiceOptions] = None
    crd: Optional[CRDOptions] = None
    hostname_annotation: str = Field(
        default=HOSTNAME_POLICY_IGNORE, alias="hostnameAnnotation"
    )
    fqdn_template: Optional[list[str]] = Field(default=None, alias="fqdnTemplate")

    def to_internal(self) -> SourceConfig:
        common = source_common_fields(self.hostname_annotation, self.fqdn_template)
        common["annotation_filter"] = self.annotation_filter
        common["namespace"] = self.namespace

        if self.type == SOURCE_TYPE_SERVICE:
            service_types = tuple(self.service.service_type) if self.service else ()
            return ServiceSource(service_types=service_types, **common)
        if self.type == SOURCE_TYPE_ROUTE:
            return OpenShiftRouteSource(**common)
        if self.type == SOURCE_TYPE_CRD:
            if self.crd is None:
                return CRDSource(**common)
            return CRDSource(
                kind=self.crd.kind,
                version=self.crd.version,
                label_filter=self.crd.label_filter,
                **common,
            )
        if self.type == SOURCE_TYPE_INGRESS:
            return IngressSource(**common)
        raise SchemaConversionError(f'unsupported source type "{self.type}"')


class Spec(WireModel):
    """ExternalDNS v1alpha1 spec."""

    domains: list[Domain] = Field(default_factory=list)
    provider: ProviderSpec
    source: Source
    zones: list[str] = Field(default_factory=list)

    def to_internal(self) -> ExternalDNSSpec:
        return ExternalDNSSpec(
            domains=tuple(d.to_internal() for d in self.domains),
            provider=self.provider.to_internal(),
            source=self.source.to_internal(),
            zones=tuple(self.zones),
        )
