"""Wire models shared by the served ExternalDNS API versions.

Fields are declared with their camelCase JSON names as aliases. The
per-version modules only redeclare the parts whose shape differs.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from external_dns_operator.errors import SchemaConversionError
from external_dns_operator.models.externaldns import (
    PROVIDER_TYPE_AWS,
    PROVIDER_TYPE_AZURE,
    PROVIDER_TYPE_BLUECAT,
    PROVIDER_TYPE_GCP,
    PROVIDER_TYPE_INFOBLOX,
    AWSProvider,
    AssumeRole,
    AzureProvider,
    BlueCatProvider,
    GCPProvider,
    InfobloxProvider,
    ProviderConfig,
    SecretReference,
)


class WireModel(BaseModel):
    """Base for versioned wire models."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class WireSecretReference(WireModel):
    name: str = ""

    def to_internal(self) -> SecretReference:
        return SecretReference(name=self.name)


def _secret(ref: Optional[WireSecretReference]) -> Optional[SecretReference]:
    return ref.to_internal() if ref is not None else None


class AWSOptions(WireModel):
    credentials: Optional[WireSecretReference] = None


class GCPOptions(WireModel):
    project: Optional[str] = None
    credentials: Optional[WireSecretReference] = None


class AzureOptions(WireModel):
    config_file: Optional[WireSecretReference] = Field(default=None, alias="configFile")


class BlueCatOptions(WireModel):
    config_file: Optional[WireSecretReference] = Field(default=None, alias="configFile")


class InfobloxOptions(WireModel):
    credentials: Optional[WireSecretReference] = None
    grid_host: str = Field(default="", alias="gridHost")
    wapi_port: int = Field(default=0, alias="wapiPort")
    wapi_version: str = Field(default="", alias="wapiVersion")


class ProviderSpec(WireModel):
    """Provider block: a type tag plus one options block per provider."""

    type: str
    aws: Optional[AWSOptions] = None
    gcp: Optional[GCPOptions] = None
    azure: Optional[AzureOptions] = None
    blue_cat: Optional[BlueCatOptions] = Field(default=None, alias="blueCat")
    infoblox: Optional[InfobloxOptions] = None

    def _assume_role(self) -> Optional[AssumeRole]:
        return None

    def to_internal(self) -> ProviderConfig:
        if self.type == PROVIDER_TYPE_AWS:
            return AWSProvider(
                credentials=_secret(self.aws.credentials) if self.aws else None,
                assume_role=self._assume_role(),
            )
        if self.type == PROVIDER_TYPE_GCP:
            if self.gcp is None:
                return GCPProvider()
            return GCPProvider(
                project=self.gcp.project, credentials=_secret(self.gcp.credentials)
            )
        if self.type == PROVIDER_TYPE_AZURE:
            return AzureProvider(
                config_file=_secret(self.azure.config_file) if self.azure else None
            )
        if self.type == PROVIDER_TYPE_BLUECAT:
            return BlueCatProvider(
                config_file=_secret(self.blue_cat.config_file) if self.blue_cat else None
            )
        if self.type == PROVIDER_TYPE_INFOBLOX:
            if self.infoblox is None:
                return InfobloxProvider()
            return InfobloxProvider(
                credentials=_secret(self.infoblox.credentials),
                grid_host=self.infoblox.grid_host,
                wapi_port=self.infoblox.wapi_port,
                wapi_version=self.infoblox.wapi_version,
            )
        raise SchemaConversionError(f'unsupported provider type "{self.type}"')


class ServiceOptions(WireModel):
    service_type: list[str] = Field(default_factory=list, alias="serviceType")


def source_common_fields(
    hostname_annotation: str, fqdn_template: Optional[list[str]]
) -> dict[str, Any]:
    """Fields every internal source variant shares."""
    return {
        "hostname_annotation_policy": hostname_annotation,
        "fqdn_templates": tuple(fqdn_template or ()),
    }
