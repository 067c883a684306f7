"""DNS provider credential validation."""

import logging
from typing import Optional

from external_dns_operator.errors import FieldInvariantViolation
from external_dns_operator.models.externaldns import (
    PROVIDER_TYPE_AWS,
    PROVIDER_TYPE_AZURE,
    PROVIDER_TYPE_GCP,
    AWSProvider,
    AzureProvider,
    BlueCatProvider,
    GCPProvider,
    InfobloxProvider,
    ProviderConfig,
    SecretReference,
)
from external_dns_operator.utils.validators import validate_aws_arn

logger = logging.getLogger(__name__)

# Providers whose credentials the platform supplies when platform-aware
PLATFORM_MANAGED_PROVIDERS = frozenset(
    {PROVIDER_TYPE_AWS, PROVIDER_TYPE_GCP, PROVIDER_TYPE_AZURE}
)


def _has_name(ref: Optional[SecretReference]) -> bool:
    return ref is not None and bool(ref.name)


class ProviderCredentialValidator:
    """
    Checks that a provider configuration carries the credentials it needs.

    On a platform with out-of-band credentials (OpenShift's cloud
    credential operator) AWS, GCP and Azure need no explicit secret.
    """

    def __init__(self, platform_managed_credentials: bool = False):
        """
        Initialize the validator.

        Args:
            platform_managed_credentials: True when the platform supplies
                cloud credentials; detected once at operator startup
        """
        self.platform_managed_credentials = platform_managed_credentials

    def validate(self, provider: ProviderConfig) -> None:
        """
        Validate a provider configuration.

        Raises:
            FieldInvariantViolation: If required credentials are missing
        """
        if self.platform_managed_credentials and provider.type in PLATFORM_MANAGED_PROVIDERS:
            logger.debug(f"Credentials for {provider.type} are managed by the platform")
            return

        if isinstance(provider, AWSProvider):
            self._validate_aws(provider)
        elif isinstance(provider, AzureProvider):
            if not _has_name(provider.config_file):
                raise FieldInvariantViolation(
                    "config file name must be specified when provider type is Azure"
                )
        elif isinstance(provider, GCPProvider):
            if not _has_name(provider.credentials):
                raise FieldInvariantViolation(
                    "credentials secret must be specified when provider type is GCP"
                )
        elif isinstance(provider, BlueCatProvider):
            if not _has_name(provider.config_file):
                raise FieldInvariantViolation(
                    "config file name must be specified when provider type is BlueCat"
                )
        elif isinstance(provider, InfobloxProvider):
            # One combined message whichever field is missing
            if not (
                provider.wapi_version
                and provider.wapi_port != 0
                and provider.grid_host
                and _has_name(provider.credentials)
            ):
                raise FieldInvariantViolation(
                    '"WAPIVersion", "WAPIPort", "GridHost" and credentials file '
                    "must be specified when provider is Infoblox"
                )

    def _validate_aws(self, provider: AWSProvider) -> None:
        has_credentials = _has_name(provider.credentials)
        assume_role = provider.assume_role

        if has_credentials and assume_role is not None:
            raise FieldInvariantViolation(
                "credentials and assume role options are mutually exclusive "
                "but both are specified when provider type is AWS"
            )
        if not has_credentials and assume_role is None:
            raise FieldInvariantViolation(
                "credentials secret or assume role options must be specified "
                "when provider type is AWS"
            )
        if assume_role is None:
            return
        if not assume_role.arn:
            raise FieldInvariantViolation(
                "assume role arn must be specified when assume role strategy "
                "is used and provider type is AWS"
            )
        if not validate_aws_arn(assume_role.arn):
            raise FieldInvariantViolation(f"{assume_role.arn} is not a valid AWS ARN")
