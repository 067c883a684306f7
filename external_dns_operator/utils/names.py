"""Names of the objects the operator manages for ExternalDNS instances."""

import logging

from external_dns_operator.errors import NameValidationError
from external_dns_operator.models.externaldns import (
    AWSProvider,
    AzureProvider,
    BlueCatProvider,
    GCPProvider,
    InfobloxProvider,
    ProviderConfig,
)
from external_dns_operator.utils.validators import (
    DNS1123_LABEL_MAX_LENGTH,
    validate_dns1123_label,
)

logger = logging.getLogger(__name__)

EXTERNAL_DNS_BASE_NAME = "external-dns"
CREDENTIALS_REQUEST_NAMESPACE = "openshift-cloud-credential-operator"
CONTROLLER_NAME = "external_dns_controller"
SECRET_FROM_CLOUD_CREDENTIALS_OPERATOR = "externaldns-cloud-credentials"
SERVICE_ACCOUNT_NAME = "external-dns-operator"

# No vowels and no 0, 1 or 3.
SAFE_ALPHABET = "bcdfghjklmnpqrstvwxz2456789"

FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 0x01000193


def fnv1a_32(data: bytes) -> int:
    """32-bit FNV-1a hash."""
    h = FNV32_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV32_PRIME) & 0xFFFFFFFF
    return h


def safe_encode(value: str) -> str:
    """Map every character of ``value`` onto :data:`SAFE_ALPHABET`."""
    return "".join(SAFE_ALPHABET[ord(c) % len(SAFE_ALPHABET)] for c in value)


def hash_string(value: str) -> str:
    """
    Short, lowercase, label-safe token for an arbitrary string.

    The FNV-1a digest is rendered big-endian as its decimal byte list
    (``[129 28 157 197]``) before encoding, so every token starts with
    ``n`` and ends with ``q``. Lone surrogates, which JSON strings can
    carry, are encoded as their three surrogate bytes.
    """
    digest = fnv1a_32(value.encode("utf-8", "surrogatepass")).to_bytes(4, "big")
    return safe_encode("[" + " ".join(str(b) for b in digest) + "]")


def resource_name(prefix: str, zone_id: str) -> str:
    """
    Derive a bounded object name from a prefix and a zone identifier.

    Identical inputs always give the same name. Distinct zones may
    collide; callers that need global uniqueness must check for it.

    Args:
        prefix: Name prefix, itself a DNS-1123 label
        zone_id: Provider zone identifier of any length, may be empty

    Returns:
        ``<prefix>-<token>``

    Raises:
        NameValidationError: If the prefix makes the result an invalid label
    """
    name = f"{prefix}-{hash_string(zone_id)}"
    if not validate_dns1123_label(name):
        raise NameValidationError(
            f"name '{name}' derived from prefix '{prefix}' is not a valid DNS-1123 label "
            f"(lowercase alphanumerics and '-', at most {DNS1123_LABEL_MAX_LENGTH} characters)"
        )
    logger.debug(f"Derived name {name} for zone '{zone_id}'")
    return name


def container_name(zone: str) -> str:
    """ExternalDNS container name unique for the given DNS zone."""
    return resource_name(EXTERNAL_DNS_BASE_NAME, zone)


def instance_resource_name(instance_name: str) -> str:
    """Name of the objects unique to one ExternalDNS instance."""
    return f"{EXTERNAL_DNS_BASE_NAME}-{instance_name}"


def global_resource_name() -> str:
    """Name of the objects shared among ExternalDNS instances."""
    return EXTERNAL_DNS_BASE_NAME


def credentials_secret_name(instance_name: str) -> str:
    """Name of the operand credentials secret for an instance."""
    return f"{EXTERNAL_DNS_BASE_NAME}-credentials-{instance_name}"


def trusted_ca_configmap_name() -> str:
    """Name of the operand trusted CA ConfigMap."""
    return f"{EXTERNAL_DNS_BASE_NAME}-trusted-ca"


def credentials_request_name(provider_type: str) -> str:
    """Name of the cloud CredentialsRequest for a provider type."""
    return f"externaldns-credentials-request-{provider_type.lower()}"


def credentials_secret_name_from_provider(provider: ProviderConfig) -> str:
    """
    Name of the secret a provider configuration refers to.

    Returns:
        Secret name, or an empty string when the provider references none
    """
    if isinstance(provider, (AWSProvider, GCPProvider, InfobloxProvider)):
        ref = provider.credentials
    elif isinstance(provider, (AzureProvider, BlueCatProvider)):
        ref = provider.config_file
    else:
        return ""
    return ref.name if ref is not None else ""
