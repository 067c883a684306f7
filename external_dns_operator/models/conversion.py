"""Conversion boundary between versioned ExternalDNS documents and the internal model."""

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from external_dns_operator.errors import SchemaConversionError
from external_dns_operator.models import v1alpha1, v1beta1
from external_dns_operator.models.externaldns import ExternalDNSSpec

logger = logging.getLogger(__name__)

API_GROUP = "externaldns.olm.openshift.io"
STORAGE_VERSION = v1beta1.VERSION
SERVED_VERSIONS = (v1alpha1.VERSION, v1beta1.VERSION)

_SPEC_MODELS = {
    v1alpha1.VERSION: v1alpha1.Spec,
    v1beta1.VERSION: v1beta1.Spec,
}


def api_version_of(api_version: Optional[str]) -> str:
    """
    Extract the version from an ``apiVersion`` string.

    ``externaldns.olm.openshift.io/v1alpha1`` and ``v1alpha1`` both give
    ``v1alpha1``. An empty value means the storage version.
    """
    if not api_version:
        return STORAGE_VERSION
    group, _, version = api_version.rpartition("/")
    if group and group != API_GROUP:
        raise SchemaConversionError(f"unsupported API group {group}")
    return version


def parse_spec(
    spec: Optional[Mapping[str, Any]], api_version: Optional[str] = None
) -> ExternalDNSSpec:
    """
    Convert a versioned ExternalDNS spec into the internal model.

    Args:
        spec: The ``spec`` section of the resource as received from the API
        api_version: The resource ``apiVersion`` (group/version or version)

    Returns:
        Version independent spec

    Raises:
        SchemaConversionError: If the version is not served or the document
            does not match its schema
    """
    version = api_version_of(api_version)
    model = _SPEC_MODELS.get(version)
    if model is None:
        raise SchemaConversionError(f"unsupported API version {version}")

    try:
        return model.model_validate(dict(spec or {})).to_internal()
    except ValidationError as e:
        logger.debug(f"Spec does not match {version} schema: {e}")
        raise SchemaConversionError(f"invalid ExternalDNS {version} spec: {e}") from e


def parse_resource(body: Optional[Mapping[str, Any]]) -> Optional[ExternalDNSSpec]:
    """Convert a whole resource body; ``None`` or an empty body gives ``None``."""
    if not body:
        return None
    return parse_spec(body.get("spec"), body.get("apiVersion"))
