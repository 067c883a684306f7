"""ExternalDNS resource event handlers."""

import logging
from typing import Any, Mapping, Optional

import kopf

from external_dns_operator.errors import NameValidationError, SchemaConversionError
from external_dns_operator.models.conversion import API_GROUP, STORAGE_VERSION, parse_spec
from external_dns_operator.models.externaldns import ExternalDNSSpec, ExternalDNSStatus
from external_dns_operator.utils.metrics import get_metrics
from external_dns_operator.utils.names import (
    container_name,
    credentials_secret_name,
    credentials_secret_name_from_provider,
    instance_resource_name,
)

logger = logging.getLogger(__name__)

PLURAL = "externaldnses"


def _parse(spec: Mapping[str, Any], body: Mapping[str, Any]) -> ExternalDNSSpec:
    try:
        return parse_spec(spec, body.get("apiVersion"))
    except SchemaConversionError as e:
        logger.error(f"Invalid ExternalDNS spec: {e}")
        raise kopf.PermanentError(f"Invalid ExternalDNS specification: {e}") from e


def build_status(
    name: str, spec: ExternalDNSSpec, generation: Optional[int] = None
) -> ExternalDNSStatus:
    """
    Compute the status reported for an ExternalDNS instance.

    Each zone is mapped to the name of the ExternalDNS container that
    publishes records into it.

    Raises:
        kopf.PermanentError: If a zone container name cannot be derived
    """
    status = ExternalDNSStatus(zones=list(spec.zones), observed_generation=generation)

    try:
        containers = [container_name(zone) for zone in spec.zones]
    except NameValidationError as e:
        raise kopf.PermanentError(str(e)) from e

    secret = credentials_secret_name_from_provider(spec.provider)
    message = (
        f"Deployment {instance_resource_name(name)} with containers "
        f"{', '.join(containers) or 'none'}"
    )
    if secret:
        message += f", credentials from {secret} copied to {credentials_secret_name(name)}"

    status.add_condition(
        type_="Available",
        status="True",
        reason="NamesDerived",
        message=message,
    )
    return status


@kopf.on.create(API_GROUP, STORAGE_VERSION, PLURAL)
async def create_externaldns(
    spec: Mapping[str, Any],
    body: Mapping[str, Any],
    name: str,
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Handle ExternalDNS resource creation.

    Returns:
        Status dictionary to be set on the ExternalDNS resource
    """
    logger.info(f"Creating ExternalDNS instance: {name}")
    externaldns_spec = _parse(spec, body)

    status = build_status(name, externaldns_spec, body.get("metadata", {}).get("generation"))
    get_metrics().update_managed_zones(name, len(externaldns_spec.zones))

    logger.info(f"ExternalDNS instance {name} manages {len(status.zones)} zone(s)")
    return status.model_dump()


@kopf.on.update(API_GROUP, STORAGE_VERSION, PLURAL)
async def update_externaldns(
    spec: Mapping[str, Any],
    body: Mapping[str, Any],
    name: str,
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Handle ExternalDNS resource updates.

    Returns:
        Updated status dictionary
    """
    logger.info(f"Updating ExternalDNS instance: {name}")
    externaldns_spec = _parse(spec, body)

    status = build_status(name, externaldns_spec, body.get("metadata", {}).get("generation"))
    get_metrics().update_managed_zones(name, len(externaldns_spec.zones))

    logger.info(f"ExternalDNS instance {name} updated")
    return status.model_dump()


@kopf.on.delete(API_GROUP, STORAGE_VERSION, PLURAL, optional=True)
async def delete_externaldns(name: str, **kwargs: Any) -> None:
    """Handle ExternalDNS resource deletion."""
    logger.info(f"Deleting ExternalDNS instance: {name}")
    get_metrics().remove_instance(name)
