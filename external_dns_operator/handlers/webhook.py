"""Validating admission webhook for ExternalDNS resources."""

import logging
import time
from typing import Any, Mapping, Optional

import kopf

from external_dns_operator.errors import SchemaConversionError
from external_dns_operator.models.conversion import API_GROUP, parse_resource
from external_dns_operator.utils.metrics import get_metrics
from external_dns_operator.validation.validator import (
    AdmissionVerdict,
    ExternalDNSValidator,
)

logger = logging.getLogger(__name__)

PLURAL = "externaldnses"

# Status code of a denied admission review
DENIED_CODE = 403


def review(
    validator: ExternalDNSValidator,
    operation: str,
    body: Optional[Mapping[str, Any]],
    old: Optional[Mapping[str, Any]] = None,
) -> AdmissionVerdict:
    """
    Decide one admission request.

    Args:
        validator: Validator configured for the current platform
        operation: CREATE, UPDATE or DELETE
        body: Resource as submitted
        old: Resource before the update

    Returns:
        The verdict for the request

    Raises:
        SchemaConversionError: If either body cannot be converted
    """
    if operation == "DELETE":
        return validator.validate_delete()

    spec = parse_resource(body)
    if spec is None:
        raise SchemaConversionError("admission request carries no ExternalDNS object")

    if operation == "UPDATE":
        old_spec = parse_resource(old)
        if old_spec is not None:
            return validator.validate_update(spec, old_spec)
    return validator.validate_create(spec)


@kopf.on.validate(API_GROUP, PLURAL, id="validate-externaldns")
async def validate_externaldns(
    body: Mapping[str, Any],
    memo: kopf.Memo,
    name: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Admit or deny an ExternalDNS resource.

    Raises:
        kopf.AdmissionError: If the resource violates any invariant or
            does not match its schema
    """
    operation = kwargs.get("operation") or "CREATE"
    old = kwargs.get("old")
    validator: ExternalDNSValidator = memo.validator
    metrics = get_metrics()

    logger.info(f"validate {operation.lower()}: {name}")
    started = time.monotonic()

    try:
        verdict = review(validator, operation, body, old)
    except SchemaConversionError as e:
        metrics.record_conversion_error(str((body or {}).get("apiVersion", "")))
        metrics.record_admission(operation, False, time.monotonic() - started, reasons=1)
        logger.info(f"Denied {name}: {e}")
        raise kopf.AdmissionError(str(e), code=DENIED_CODE) from e

    metrics.record_admission(
        operation, verdict.allowed, time.monotonic() - started, reasons=len(verdict.reasons)
    )
    if not verdict.allowed:
        logger.info(f"Denied {name}: {verdict.error}")
        raise kopf.AdmissionError(str(verdict.error), code=DENIED_CODE)
