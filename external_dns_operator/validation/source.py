"""Source type and hostname policy validation."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from external_dns_operator.errors import FieldInvariantViolation
from external_dns_operator.models.externaldns import (
    HOSTNAME_POLICY_IGNORE,
    SOURCE_TYPE_CRD,
    SOURCE_TYPE_INGRESS,
    SOURCE_TYPE_ROUTE,
    ExternalDNSSpec,
    SourceConfig,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlatformCapabilities:
    """Sources the operator supplies an implicit FQDN template for."""

    implicit_template_sources: frozenset[str] = field(
        default_factory=lambda: frozenset({SOURCE_TYPE_ROUTE, SOURCE_TYPE_INGRESS})
    )


class SourceConsistencyValidator:
    """Checks the source type against the hostname annotation policy."""

    def __init__(self, capabilities: Optional[PlatformCapabilities] = None):
        self.capabilities = capabilities or PlatformCapabilities()

    def validate(
        self, source: SourceConfig, old_spec: Optional[ExternalDNSSpec] = None
    ) -> None:
        """
        Validate a source configuration.

        Args:
            source: Source of the new or updated resource
            old_spec: Spec before the update, None on create

        Raises:
            FieldInvariantViolation: If the source is unsupported or needs
                an FQDN template that is missing
        """
        if old_spec is not None and old_spec.source.type == SOURCE_TYPE_CRD:
            # Created before the CRD source was rejected
            logger.debug("Previous source type was CRD, source checks skipped")
            return

        if source.type == SOURCE_TYPE_CRD:
            raise FieldInvariantViolation("CRD source is not implemented")

        if source.type in self.capabilities.implicit_template_sources:
            return

        if (
            source.hostname_annotation_policy == HOSTNAME_POLICY_IGNORE
            and len(source.fqdn_templates) == 0
        ):
            raise FieldInvariantViolation(
                '"fqdnTemplate" must be specified when "hostnameAnnotation" is "Ignore"'
            )
