"""Builders for ExternalDNS specs and resource bodies used across tests."""

from typing import Any, Optional

from external_dns_operator.models.externaldns import (
    AWSProvider,
    ExternalDNSSpec,
    SecretReference,
    ServiceSource,
)

VALID_ARN = "arn:aws:iam::123456789012:role/my-role"


def make_spec(domains: Optional[list] = None, **overrides: Any) -> ExternalDNSSpec:
    """Valid AWS/Service spec; keyword arguments replace top-level fields."""
    fields: dict[str, Any] = {
        "domains": tuple(domains or ()),
        "provider": AWSProvider(credentials=SecretReference(name="credentials")),
        "source": ServiceSource(
            hostname_annotation_policy="Ignore", fqdn_templates=("{{.Name}}",)
        ),
    }
    fields.update(overrides)
    return ExternalDNSSpec(**fields)


def make_body(
    spec: Optional[dict[str, Any]] = None,
    api_version: str = "externaldns.olm.openshift.io/v1beta1",
    name: str = "sample",
) -> dict[str, Any]:
    """Resource body as kopf hands it to handlers."""
    if spec is None:
        spec = {
            "provider": {"type": "AWS", "aws": {"credentials": {"name": "credentials"}}},
            "source": {
                "type": "Service",
                "hostnameAnnotation": "Ignore",
                "fqdnTemplate": ["{{.Name}}"],
            },
        }
    return {
        "apiVersion": api_version,
        "kind": "ExternalDNS",
        "metadata": {"name": name, "generation": 1},
        "spec": spec,
    }
