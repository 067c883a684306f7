"""Kopf event handlers for ExternalDNS custom resources."""

from external_dns_operator.handlers.externaldns_handler import (
    create_externaldns,
    update_externaldns,
    delete_externaldns,
)
from external_dns_operator.handlers.lifecycle import configure
from external_dns_operator.handlers.webhook import validate_externaldns

__all__ = [
    "configure",
    "create_externaldns",
    "update_externaldns",
    "delete_externaldns",
    "validate_externaldns",
]
