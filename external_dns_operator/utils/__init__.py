"""Utility functions and helpers for the ExternalDNS operator."""

from external_dns_operator.utils.names import container_name, resource_name
from external_dns_operator.utils.validators import validate_aws_arn, validate_dns1123_label

__all__ = ["container_name", "resource_name", "validate_aws_arn", "validate_dns1123_label"]
