"""Input validation utilities."""

import re
from typing import Pattern

# Kubernetes object name segment (RFC 1123 DNS label)
DNS1123_LABEL_PATTERN: Pattern[str] = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")
DNS1123_LABEL_MAX_LENGTH = 63

# arn:partition:service:region:account-id:resource
AWS_ARN_PATTERN: Pattern[str] = re.compile(r"^arn:[^:]+:[^:]+:[^:]*:[^:]*:.+$")


def validate_dns1123_label(name: str) -> bool:
    """
    Validate a DNS-1123 label.

    Args:
        name: Label to validate

    Returns:
        True if valid, False otherwise
    """
    if not name or len(name) > DNS1123_LABEL_MAX_LENGTH:
        return False
    return DNS1123_LABEL_PATTERN.match(name) is not None


def validate_aws_arn(arn: str) -> bool:
    """
    Validate the shape of an AWS ARN.

    Partition, service and resource must be present; region and
    account may be empty (global services such as IAM leave region out).

    Args:
        arn: ARN to validate

    Returns:
        True if valid, False otherwise
    """
    if not arn:
        return False
    return AWS_ARN_PATTERN.match(arn) is not None
