"""Shared fixtures for unit tests."""

import pytest

from external_dns_operator.utils.metrics import OperatorMetrics
from external_dns_operator.validation.validator import ExternalDNSValidator


@pytest.fixture
def validator() -> ExternalDNSValidator:
    """Validator for a vanilla Kubernetes cluster."""
    return ExternalDNSValidator(platform_aware=False)


@pytest.fixture
def openshift_validator() -> ExternalDNSValidator:
    """Validator for a platform with managed cloud credentials."""
    return ExternalDNSValidator(platform_aware=True)


@pytest.fixture
def metrics(monkeypatch: pytest.MonkeyPatch) -> OperatorMetrics:
    """Fresh metrics collector installed as the global instance."""
    fresh = OperatorMetrics()
    monkeypatch.setattr("external_dns_operator.utils.metrics._metrics", fresh)
    return fresh
