"""Tests for source type and hostname policy validation."""

import pytest

from external_dns_operator.errors import FieldInvariantViolation
from external_dns_operator.models.externaldns import (
    CRDSource,
    IngressSource,
    OpenShiftRouteSource,
    ServiceSource,
)
from external_dns_operator.validation.source import (
    PlatformCapabilities,
    SourceConsistencyValidator,
)

from helpers import make_spec

TEMPLATE_MESSAGE = '"fqdnTemplate" must be specified when "hostnameAnnotation" is "Ignore"'


class TestPlatformCapabilities:
    """Tests for PlatformCapabilities defaults."""

    def test_defaults(self) -> None:
        """Test Route and Ingress get implicit templates by default."""
        caps = PlatformCapabilities()
        assert caps.implicit_template_sources == frozenset({"OpenShiftRoute", "Ingress"})


class TestSourceOnCreate:
    """Tests for sources of newly created resources."""

    def setup_method(self) -> None:
        self.validator = SourceConsistencyValidator()

    def test_crd_rejected(self) -> None:
        """Test the CRD source is refused for new resources."""
        with pytest.raises(FieldInvariantViolation) as exc_info:
            self.validator.validate(CRDSource(fqdn_templates=("{{.Name}}",)))
        assert exc_info.value.reason == "CRD source is not implemented"

    def test_service_ignore_without_template(self) -> None:
        """Test Ignore policy needs an FQDN template for Service."""
        with pytest.raises(FieldInvariantViolation) as exc_info:
            self.validator.validate(ServiceSource(hostname_annotation_policy="Ignore"))
        assert exc_info.value.reason == TEMPLATE_MESSAGE

    def test_service_ignore_with_template(self) -> None:
        """Test Ignore policy with a template is accepted."""
        self.validator.validate(
            ServiceSource(hostname_annotation_policy="Ignore", fqdn_templates=("{{.Name}}",))
        )

    def test_service_allow_without_template(self) -> None:
        """Test Allow policy does not need a template."""
        self.validator.validate(ServiceSource(hostname_annotation_policy="Allow"))

    @pytest.mark.parametrize("source", [OpenShiftRouteSource(), IngressSource()])
    def test_implicit_template_sources(self, source) -> None:
        """Test Route and Ingress are exempt from the template rule."""
        self.validator.validate(source)

    def test_custom_capabilities(self) -> None:
        """Test a platform without implicit templates applies the rule to Route."""
        validator = SourceConsistencyValidator(
            PlatformCapabilities(implicit_template_sources=frozenset())
        )
        with pytest.raises(FieldInvariantViolation):
            validator.validate(OpenShiftRouteSource())


class TestSourceOnUpdate:
    """Tests for sources of updated resources."""

    def setup_method(self) -> None:
        self.validator = SourceConsistencyValidator()

    def test_crd_grandfathered(self) -> None:
        """Test a resource that already used CRD may keep it."""
        old = make_spec(source=CRDSource())
        self.validator.validate(CRDSource(), old_spec=old)

    def test_grandfathered_skips_template_rule(self) -> None:
        """Test moving away from CRD skips all source checks."""
        old = make_spec(source=CRDSource())
        self.validator.validate(ServiceSource(), old_spec=old)

    def test_switch_to_crd_rejected(self) -> None:
        """Test switching a Service source to CRD is refused."""
        old = make_spec()
        with pytest.raises(FieldInvariantViolation) as exc_info:
            self.validator.validate(CRDSource(), old_spec=old)
        assert exc_info.value.reason == "CRD source is not implemented"
