"""Tests for the validating admission webhook."""

import kopf
import pytest

from external_dns_operator.errors import SchemaConversionError
from external_dns_operator.handlers.webhook import (
    DENIED_CODE,
    review,
    validate_externaldns,
)

from helpers import make_body

CRD_SPEC = {
    "provider": {"type": "AWS", "aws": {"credentials": {"name": "credentials"}}},
    "source": {"type": "CRD", "fqdnTemplate": ["{{.Name}}"]},
}


class TestReview:
    """Tests for deciding admission requests."""

    def test_create_allowed(self, validator) -> None:
        """Test a valid resource is admitted."""
        assert review(validator, "CREATE", make_body()).allowed is True

    def test_create_denied(self, validator) -> None:
        """Test a CRD source is denied on create."""
        verdict = review(validator, "CREATE", make_body(spec=CRD_SPEC))
        assert verdict.reasons == ("CRD source is not implemented",)

    def test_update_grandfathered(self, validator) -> None:
        """Test a resource created with CRD may be updated."""
        old = make_body(spec=CRD_SPEC)
        assert review(validator, "UPDATE", make_body(spec=CRD_SPEC), old).allowed is True

    def test_update_old_version(self, validator) -> None:
        """Test the old object is converted with its own apiVersion."""
        old = make_body(spec=CRD_SPEC, api_version="externaldns.olm.openshift.io/v1alpha1")
        assert review(validator, "UPDATE", make_body(spec=CRD_SPEC), old).allowed is True

    def test_update_without_old(self, validator) -> None:
        """Test an update without the old object is validated as a create."""
        assert review(validator, "UPDATE", make_body(spec=CRD_SPEC)).allowed is False

    def test_delete_allowed(self, validator) -> None:
        """Test deletion is admitted without looking at the body."""
        assert review(validator, "DELETE", None).allowed is True

    def test_missing_body(self, validator) -> None:
        """Test a create without an object is a conversion error."""
        with pytest.raises(SchemaConversionError):
            review(validator, "CREATE", None)


class TestValidateHandler:
    """Tests for the kopf admission handler."""

    @pytest.mark.asyncio
    async def test_allowed(self, validator, metrics) -> None:
        """Test an admitted resource raises nothing and is counted."""
        await validate_externaldns(
            body=make_body(), memo=kopf.Memo(validator=validator), name="sample",
            operation="CREATE",
        )
        value = metrics.registry.get_sample_value(
            "externaldns_admission_requests_total",
            {"operation": "CREATE", "allowed": "true"},
        )
        assert value == 1.0

    @pytest.mark.asyncio
    async def test_denied(self, validator, metrics) -> None:
        """Test violations are returned as one admission error."""
        spec = {
            "domains": [{"matchType": "Exact"}],
            "provider": {"type": "GCP"},
            "source": {"type": "Service"},
        }
        with pytest.raises(kopf.AdmissionError) as exc_info:
            await validate_externaldns(
                body=make_body(spec=spec), memo=kopf.Memo(validator=validator),
                name="sample", operation="CREATE",
            )
        assert exc_info.value.code == DENIED_CODE
        assert str(exc_info.value) == (
            '["Name" cannot be empty when match type is "Exact", '
            '"fqdnTemplate" must be specified when "hostnameAnnotation" is "Ignore", '
            "credentials secret must be specified when provider type is GCP]"
        )
        value = metrics.registry.get_sample_value(
            "externaldns_admission_rejection_reasons_total", {"operation": "CREATE"}
        )
        assert value == 3.0

    @pytest.mark.asyncio
    async def test_platform_aware(self, openshift_validator, metrics) -> None:
        """Test the platform aware validator admits GCP without credentials."""
        spec = {
            "provider": {"type": "GCP"},
            "source": {"type": "OpenShiftRoute"},
        }
        await validate_externaldns(
            body=make_body(spec=spec), memo=kopf.Memo(validator=openshift_validator),
            name="sample", operation="CREATE",
        )

    @pytest.mark.asyncio
    async def test_conversion_error(self, validator, metrics) -> None:
        """Test a document that does not convert is denied."""
        body = make_body(spec={"provider": {"type": "Cloudflare"}, "source": {"type": "Service"}})
        with pytest.raises(kopf.AdmissionError, match="unsupported provider type"):
            await validate_externaldns(
                body=body, memo=kopf.Memo(validator=validator), name="sample",
                operation="CREATE",
            )
        value = metrics.registry.get_sample_value(
            "externaldns_conversion_errors_total",
            {"api_version": "externaldns.olm.openshift.io/v1beta1"},
        )
        assert value == 1.0

    @pytest.mark.asyncio
    async def test_delete(self, validator, metrics) -> None:
        """Test deletion is always admitted."""
        await validate_externaldns(
            body={}, memo=kopf.Memo(validator=validator), name="sample", operation="DELETE"
        )
