"""Tests for validation utilities."""

from external_dns_operator.utils.validators import (
    validate_aws_arn,
    validate_dns1123_label,
)


class TestDNS1123LabelValidation:
    """Tests for DNS-1123 label validation."""

    def test_valid_labels(self) -> None:
        """Test valid labels."""
        assert validate_dns1123_label("external-dns") is True
        assert validate_dns1123_label("a") is True
        assert validate_dns1123_label("123-abc") is True
        assert validate_dns1123_label("a" * 63) is True

    def test_invalid_labels(self) -> None:
        """Test invalid labels."""
        assert validate_dns1123_label("") is False
        assert validate_dns1123_label("External") is False  # Uppercase not allowed
        assert validate_dns1123_label("-dns") is False  # Cannot start with dash
        assert validate_dns1123_label("dns-") is False  # Cannot end with dash
        assert validate_dns1123_label("a.b") is False  # Dots not allowed in a label
        assert validate_dns1123_label("a" * 64) is False  # Too long (>63)


class TestAWSArnValidation:
    """Tests for AWS ARN validation."""

    def test_valid_arns(self) -> None:
        """Test valid ARNs."""
        assert validate_aws_arn("arn:aws:iam::123456789012:role/my-role") is True
        assert validate_aws_arn("arn:aws-cn:iam::123456789012:role/my-role") is True
        assert validate_aws_arn("arn:aws:s3:::bucket") is True

    def test_invalid_arns(self) -> None:
        """Test invalid ARNs."""
        assert validate_aws_arn("") is False
        assert validate_aws_arn("role-arn") is False
        assert validate_aws_arn("arn:aws:iam") is False  # Too few segments
        assert validate_aws_arn("arn:aws:iam::123456789012:") is False  # No resource
        assert validate_aws_arn("aws:iam::123456789012:role/x") is False  # No prefix
