"""Operator configuration."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "EXTERNAL_DNS_OPERATOR_"

DEFAULT_OPERAND_NAMESPACE = "external-dns"
DEFAULT_CERT_DIR = "/tmp/k8s-webhook-server/serving-certs"


class OperatorConfig(BaseModel):
    """
    Runtime configuration of the ExternalDNS operator.

    Every field can be set from an ``EXTERNAL_DNS_OPERATOR_<FIELD>``
    environment variable.
    """

    operand_namespace: str = Field(
        default=DEFAULT_OPERAND_NAMESPACE,
        description="Namespace ExternalDNS instances run in",
    )
    enable_webhook: bool = Field(default=True, description="Serve the validating webhook")
    webhook_host: str = Field(default="0.0.0.0", description="Webhook bind address")
    webhook_port: int = Field(default=9443, ge=1, le=65535, description="Webhook port")
    cert_dir: str = Field(
        default=DEFAULT_CERT_DIR, description="Directory with tls.crt and tls.key"
    )
    enable_platform_detection: bool = Field(
        default=True, description="Detect OpenShift at startup"
    )
    platform_override: Optional[bool] = Field(
        default=None, description="Force platform awareness on or off"
    )
    metrics_port: int = Field(default=8080, ge=0, le=65535, description="Metrics port, 0 disables")
    log_level: str = Field(default="INFO", description="Log level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.upper()

    @property
    def certfile(self) -> str:
        return os.path.join(self.cert_dir, "tls.crt")

    @property
    def pkeyfile(self) -> str:
        return os.path.join(self.cert_dir, "tls.key")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "OperatorConfig":
        """
        Build the configuration from environment variables.

        Empty variables are ignored so that defaults apply.

        Args:
            environ: Environment mapping, defaults to ``os.environ``
        """
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            value = environ.get(ENV_PREFIX + name.upper())
            if value:
                values[name] = value
        return cls(**values)


_config: Optional[OperatorConfig] = None


def get_config() -> OperatorConfig:
    """Get or load the global operator configuration."""
    global _config
    if _config is None:
        _config = OperatorConfig.from_env()
    return _config
