"""Operator startup: platform detection and webhook server settings."""

import logging
import os
from typing import Any, Callable, Optional

import kopf

from external_dns_operator import __version__
from external_dns_operator.config import OperatorConfig, get_config
from external_dns_operator.models.conversion import API_GROUP
from external_dns_operator.utils.k8s_client import K8sClient
from external_dns_operator.utils.metrics import get_metrics
from external_dns_operator.validation.validator import ExternalDNSValidator

logger = logging.getLogger(__name__)


def detect_platform(
    cfg: OperatorConfig, client_factory: Callable[[], K8sClient] = K8sClient
) -> bool:
    """
    Decide once whether the operator runs in platform-aware mode.

    An explicit override wins; otherwise the cluster is queried unless
    detection is disabled.
    """
    if cfg.platform_override is not None:
        logger.info(f"Platform awareness forced to {cfg.platform_override}")
        return cfg.platform_override
    if not cfg.enable_platform_detection:
        logger.info("Platform detection disabled")
        return False
    return client_factory().is_openshift()


def _existing(path: str) -> Optional[str]:
    return path if os.path.exists(path) else None


@kopf.on.startup()
async def configure(
    settings: kopf.OperatorSettings,
    memo: kopf.Memo,
    **kwargs: Any,
) -> None:
    """Detect the platform and set up the validating webhook server."""
    cfg = get_config()

    platform_aware = detect_platform(cfg)
    memo.platform_aware = platform_aware
    memo.validator = ExternalDNSValidator(platform_aware=platform_aware)
    get_metrics().set_info(__version__, platform_aware)
    logger.info(f"Setting up the webhook, platform aware: {platform_aware}")

    if cfg.enable_webhook:
        settings.admission.server = kopf.WebhookServer(
            addr=cfg.webhook_host,
            port=cfg.webhook_port,
            certfile=_existing(cfg.certfile),
            pkeyfile=_existing(cfg.pkeyfile),
        )
        settings.admission.managed = API_GROUP
