"""Main entry point for the ExternalDNS operator."""

import logging
import sys

import kopf
from prometheus_client import start_http_server

from external_dns_operator.config import get_config
from external_dns_operator.handlers import externaldns_handler, lifecycle, webhook  # noqa: F401
from external_dns_operator.utils.metrics import get_metrics

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the ExternalDNS operator."""
    cfg = get_config()

    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )

    logger.info("Starting ExternalDNS Operator")
    logger.info(f"Operand namespace: {cfg.operand_namespace}")

    if cfg.metrics_port:
        start_http_server(cfg.metrics_port, registry=get_metrics().registry)
        logger.info(f"Serving metrics on port {cfg.metrics_port}")

    # ExternalDNS is cluster scoped
    kopf.run(
        clusterwide=True,
        liveness_endpoint="http://0.0.0.0:8081/healthz",
    )


if __name__ == "__main__":
    main()
