"""Kubernetes API client wrapper used for platform detection."""

import logging
from typing import Optional

from kubernetes import client, config, dynamic
from kubernetes.client.exceptions import ApiException
from kubernetes.dynamic.exceptions import DynamicApiError, ResourceNotFoundError

logger = logging.getLogger(__name__)

# Present on OpenShift 4.x only
OPENSHIFT_API_SERVER_GROUP_VERSION = "operator.openshift.io/v1"
OPENSHIFT_API_SERVER_KIND = "OpenShiftAPIServer"


class K8sClient:
    """
    Wrapper around Kubernetes Python client with helper methods.

    Provides the cluster lookups the ExternalDNS operator needs at startup.
    """

    def __init__(self, api_client: Optional[client.ApiClient] = None):
        """
        Initialize Kubernetes client.

        Args:
            api_client: Preconfigured API client; kubeconfig is loaded
                when omitted
        """
        if api_client is None:
            try:
                config.load_incluster_config()
                logger.info("Loaded in-cluster Kubernetes config")
            except config.ConfigException:
                config.load_kube_config()
                logger.info("Loaded kubeconfig from file")
            api_client = client.ApiClient()

        self.api_client = api_client
        self._dynamic: Optional[dynamic.DynamicClient] = None

    @property
    def dynamic(self) -> dynamic.DynamicClient:
        """Get DynamicClient."""
        if self._dynamic is None:
            self._dynamic = dynamic.DynamicClient(self.api_client)
        return self._dynamic

    def is_openshift(self) -> bool:
        """
        Check whether the cluster is OpenShift 4.x.

        Looks up the OpenShiftAPIServer kind in the operator.openshift.io/v1
        group. Any failure to find it means the cluster is not OpenShift.

        Returns:
            True if running on OpenShift, False otherwise
        """
        try:
            self.dynamic.resources.get(
                api_version=OPENSHIFT_API_SERVER_GROUP_VERSION,
                kind=OPENSHIFT_API_SERVER_KIND,
            )
        except ResourceNotFoundError:
            logger.info("OpenShift API server resource not found, platform is not OpenShift")
            return False
        except (ApiException, DynamicApiError) as e:
            logger.warning(f"Platform detection failed, assuming not OpenShift: {e}")
            return False

        logger.info("Detected OpenShift platform")
        return True
