"""Library for creating resources in a Kubernetes cluster.

The `ClusterClient` interface has a single write operation, `create`, so a
test double can stand in for a real cluster. `KubernetesClusterClient` is the
implementation backed by the official kubernetes client:

```python
from testbed_deployer import cluster, config

client = cluster.load_cluster_client(config.ClusterConfig())
client.create(resource)
```

Errors returned by the cluster API (`kubernetes.client.exceptions.ApiException`)
are not caught or retried.
"""

from abc import ABC, abstractmethod
import logging
from typing import Any

from kubernetes import client, config as kube_config
from kubernetes.config.config_exception import ConfigException

from .config import ClusterConfig
from .exceptions import ClusterConfigError, ManifestParseError
from .manifest import APPS_API_VERSION, CORE_API_VERSION, Resource

__all__ = [
    "DEFAULT_NAMESPACE",
    "ClusterClient",
    "KubernetesClusterClient",
    "load_cluster_client",
]

_LOGGER = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "default"

# Name of the create method on the API client for each kind.
_CREATE_METHODS = {
    "Service": "create_namespaced_service",
    "Pod": "create_namespaced_pod",
    "ConfigMap": "create_namespaced_config_map",
    "Secret": "create_namespaced_secret",
    "PersistentVolumeClaim": "create_namespaced_persistent_volume_claim",
    "Deployment": "create_namespaced_deployment",
    "StatefulSet": "create_namespaced_stateful_set",
    "DaemonSet": "create_namespaced_daemon_set",
}


class ClusterClient(ABC):
    """Interface for creating resources in a cluster."""

    @abstractmethod
    def create(self, resource: Resource, namespace: str = DEFAULT_NAMESPACE) -> Any:
        """Create the resource in the namespace and return the API response."""


class KubernetesClusterClient(ClusterClient):
    """Creates resources with the kubernetes CoreV1Api and AppsV1Api."""

    def __init__(self, core_v1: client.CoreV1Api, apps_v1: client.AppsV1Api) -> None:
        """Initialize KubernetesClusterClient."""
        self._apis = {
            CORE_API_VERSION: core_v1,
            APPS_API_VERSION: apps_v1,
        }

    def create(self, resource: Resource, namespace: str = DEFAULT_NAMESPACE) -> Any:
        """Create the resource in the namespace and return the API response."""
        if (method_name := _CREATE_METHODS.get(resource.kind)) is None:
            raise ManifestParseError(f"Unsupported kind '{resource.kind}': {resource}")
        if (api := self._apis.get(resource.api_version)) is None:
            raise ManifestParseError(
                f"Unsupported apiVersion '{resource.api_version}': {resource}"
            )
        _LOGGER.debug("Creating %s in namespace %s", resource, namespace)
        result = getattr(api, method_name)(namespace=namespace, body=resource.body)
        _LOGGER.info("Created %s in namespace %s", resource, namespace)
        return result


def _load_config(cluster_config: ClusterConfig) -> None:
    """Load the kubernetes client configuration."""
    if cluster_config.kubeconfig is not None:
        kube_config.load_kube_config(
            config_file=str(cluster_config.kubeconfig),
            context=cluster_config.context,
        )
        _LOGGER.debug("Loaded kubeconfig %s", cluster_config.kubeconfig)
        return
    if cluster_config.context is None:
        try:
            kube_config.load_incluster_config()
            _LOGGER.debug("Loaded in-cluster configuration")
            return
        except ConfigException:
            _LOGGER.debug("Not running in a cluster, trying default kubeconfig")
    kube_config.load_kube_config(context=cluster_config.context)
    _LOGGER.debug("Loaded default kubeconfig")


def load_cluster_client(cluster_config: ClusterConfig) -> KubernetesClusterClient:
    """Create a KubernetesClusterClient using the configured credentials."""
    try:
        _load_config(cluster_config)
    except (ConfigException, FileNotFoundError) as err:
        raise ClusterConfigError(
            f"Unable to load cluster configuration: {err}"
        ) from err
    return KubernetesClusterClient(client.CoreV1Api(), client.AppsV1Api())
