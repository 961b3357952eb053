"""Kubernetes Secret lookups for static provider credentials."""

from __future__ import annotations

import base64
import logging

from kubernetes import client as k8s_client
from kubernetes import config as k8s_config
from kubernetes.client.exceptions import ApiException
from kubernetes.config import ConfigException

from volcdns_webhook.errors import AccessDeniedError, SecretNotFoundError

logger = logging.getLogger(__name__)


class KubernetesSecretStore:
    """Read single keys out of namespaced Secrets."""

    def __init__(self, core_api: k8s_client.CoreV1Api) -> None:
        self._core_api = core_api

    @classmethod
    def from_config(cls, kube_client_config: k8s_client.Configuration | None = None) -> KubernetesSecretStore:
        """Build a store from an explicit client configuration, or from the environment.

        Without a configuration the in-cluster service account is tried first,
        then the local kubeconfig.
        """
        if kube_client_config is not None:
            return cls(k8s_client.CoreV1Api(k8s_client.ApiClient(kube_client_config)))
        try:
            k8s_config.load_incluster_config()
        except ConfigException:
            logger.debug("Not running in-cluster, loading kubeconfig")
            k8s_config.load_kube_config()
        return cls(k8s_client.CoreV1Api(k8s_client.ApiClient()))

    def get(self, namespace: str, name: str, key: str) -> str:
        """Return the decoded value of ``key`` in Secret ``namespace/name``."""
        try:
            secret = self._core_api.read_namespaced_secret(name=name, namespace=namespace)
        except ApiException as exc:
            if exc.status == 404:
                raise SecretNotFoundError(f"failed to get secret {namespace}/{name}: not found") from exc
            raise AccessDeniedError(f"failed to get secret {namespace}/{name}: {exc.status} {exc.reason}") from exc

        data = secret.data or {}
        if key not in data:
            raise SecretNotFoundError(f"secret {namespace}/{name} does not contain key {key}")
        return base64.b64decode(data[key]).decode().strip()
