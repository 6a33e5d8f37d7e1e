"""
Asks the cluster behind a kubeconfig whether a namespace exists.
"""
import logging
from typing import Optional

import yaml
from kubernetes import client, config
from kubernetes.client.exceptions import ApiException
from kubernetes.config import ConfigException
from urllib3.exceptions import HTTPError

from .errors import QueryError, wrap

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class ClusterNamespaceChecker:
    """Looks a namespace up through the Kubernetes API.

    A single request is made per call; errors are reported, not retried.
    """

    def __init__(self, timeout: Optional[float] = DEFAULT_TIMEOUT):
        self.timeout = timeout

    def __call__(self, kubeconfig_bytes: bytes, namespace: str) -> bool:
        return namespace_exists(kubeconfig_bytes, namespace, timeout=self.timeout)


def namespace_exists(
    kubeconfig_bytes: bytes, namespace: str, timeout: Optional[float] = DEFAULT_TIMEOUT
) -> bool:
    """Returns True if ``namespace`` exists in the current context's cluster."""
    try:
        config_dict = yaml.safe_load(kubeconfig_bytes)
        api_client = config.new_client_from_config_dict(config_dict)
    except (ConfigException, yaml.YAMLError) as e:
        raise QueryError(wrap("failed to initialize k8s REST client", e)) from e

    logger.debug(f"Querying namespace {namespace!r} from the Kubernetes API.")
    core_v1_api = client.CoreV1Api(api_client)
    try:
        core_v1_api.read_namespace(name=namespace, _request_timeout=timeout)
    except ApiException as e:
        if e.status == 404:
            return False
        raise QueryError(wrap(f'failed to query namespace "{namespace}" from k8s API', e.reason)) from e
    except (HTTPError, OSError) as e:
        raise QueryError(wrap(f'failed to query namespace "{namespace}" from k8s API', e)) from e
    finally:
        api_client.close()
    return True
