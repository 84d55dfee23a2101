# Core module - configuration, Kubernetes client provider
from .config import settings, configure_logging
from .kubernetes import (
    K8sClients,
    K8sConnectionError,
    create_k8s_clients,
    get_k8s_clients,
    is_running_in_cluster,
    get_environment_info,
)

__all__ = [
    'settings',
    'configure_logging',
    'K8sClients',
    'K8sConnectionError',
    'create_k8s_clients',
    'get_k8s_clients',
    'is_running_in_cluster',
    'get_environment_info',
]
