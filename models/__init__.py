# Pydantic models
from .cluster import (
    DisplayRecord, NamespaceInfo, ServiceInfo, DeploymentInfo,
    ConfigMapInfo, NetworkPolicyInfo,
)
from .pod import PodInfo, ContainerInfo, PodDetails, PodLogs, ErrorResponse

__all__ = [
    # Cluster
    'DisplayRecord', 'NamespaceInfo', 'ServiceInfo', 'DeploymentInfo',
    'ConfigMapInfo', 'NetworkPolicyInfo',
    # Pod
    'PodInfo', 'ContainerInfo', 'PodDetails', 'PodLogs', 'ErrorResponse',
]
