"""
Cluster resources API
Namespace, Pod, Service, Deployment, ConfigMap, NetworkPolicy 목록 조회

모든 목록 API는 클러스터 조회에 실패해도 200과 빈 배열을 반환한다.
"""
from typing import List

from fastapi import APIRouter, Depends

from core.kubernetes import K8sClients, get_k8s_clients
from models.cluster import (
    NamespaceInfo,
    ServiceInfo,
    DeploymentInfo,
    ConfigMapInfo,
    NetworkPolicyInfo,
)
from models.pod import PodInfo
from services.listing import list_and_project
from services.cluster import (
    project_namespace,
    project_service,
    project_deployment,
    project_config_map,
    project_network_policy,
)
from services.pod import project_pod

router = APIRouter(prefix="/api", tags=["resources"])


@router.get("/namespaces", response_model=List[NamespaceInfo])
async def get_namespaces(k8s: K8sClients = Depends(get_k8s_clients)):
    """모든 네임스페이스 목록"""
    return await list_and_project("namespaces", k8s.core_v1.list_namespace, project_namespace)


@router.get("/pods/{namespace}", response_model=List[PodInfo])
async def get_pods(namespace: str, k8s: K8sClients = Depends(get_k8s_clients)):
    """특정 네임스페이스의 Pod 목록"""
    return await list_and_project(
        "pods", k8s.core_v1.list_namespaced_pod, project_pod, namespace
    )


@router.get("/services/{namespace}", response_model=List[ServiceInfo])
async def get_services(namespace: str, k8s: K8sClients = Depends(get_k8s_clients)):
    return await list_and_project(
        "services", k8s.core_v1.list_namespaced_service, project_service, namespace
    )


@router.get("/deployments/{namespace}", response_model=List[DeploymentInfo])
async def get_deployments(namespace: str, k8s: K8sClients = Depends(get_k8s_clients)):
    return await list_and_project(
        "deployments", k8s.apps_v1.list_namespaced_deployment, project_deployment, namespace
    )


@router.get("/configmaps/{namespace}", response_model=List[ConfigMapInfo])
async def get_configmaps(namespace: str, k8s: K8sClients = Depends(get_k8s_clients)):
    return await list_and_project(
        "configmaps", k8s.core_v1.list_namespaced_config_map, project_config_map, namespace
    )


@router.get("/networkpolicies/{namespace}", response_model=List[NetworkPolicyInfo])
async def get_network_policies(namespace: str, k8s: K8sClients = Depends(get_k8s_clients)):
    return await list_and_project(
        "network policies",
        k8s.networking_v1.list_namespaced_network_policy,
        project_network_policy,
        namespace,
    )
