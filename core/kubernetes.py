"""
Kubernetes 클라이언트 초기화

환경에 따라 인증 방식을 자동으로 선택:
- Pod 내부 (KUBERNETES_SERVICE_HOST 존재): ServiceAccount 토큰 사용 (incluster_config)
- 로컬 개발 환경: ~/.kube/config 파일 사용 (kube_config)
"""
import os
import logging
from typing import NamedTuple

from fastapi import Request
from kubernetes import client, config
from kubernetes.client.rest import ApiException

logger = logging.getLogger(__name__)


class K8sConnectionError(ConnectionError):
    """클러스터 설정 로드 실패"""


class K8sClients(NamedTuple):
    """프로세스 전체에서 공유하는 API 클라이언트 묶음

    세 API 객체는 하나의 ApiClient(커넥션 풀)를 공유하며 생성 후 변경되지 않는다.
    """
    core_v1: client.CoreV1Api
    apps_v1: client.AppsV1Api
    networking_v1: client.NetworkingV1Api


def is_running_in_cluster() -> bool:
    """현재 코드가 K8s 클러스터 내부(Pod)에서 실행 중인지 확인"""
    return os.environ.get('KUBERNETES_SERVICE_HOST') is not None


def _load_k8s_config() -> bool:
    """K8s 설정 로드 (환경 자동 감지)

    Returns:
        bool: 클러스터 내부 config 사용 시 True, kube_config 사용 시 False

    Raises:
        K8sConnectionError: 어떤 설정도 로드할 수 없을 때
    """
    if is_running_in_cluster():
        try:
            config.load_incluster_config()
            logger.info("K8s config loaded: in-cluster (ServiceAccount)")
            return True
        except config.ConfigException as e:
            logger.warning(f"In-cluster config failed: {e}, falling back to kubeconfig")

    try:
        config.load_kube_config()
    except (config.ConfigException, OSError) as e:
        logger.error(f"Failed to load any K8s config: {e}")
        raise K8sConnectionError(
            "Could not load Kubernetes configuration. "
            "Outside a cluster, check that ~/.kube/config (or $KUBECONFIG) exists. "
            f"Details: {e}"
        ) from e

    logger.info("K8s config loaded: kubeconfig (~/.kube/config)")
    return False


def create_k8s_clients() -> K8sClients:
    """Kubernetes API 클라이언트 생성

    Returns:
        K8sClients: (CoreV1Api, AppsV1Api, NetworkingV1Api)
        - CoreV1Api: Namespace, Pod, Service, ConfigMap, Pod 로그
        - AppsV1Api: Deployment
        - NetworkingV1Api: NetworkPolicy

    Raises:
        K8sConnectionError: K8s 설정 로드 실패 시

    Example:
        >>> clients = create_k8s_clients()
        >>> pods = clients.core_v1.list_namespaced_pod("default")
    """
    _load_k8s_config()

    api_client = client.ApiClient()
    return K8sClients(
        core_v1=client.CoreV1Api(api_client),
        apps_v1=client.AppsV1Api(api_client),
        networking_v1=client.NetworkingV1Api(api_client),
    )


def get_k8s_clients(request: Request) -> K8sClients:
    """앱 시작 시 생성된 공유 클라이언트를 핸들러에 주입 (FastAPI dependency)"""
    return request.app.state.k8s_clients


def get_environment_info() -> dict:
    """현재 K8s 연결 환경 정보 반환

    Returns:
        dict: 환경 정보
            - environment: "in-cluster" 또는 "local"
            - config_source: 사용된 설정 소스
            - kubernetes_host: API 서버 주소 (in-cluster인 경우)
    """
    in_cluster = is_running_in_cluster()
    env_info = {
        "environment": "in-cluster" if in_cluster else "local",
        "config_source": "ServiceAccount token" if in_cluster else "~/.kube/config",
    }

    if in_cluster:
        env_info["kubernetes_host"] = os.environ.get('KUBERNETES_SERVICE_HOST')
        env_info["kubernetes_port"] = os.environ.get('KUBERNETES_SERVICE_PORT')

    return env_info


__all__ = [
    'K8sClients',
    'K8sConnectionError',
    'create_k8s_clients',
    'get_k8s_clients',
    'is_running_in_cluster',
    'get_environment_info',
    'ApiException',
]
