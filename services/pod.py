"""
Pod 관련 변환 로직
Pod 목록 요약, 상세 정보, 컨테이너 정보, 로그 응답 생성
"""

from typing import Tuple

from kubernetes import client

from utils.helpers import format_resource_requests
from utils.k8s import get_name, get_namespace, get_labels, get_annotations, get_created_at
from models.pod import PodInfo, ContainerInfo, PodDetails, PodLogs


def count_ready(container_statuses) -> Tuple[int, int, int]:
    """컨테이너 상태 집계

    Returns:
        tuple: (ready 컨테이너 수, 전체 컨테이너 수, 재시작 횟수 합계)
    """
    statuses = container_statuses or []
    ready = sum(1 for cs in statuses if cs.ready)
    restarts = sum(cs.restart_count or 0 for cs in statuses)
    return ready, len(statuses), restarts


def project_pod(pod: client.V1Pod) -> PodInfo:
    status = pod.status
    ready, total, restarts = count_ready(status.container_statuses if status else None)

    return PodInfo(
        name=get_name(pod),
        namespace=get_namespace(pod),
        phase=(status.phase if status else None) or "Unknown",
        ready=f"{ready}/{total}",
        restarts=restarts,
        created_at=get_created_at(pod),
        # 목록 화면의 node_name 컬럼은 노드 이름이 아닌 host IP를 표시
        node_name=status.host_ip if status else None,
        labels=get_labels(pod),
    )


def project_container(container: client.V1Container) -> ContainerInfo:
    ports = [
        f"{p.container_port}:{p.protocol or 'TCP'}"
        for p in container.ports or []
    ]
    requests = container.resources.requests if container.resources else None

    return ContainerInfo(
        name=container.name,
        image=container.image or "",
        ports=ports,
        resources=format_resource_requests(requests),
    )


def project_pod_details(pod: client.V1Pod) -> PodDetails:
    spec = pod.spec
    status = pod.status

    return PodDetails(
        name=get_name(pod),
        namespace=get_namespace(pod),
        labels=get_labels(pod),
        annotations=get_annotations(pod),
        node_name=(spec.node_name if spec else None) or "",
        status=(status.phase if status else None) or "",
        containers=[project_container(c) for c in (spec.containers if spec else None) or []],
        created_at=get_created_at(pod),
    )


def read_pod_log_text(core_v1: client.CoreV1Api, name: str, namespace: str) -> str:
    """Pod 로그 원문 조회

    클라이언트의 응답 역직렬화를 거치지 않고 본문 바이트를 그대로 디코딩한다.
    (JSON 한 줄짜리 로그가 dict로 변환되는 것을 방지)
    """
    resp = core_v1.read_namespaced_pod_log(name, namespace, _preload_content=False)
    try:
        return resp.data.decode("utf-8", errors="replace")
    finally:
        resp.release_conn()


def project_pod_logs(namespace: str, pod_name: str, logs: str) -> PodLogs:
    return PodLogs(pod_name=pod_name, namespace=namespace, logs=logs)


__all__ = [
    "count_ready",
    "project_pod",
    "project_container",
    "project_pod_details",
    "read_pod_log_text",
    "project_pod_logs",
]
