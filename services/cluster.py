"""
클러스터 리소스 변환 로직
kubernetes 클라이언트 객체를 대시보드 표시용 레코드로 변환 (Namespace, Service,
Deployment, ConfigMap, NetworkPolicy)
"""

from kubernetes import client

from utils.k8s import get_name, get_namespace, get_labels, get_created_at
from models.cluster import (
    NamespaceInfo,
    ServiceInfo,
    DeploymentInfo,
    ConfigMapInfo,
    NetworkPolicyInfo,
)


def project_namespace(ns: client.V1Namespace) -> NamespaceInfo:
    phase = ns.status.phase if ns.status else None
    return NamespaceInfo(
        name=get_name(ns),
        status=phase or "",
        created_at=get_created_at(ns),
        labels=get_labels(ns),
    )


def format_service_ports(ports) -> str:
    """서비스 포트 목록을 "port:targetPort" 문자열로 변환

    targetPort는 숫자 또는 이름(named port)이며 받은 그대로 표시한다.

    Example:
        >>> format_service_ports([V1ServicePort(port=80, target_port=8080)])
        '80:8080'
    """
    rendered = []
    for p in ports or []:
        target_port = "" if p.target_port is None else str(p.target_port)
        rendered.append(f"{p.port}:{target_port}")
    return ", ".join(rendered)


def project_service(svc: client.V1Service) -> ServiceInfo:
    spec = svc.spec
    external_ips = (spec.external_i_ps if spec else None) or []

    return ServiceInfo(
        name=get_name(svc),
        namespace=get_namespace(svc),
        service_type=(spec.type if spec else None) or "ClusterIP",
        cluster_ip=(spec.cluster_ip if spec else None) or "None",
        external_ip=external_ips[0] if external_ips else "<none>",
        ports=format_service_ports(spec.ports if spec else None),
        created_at=get_created_at(svc),
        labels=get_labels(svc),
    )


def project_deployment(dep: client.V1Deployment) -> DeploymentInfo:
    # replicas는 spec(원하는 수), 나머지는 status(현재 상태)에서 가져옴
    spec = dep.spec
    status = dep.status

    return DeploymentInfo(
        name=get_name(dep),
        namespace=get_namespace(dep),
        ready_replicas=(status.ready_replicas if status else None) or 0,
        replicas=(spec.replicas if spec else None) or 0,
        updated_replicas=(status.updated_replicas if status else None) or 0,
        available_replicas=(status.available_replicas if status else None) or 0,
        created_at=get_created_at(dep),
        labels=get_labels(dep),
    )


def project_config_map(cm: client.V1ConfigMap) -> ConfigMapInfo:
    return ConfigMapInfo(
        name=get_name(cm),
        namespace=get_namespace(cm),
        data_keys=sorted(cm.data or {}),
        created_at=get_created_at(cm),
        labels=get_labels(cm),
    )


def project_network_policy(np: client.V1NetworkPolicy) -> NetworkPolicyInfo:
    """NetworkPolicy 요약 (규칙 내용은 해석하지 않고 개수만 센다)"""
    spec = np.spec
    selector = spec.pod_selector if spec else None

    return NetworkPolicyInfo(
        name=get_name(np),
        namespace=get_namespace(np),
        pod_selector=dict((selector.match_labels if selector else None) or {}),
        ingress_rules=len((spec.ingress if spec else None) or []),
        egress_rules=len((spec.egress if spec else None) or []),
        created_at=get_created_at(np),
        labels=get_labels(np),
    )


__all__ = [
    "project_namespace",
    "format_service_ports",
    "project_service",
    "project_deployment",
    "project_config_map",
    "project_network_policy",
]
