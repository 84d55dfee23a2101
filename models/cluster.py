"""
Cluster resource display models
"""
from typing import Optional, List, Dict
from pydantic import BaseModel, ConfigDict


class DisplayRecord(BaseModel):
    """요청마다 새로 생성되는 읽기 전용 표시용 레코드"""
    model_config = ConfigDict(frozen=True)


class NamespaceInfo(DisplayRecord):
    """네임스페이스 정보"""
    name: str
    status: str = ""
    created_at: Optional[str] = None
    labels: Dict[str, str] = {}


class ServiceInfo(DisplayRecord):
    """서비스 정보"""
    name: str
    namespace: str
    service_type: str = "ClusterIP"
    cluster_ip: str = "None"
    external_ip: str = "<none>"
    ports: str = ""  # "80:8080, 443:https"
    created_at: Optional[str] = None
    labels: Dict[str, str] = {}


class DeploymentInfo(DisplayRecord):
    """Deployment 레플리카 현황"""
    name: str
    namespace: str
    ready_replicas: int = 0
    replicas: int = 0
    updated_replicas: int = 0
    available_replicas: int = 0
    created_at: Optional[str] = None
    labels: Dict[str, str] = {}


class ConfigMapInfo(DisplayRecord):
    """ConfigMap 정보 (값은 노출하지 않고 키 목록만)"""
    name: str
    namespace: str
    data_keys: List[str] = []
    created_at: Optional[str] = None
    labels: Dict[str, str] = {}


class NetworkPolicyInfo(DisplayRecord):
    """NetworkPolicy 요약"""
    name: str
    namespace: str
    pod_selector: Dict[str, str] = {}
    ingress_rules: int = 0
    egress_rules: int = 0
    created_at: Optional[str] = None
    labels: Dict[str, str] = {}


__all__ = [
    "DisplayRecord",
    "NamespaceInfo",
    "ServiceInfo",
    "DeploymentInfo",
    "ConfigMapInfo",
    "NetworkPolicyInfo",
]
