"""
Pod 관련 Pydantic 모델
Pod 목록, 상세 정보, 로그 응답 구조 정의
"""

from typing import Optional, List, Dict
from pydantic import BaseModel

from .cluster import DisplayRecord


class PodInfo(DisplayRecord):
    """Pod 목록용 요약 정보"""
    name: str
    namespace: str
    phase: str = "Unknown"
    ready: str = "0/0"  # "ready/total"
    restarts: int = 0
    created_at: Optional[str] = None
    node_name: Optional[str] = None  # 노드의 host IP
    labels: Dict[str, str] = {}


class ContainerInfo(DisplayRecord):
    """Pod spec 안의 컨테이너 정보"""
    name: str
    image: str = ""
    ports: List[str] = []  # "8080:TCP"
    resources: str = "CPU:  / MEM: "


class PodDetails(DisplayRecord):
    """Pod 상세 정보"""
    name: str
    namespace: str
    labels: Dict[str, str] = {}
    annotations: Dict[str, str] = {}
    node_name: str = ""
    status: str = ""
    containers: List[ContainerInfo] = []
    created_at: Optional[str] = None


class PodLogs(DisplayRecord):
    """Pod 로그 응답 (조회 실패 시 logs에 에러 메시지)"""
    pod_name: str
    namespace: str
    logs: str


class ErrorResponse(BaseModel):
    """단일 객체 조회 실패 응답"""
    error: str


__all__ = [
    "PodInfo",
    "ContainerInfo",
    "PodDetails",
    "PodLogs",
    "ErrorResponse",
]
