"""
Kubernetes 객체 메타데이터 헬퍼

kubernetes 클라이언트 모델(V1Pod, V1Service 등)의 metadata 필드는 모두 Optional이므로
여기서 기본값을 채워 반환한다.
"""
from typing import Optional, Dict

from .helpers import format_timestamp


def get_name(obj) -> str:
    """객체 이름 (name이 없으면 generateName)"""
    meta = obj.metadata
    if meta is None:
        return ""
    return meta.name or meta.generate_name or ""


def get_namespace(obj) -> str:
    meta = obj.metadata
    return (meta.namespace if meta else None) or ""


def get_labels(obj) -> Dict[str, str]:
    meta = obj.metadata
    return dict(meta.labels or {}) if meta else {}


def get_annotations(obj) -> Dict[str, str]:
    meta = obj.metadata
    return dict(meta.annotations or {}) if meta else {}


def get_created_at(obj) -> Optional[str]:
    """creationTimestamp를 ISO-8601 문자열로 (없으면 None)"""
    meta = obj.metadata
    return format_timestamp(meta.creation_timestamp) if meta else None


__all__ = ["get_name", "get_namespace", "get_labels", "get_annotations", "get_created_at"]
