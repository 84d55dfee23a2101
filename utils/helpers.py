"""
Utility helper functions
"""
from datetime import datetime
from typing import Optional, Dict


def format_timestamp(timestamp: Optional[datetime]) -> Optional[str]:
    """타임스탬프를 ISO-8601 문자열로 변환 (없으면 None)"""
    return timestamp.isoformat() if timestamp else None


def format_resource_requests(requests: Optional[Dict[str, str]]) -> str:
    """컨테이너 리소스 요청을 "CPU: x / MEM: y" 로 변환

    설정되지 않은 값은 "0"이 아닌 빈 문자열로 표시한다.
    """
    requests = requests or {}
    cpu = requests.get("cpu") or ""
    memory = requests.get("memory") or ""
    return f"CPU: {cpu} / MEM: {memory}"
