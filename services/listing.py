"""
목록 조회 공통 로직
클러스터 API 목록 호출 → 항목별 변환 → 실패 시 빈 목록
"""
import asyncio
import logging
from typing import Any, Callable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def list_and_project(
    kind: str,
    fetch: Callable[..., Any],
    projector: Callable[[Any], T],
    namespace: Optional[str] = None,
) -> List[T]:
    """리소스 목록을 조회하여 표시용 레코드 목록으로 변환

    blocking 클라이언트 호출은 워커 스레드에서 실행하여 이벤트 루프를 막지 않는다.
    조회 실패는 로그만 남기고 빈 목록을 반환하므로, 응답만으로는
    "리소스 없음"과 "조회 실패"를 구분할 수 없다.

    Args:
        kind: 로그에 표시할 리소스 종류 (e.g. "pods")
        fetch: kubernetes 클라이언트 목록 메서드 (e.g. core_v1.list_namespaced_pod)
        projector: 항목 하나를 표시용 레코드로 변환하는 함수
        namespace: 네임스페이스 범위 조회 시 fetch에 그대로 전달

    Returns:
        list: 변환된 레코드 목록 (실패 시 빈 목록)
    """
    try:
        if namespace is None:
            result = await asyncio.to_thread(fetch)
        else:
            result = await asyncio.to_thread(fetch, namespace)
    except Exception as e:
        if namespace is None:
            logger.error(f"Error fetching {kind}: {e}")
        else:
            logger.error(f"Error fetching {kind} in namespace {namespace!r}: {e}")
        return []

    return [projector(item) for item in result.items or []]


__all__ = ["list_and_project"]
