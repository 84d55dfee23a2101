"""
Pod detail API
Pod 상세 정보 및 로그 조회
"""
import asyncio
import logging
from typing import Union

from fastapi import APIRouter, Depends

from core.kubernetes import K8sClients, get_k8s_clients
from models.pod import PodDetails, PodLogs, ErrorResponse
from services.pod import project_pod_details, project_pod_logs, read_pod_log_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/pod", tags=["pods"])

POD_NOT_FOUND = "Pod not found"


@router.get("/{namespace}/{name}", response_model=Union[PodDetails, ErrorResponse])
async def get_pod_details(namespace: str, name: str, k8s: K8sClients = Depends(get_k8s_clients)):
    """Pod 상세 정보

    조회 실패(없음, 권한, 네트워크 오류 모두) 시 200과 {"error": "Pod not found"}
    """
    try:
        pod = await asyncio.to_thread(k8s.core_v1.read_namespaced_pod, name, namespace)
    except Exception as e:
        logger.error(f"Error fetching pod details for {namespace}/{name}: {e}")
        return ErrorResponse(error=POD_NOT_FOUND)

    return project_pod_details(pod)


@router.get("/{namespace}/{name}/logs", response_model=PodLogs)
async def get_pod_logs(namespace: str, name: str, k8s: K8sClients = Depends(get_k8s_clients)):
    """Pod 로그 조회 (실패 시 logs 필드에 에러 메시지)"""
    try:
        logs = await asyncio.to_thread(read_pod_log_text, k8s.core_v1, name, namespace)
    except Exception as e:
        logger.error(f"Error fetching pod logs for {namespace}/{name}: {e}")
        return project_pod_logs(namespace, name, f"Error fetching logs: {e}")

    return project_pod_logs(namespace, name, logs)
