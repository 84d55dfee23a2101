"""
Health check API
"""
import asyncio
import logging

from fastapi import APIRouter, Depends

from core.config import settings
from core.kubernetes import K8sClients, get_k8s_clients, get_environment_info

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/api/health")
async def health_check():
    """API 헬스체크"""
    return {"status": "healthy", "service": settings.SERVICE_NAME}


@router.get("/api/k8s/health")
async def k8s_health_check(k8s: K8sClients = Depends(get_k8s_clients)):
    """Kubernetes 연결 헬스체크"""
    try:
        await asyncio.to_thread(k8s.core_v1.list_namespace, limit=1)
        return {"status": "connected", **get_environment_info()}
    except Exception as e:
        logger.error(f"Kubernetes health check failed (list namespaces): {e}")
        return {"status": "disconnected", "error": str(e)}
