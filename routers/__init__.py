"""
API Routers

- resources: 클러스터 리소스 목록 (namespaces, pods, services, deployments,
             configmaps, networkpolicies)
- pods     : Pod 상세 정보, 로그
- health   : 헬스체크
"""
from .resources import router as resources_router
from .pods import router as pods_router
from .health import router as health_router

__all__ = [
    'resources_router',
    'pods_router',
    'health_router',
]
