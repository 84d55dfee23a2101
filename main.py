"""
Kubernetes 대시보드 백엔드 API (읽기 전용)

API 구조:
- /api/namespaces                      - 네임스페이스 목록
- /api/pods/{namespace}                - Pod 목록
- /api/services/{namespace}            - Service 목록
- /api/deployments/{namespace}         - Deployment 목록
- /api/configmaps/{namespace}          - ConfigMap 목록
- /api/networkpolicies/{namespace}     - NetworkPolicy 목록
- /api/pod/{namespace}/{name}          - Pod 상세 정보
- /api/pod/{namespace}/{name}/logs     - Pod 로그
- /api/health, /api/k8s/health         - 헬스체크
- /                                    - /index.html 로 리다이렉트
- 그 외                                 - static/ 디렉터리의 정적 파일
"""

import os
import sys
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from core.config import settings, configure_logging
from core.kubernetes import K8sClients, K8sConnectionError, create_k8s_clients
from routers import resources_router, pods_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # 클라이언트가 주입되지 않았으면 여기서 생성, 실패 시 서버 시작 중단
    if getattr(app.state, "k8s_clients", None) is None:
        app.state.k8s_clients = create_k8s_clients()
    yield


def create_app(k8s_clients: Optional[K8sClients] = None, static_dir: Optional[str] = None) -> FastAPI:
    """FastAPI 앱 생성

    Args:
        k8s_clients: 공유 클라이언트 (None이면 시작 시 자동 감지로 생성)
        static_dir: 정적 파일 디렉터리 (기본값 settings.STATIC_DIR)
    """
    app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)
    app.state.k8s_clients = k8s_clients

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_CREDENTIALS,
        allow_methods=settings.CORS_METHODS,
        allow_headers=settings.CORS_HEADERS,
    )

    # ============================================
    # 라우터 등록
    # ============================================
    app.include_router(resources_router)
    app.include_router(pods_router)
    app.include_router(health_router)

    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url=settings.INDEX_PATH, status_code=307)

    # 정적 파일 (매칭되지 않은 모든 경로), 라우터 등록 후 마운트해야 API가 우선
    static_dir = static_dir or settings.STATIC_DIR
    if os.path.isdir(static_dir):
        app.mount("/", StaticFiles(directory=static_dir), name="static")
    else:
        logger.warning(f"Static directory not found, UI will not be served: {static_dir}")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    try:
        clients = create_k8s_clients()
    except K8sConnectionError as e:
        logger.error(f"Cannot start dashboard: {e}")
        sys.exit(1)

    logger.info(f"Kubernetes Dashboard starting on http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(create_app(clients), host=settings.HOST, port=settings.PORT)
