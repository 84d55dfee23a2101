"""
Pytest configuration and fixtures
"""
import os
import sys
import pytest
from datetime import datetime, timezone
from typing import Generator, AsyncGenerator
from unittest.mock import MagicMock

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport
from kubernetes import client as k8s


CREATED = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
CREATED_ISO = "2024-01-15T10:30:00+00:00"


# ============================================
# App Fixtures
# ============================================

@pytest.fixture
def static_dir(tmp_path):
    """UI 정적 파일 디렉터리"""
    directory = tmp_path / "static"
    directory.mkdir()
    (directory / "index.html").write_text("<html><body>dashboard</body></html>")
    (directory / "app.js").write_text("console.log('ok');")
    return str(directory)


@pytest.fixture
def mock_k8s_clients():
    """Mock Kubernetes clients"""
    from core.kubernetes import K8sClients

    return K8sClients(
        core_v1=MagicMock(),
        apps_v1=MagicMock(),
        networking_v1=MagicMock(),
    )


@pytest.fixture
def app(mock_k8s_clients, static_dir):
    """Create FastAPI app for testing"""
    from main import create_app
    return create_app(mock_k8s_clients, static_dir=static_dir)


@pytest.fixture
def client(app) -> Generator:
    """Synchronous test client"""
    with TestClient(app) as c:
        yield c


@pytest.fixture
async def async_client(app) -> AsyncGenerator:
    """Asynchronous test client"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ============================================
# Data Fixtures
# ============================================

def make_meta(name, namespace="default", labels=None, annotations=None, created=CREATED):
    return k8s.V1ObjectMeta(
        name=name,
        namespace=namespace,
        labels=labels,
        annotations=annotations,
        creation_timestamp=created,
    )


def make_container_status(name, ready=True, restarts=0):
    return k8s.V1ContainerStatus(
        name=name,
        image=f"{name}:latest",
        image_id=f"docker-pullable://{name}@sha256:abc",
        ready=ready,
        restart_count=restarts,
    )


@pytest.fixture
def sample_pod():
    """두 컨테이너 중 하나만 ready인 Pod"""
    return k8s.V1Pod(
        metadata=make_meta(
            "web-7d4b9c",
            labels={"app": "web", "tier": "frontend"},
            annotations={"prometheus.io/scrape": "true"},
        ),
        spec=k8s.V1PodSpec(
            node_name="worker-1",
            containers=[
                k8s.V1Container(
                    name="web",
                    image="nginx:1.25",
                    ports=[
                        k8s.V1ContainerPort(container_port=80),
                        k8s.V1ContainerPort(container_port=53, protocol="UDP"),
                    ],
                    resources=k8s.V1ResourceRequirements(
                        requests={"cpu": "100m", "memory": "128Mi"}
                    ),
                ),
                k8s.V1Container(name="sidecar", image="envoy:v1.29"),
            ],
        ),
        status=k8s.V1PodStatus(
            phase="Running",
            host_ip="10.0.0.12",
            container_statuses=[
                make_container_status("web", ready=True, restarts=2),
                make_container_status("sidecar", ready=False, restarts=1),
            ],
        ),
    )


@pytest.fixture
def sample_service():
    return k8s.V1Service(
        metadata=make_meta("web", labels={"app": "web"}),
        spec=k8s.V1ServiceSpec(
            type="LoadBalancer",
            cluster_ip="10.96.0.20",
            external_i_ps=["203.0.113.10", "203.0.113.11"],
            ports=[
                k8s.V1ServicePort(port=80, target_port=8080),
                k8s.V1ServicePort(port=443, target_port="https"),
            ],
        ),
    )


@pytest.fixture
def sample_deployment():
    return k8s.V1Deployment(
        metadata=make_meta("web", labels={"app": "web"}),
        spec=k8s.V1DeploymentSpec(
            replicas=3,
            selector=k8s.V1LabelSelector(match_labels={"app": "web"}),
            template=k8s.V1PodTemplateSpec(),
        ),
        status=k8s.V1DeploymentStatus(
            ready_replicas=2,
            updated_replicas=3,
            available_replicas=2,
        ),
    )
