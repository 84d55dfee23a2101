# Services - resource projection and listing logic
from .listing import list_and_project
from .cluster import (
    project_namespace, project_service, project_deployment,
    project_config_map, project_network_policy,
)
from .pod import (
    project_pod, project_container, project_pod_details, project_pod_logs, read_pod_log_text,
)

__all__ = [
    'list_and_project',
    'project_namespace', 'project_service', 'project_deployment',
    'project_config_map', 'project_network_policy',
    'project_pod', 'project_container', 'project_pod_details', 'project_pod_logs',
    'read_pod_log_text',
]
