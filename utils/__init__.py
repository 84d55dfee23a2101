# Utility functions
from .helpers import format_timestamp, format_resource_requests
from .k8s import get_name, get_namespace, get_labels, get_annotations, get_created_at

__all__ = [
    'format_timestamp', 'format_resource_requests',
    'get_name', 'get_namespace', 'get_labels', 'get_annotations', 'get_created_at',
]
