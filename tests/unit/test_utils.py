"""
Unit tests for utility functions
"""
from datetime import datetime, timezone

from kubernetes import client as k8s

from utils.helpers import format_timestamp, format_resource_requests
from utils.k8s import get_name, get_namespace, get_labels, get_annotations, get_created_at


class TestFormatTimestamp:
    """Tests for format_timestamp function"""

    def test_utc(self):
        ts = datetime(2024, 3, 1, 8, 0, 5, tzinfo=timezone.utc)
        assert format_timestamp(ts) == "2024-03-01T08:00:05+00:00"

    def test_none(self):
        assert format_timestamp(None) is None


class TestFormatResourceRequests:
    """Tests for format_resource_requests function"""

    def test_both(self):
        assert format_resource_requests({"cpu": "250m", "memory": "64Mi"}) == "CPU: 250m / MEM: 64Mi"

    def test_unset_is_empty_not_zero(self):
        assert format_resource_requests(None) == "CPU:  / MEM: "
        assert format_resource_requests({"cpu": "1"}) == "CPU: 1 / MEM: "


class TestMetadataAccessors:
    """Tests for utils.k8s metadata helpers"""

    def test_no_metadata(self):
        pod = k8s.V1Pod()
        assert get_name(pod) == ""
        assert get_namespace(pod) == ""
        assert get_labels(pod) == {}
        assert get_annotations(pod) == {}
        assert get_created_at(pod) is None

    def test_generate_name_fallback(self):
        pod = k8s.V1Pod(metadata=k8s.V1ObjectMeta(generate_name="job-"))
        assert get_name(pod) == "job-"

    def test_labels_copied(self):
        labels = {"app": "x"}
        pod = k8s.V1Pod(metadata=k8s.V1ObjectMeta(name="p", labels=labels))
        result = get_labels(pod)
        assert result == labels
        assert result is not labels
