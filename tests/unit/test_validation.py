"""
Unit tests for validation utilities.

These tests verify that malformed seeds are rejected and that any
disagreement between resources of a built graph is reported.
"""

import pytest

from nba_topology.errors import ConsistencyError, SeedValidationError
from nba_topology.synthesis import synthesize
from nba_topology.utils.validation import (
    validate_dns_label,
    validate_graph,
    validate_http_path,
    validate_label_key,
    validate_port,
    validate_resource_name,
)


class TestResourceNameValidation:
    """Test cases for Kubernetes resource name validation."""

    def test_valid_resource_names(self):
        valid_names = [
            "a",
            "tls-network-bandwidth-annotator",
            "selfsigned-issuer",
            "cert.example.com",
        ]

        for name in valid_names:
            validate_resource_name(name)  # Should not raise

    def test_invalid_resource_names(self):
        invalid_names = [
            "",  # Empty
            "Tls",  # Uppercase
            "tls_secret",  # Underscore
            "-tls",  # Starts with hyphen
            "tls-",  # Ends with hyphen
            "tls..secret",  # Double dots
            "a" * 254,  # Too long
        ]

        for name in invalid_names:
            with pytest.raises(SeedValidationError):
                validate_resource_name(name)

    def test_resource_name_error_messages(self):
        with pytest.raises(SeedValidationError) as exc_info:
            validate_resource_name("", "secret")
        assert "cannot be empty" in str(exc_info.value)

        with pytest.raises(SeedValidationError) as exc_info:
            validate_resource_name("a" * 254, "secret")
        assert "too long" in str(exc_info.value)


class TestDnsLabelValidation:
    """Test cases for single-label names."""

    def test_namespace_may_start_with_digit(self):
        validate_dns_label("1nba", "namespace")

    def test_service_must_start_with_letter(self):
        with pytest.raises(SeedValidationError):
            validate_dns_label("1nba", "service", rfc1035=True)

    def test_dots_are_rejected(self):
        with pytest.raises(SeedValidationError):
            validate_dns_label("nba.system", "namespace")

    def test_length_limit(self):
        validate_dns_label("a" * 63, "namespace")
        with pytest.raises(SeedValidationError):
            validate_dns_label("a" * 64, "namespace")


class TestOtherSeedValidation:
    """Test cases for ports, paths and label keys."""

    @pytest.mark.parametrize("port", [1, 8443, 65535])
    def test_valid_ports(self, port):
        validate_port(port)

    @pytest.mark.parametrize("port", [0, -1, 65536])
    def test_invalid_ports(self, port):
        with pytest.raises(SeedValidationError):
            validate_port(port)

    @pytest.mark.parametrize("path", ["/mutate", "/annotate", "/"])
    def test_valid_paths(self, path):
        validate_http_path(path)

    @pytest.mark.parametrize("path", ["mutate", "/mu tate", "/mutate?dry=1"])
    def test_invalid_paths(self, path):
        with pytest.raises(SeedValidationError):
            validate_http_path(path)

    @pytest.mark.parametrize("key", ["nba-enabled", "example.com/nba-enabled"])
    def test_valid_label_keys(self, key):
        validate_label_key(key)

    @pytest.mark.parametrize("key", ["", "nba enabled", "Example/x", "a/", "-nba"])
    def test_invalid_label_keys(self, key):
        with pytest.raises(SeedValidationError):
            validate_label_key(key)


class TestGraphValidation:
    """Test cases for cross-resource consistency checks."""

    @pytest.fixture
    def graph(self, settings):
        return synthesize(settings)

    def test_synthesized_graph_is_consistent(self, graph):
        validate_graph(graph)  # Should not raise

    def test_service_selector_drift(self, graph):
        graph.workload.service.spec.selector["app"] = "other"

        with pytest.raises(ConsistencyError) as exc_info:
            validate_graph(graph)
        assert exc_info.value.field == "service.selector"

    def test_volume_secret_drift(self, graph):
        volume = graph.workload.deployment.spec.template.spec.volumes[0]
        volume.secret.secret_name = "tls-other"

        with pytest.raises(ConsistencyError) as exc_info:
            validate_graph(graph)
        assert exc_info.value.field == "volume.secret.secretName"

    def test_mount_path_drift(self, graph):
        graph.workload.container.volume_mounts[0].mount_path = "/tls"

        with pytest.raises(ConsistencyError) as exc_info:
            validate_graph(graph)
        assert exc_info.value.field == "TLS_CERT_FILE directory"

    def test_missing_tls_env(self, graph):
        graph.workload.container.env = graph.workload.container.env[:1]

        with pytest.raises(ConsistencyError) as exc_info:
            validate_graph(graph)
        assert exc_info.value.field == "TLS_CERT_FILE"

    def test_service_port_drift(self, graph):
        graph.workload.service_port.port = 443

        with pytest.raises(ConsistencyError) as exc_info:
            validate_graph(graph)
        assert exc_info.value.field == "service.port"

    def test_webhook_port_drift(self, graph):
        graph.admission.webhook.client_config.service.port = 443

        with pytest.raises(ConsistencyError) as exc_info:
            validate_graph(graph)
        assert exc_info.value.field == "webhook.clientConfig.service.port"

    def test_ca_injection_drift(self, graph):
        annotations = graph.admission.webhook_configuration.metadata.annotations
        annotations["cert-manager.io/inject-ca-from"] = "nba/other"

        with pytest.raises(ConsistencyError) as exc_info:
            validate_graph(graph)
        assert exc_info.value.field == "cert-manager.io/inject-ca-from"

    def test_webhook_service_namespace_drift(self, graph):
        graph.admission.webhook.client_config.service.namespace = "default"

        with pytest.raises(ConsistencyError):
            validate_graph(graph)

    def test_deployment_namespace_drift(self, graph):
        graph.workload.deployment.metadata.namespace = "default"

        with pytest.raises(ConsistencyError) as exc_info:
            validate_graph(graph)
        assert exc_info.value.field == "deployment.namespace"

    def test_error_message_shows_both_values(self, graph):
        graph.workload.service_port.port = 443

        with pytest.raises(ConsistencyError) as exc_info:
            validate_graph(graph)
        assert "expected 8443, got 443" in str(exc_info.value)
