"""Unit tests for the workload builder."""

import pytest

from nba_topology.builders.workload import build_deployment, build_service
from nba_topology.errors import ConfigurationError


class TestDeployment:
    """Test cases for the annotator Deployment."""

    def test_deployment_metadata(self, workload):
        deployment = workload.deployment
        assert deployment.api_version == "apps/v1"
        assert deployment.kind == "Deployment"
        assert deployment.metadata.name == "network-bandwidth-annotator"
        assert deployment.metadata.namespace == "nba"

    def test_single_replica_without_extras(self, workload):
        """Test that no scaling, probe or resource policy is added."""
        container = workload.container

        assert workload.deployment.spec.replicas == 1
        assert workload.deployment.spec.strategy is None
        assert container.liveness_probe is None
        assert container.readiness_probe is None
        assert container.resources is None

    def test_container(self, workload):
        container = workload.container

        assert container.name == "network-bandwidth-annotator"
        assert container.image == "default-registry:61940/networkbandwidthannotator:0.1.0"
        assert container.command == ["./network-bandwidth-annotator", "-v"]
        assert [(p.container_port, p.name) for p in container.ports] == [
            (8443, "https")
        ]

    def test_tls_environment(self, workload):
        """Test that the container is told where to find its certificate."""
        env = {var.name: var.value for var in workload.container.env}

        assert env == {
            "ADDR": "0.0.0.0:8443",
            "TLS_CERT_FILE": "/certs/tls.crt",
            "TLS_KEY_FILE": "/certs/tls.key",
        }

    def test_tls_volume(self, workload):
        """Test that the TLS secret is mounted read-only at /certs."""
        pod_spec = workload.deployment.spec.template.spec
        (mount,) = workload.container.volume_mounts
        (volume,) = pod_spec.volumes

        assert mount.name == volume.name == "tls-certs"
        assert mount.mount_path == "/certs"
        assert mount.read_only is True
        assert volume.secret.secret_name == "tls-network-bandwidth-annotator"

    def test_selector_matches_pod_labels(self, workload):
        spec = workload.deployment.spec
        assert spec.selector.match_labels == spec.template.metadata.labels
        assert spec.template.metadata.labels == {"app": "network-bandwidth-annotator"}

    def test_label_maps_are_independent(self, workload):
        """Test that selector and pod labels are separate dict objects."""
        spec = workload.deployment.spec
        assert spec.selector.match_labels is not spec.template.metadata.labels
        assert workload.service.spec.selector is not spec.template.metadata.labels

    def test_empty_image_is_rejected(self, identity, trust_chain):
        with pytest.raises(ConfigurationError):
            build_deployment(identity, trust_chain, "", ["./annotator"])

    @pytest.mark.parametrize("image", ["   ", " image:1", "image:1\n"])
    def test_image_with_whitespace_is_rejected(self, identity, trust_chain, image):
        with pytest.raises(ConfigurationError):
            build_deployment(identity, trust_chain, image, ["./annotator"])

    def test_empty_command_is_rejected(self, identity, trust_chain):
        with pytest.raises(ConfigurationError):
            build_deployment(identity, trust_chain, "image:1", [])


class TestService:
    """Test cases for the annotator Service."""

    def test_service(self, identity):
        service = build_service(identity)

        assert service.api_version == "v1"
        assert service.kind == "Service"
        assert service.metadata.name == "network-bandwidth-annotator"
        assert service.metadata.namespace == "nba"
        assert service.spec.selector == {"app": "network-bandwidth-annotator"}
        assert [(p.port, p.name) for p in service.spec.ports] == [(8443, "https")]

    def test_service_port_matches_container_port(self, workload):
        assert workload.service_port.port == workload.container.ports[0].container_port
