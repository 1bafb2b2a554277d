"""
Validation utilities for the topology synthesizer.

This module provides:

- Seed validation (names, ports, paths) before any resource is built
- Cross-resource consistency checks over the finished resource graph
"""

import logging
import posixpath
import re
from typing import Any

from nba_topology.constants import (
    CA_INJECTION_ANNOTATION,
    ENV_TLS_CERT_FILE,
    ENV_TLS_KEY_FILE,
    ERROR_INVALID_NAME,
    ERROR_MISMATCH,
    ERROR_NAME_TOO_LONG,
)
from nba_topology.errors import ConsistencyError, SeedValidationError
from nba_topology.models.graph import ResourceGraph

logger = logging.getLogger(__name__)

DNS1123_SUBDOMAIN = re.compile(
    r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*$"
)
DNS1123_LABEL = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")
DNS1035_LABEL = re.compile(r"^[a-z]([-a-z0-9]*[a-z0-9])?$")
LABEL_NAME = re.compile(r"^[A-Za-z0-9]([-A-Za-z0-9_.]*[A-Za-z0-9])?$")


def validate_resource_name(name: str, resource_type: str = "resource") -> None:
    """
    Validate Kubernetes resource name according to DNS-1123 subdomain rules.

    Args:
        name: Resource name to validate
        resource_type: Type of resource for error messages

    Raises:
        SeedValidationError: If name is invalid
    """
    if not name:
        raise SeedValidationError(f"{resource_type} name cannot be empty")

    if len(name) > 253:
        raise SeedValidationError(ERROR_NAME_TOO_LONG.format(resource_type, name, 253))

    if not DNS1123_SUBDOMAIN.match(name):
        raise SeedValidationError(ERROR_INVALID_NAME.format(resource_type, name))

    logger.debug(f"Validated {resource_type} name: {name}")


def validate_dns_label(name: str, resource_type: str, rfc1035: bool = False) -> None:
    """
    Validate a name that must be a single DNS label.

    Namespaces follow RFC 1123 label rules; Service names additionally must
    start with a letter (RFC 1035).

    Raises:
        SeedValidationError: If name is invalid
    """
    if not name:
        raise SeedValidationError(f"{resource_type} name cannot be empty")

    if len(name) > 63:
        raise SeedValidationError(ERROR_NAME_TOO_LONG.format(resource_type, name, 63))

    pattern = DNS1035_LABEL if rfc1035 else DNS1123_LABEL
    if not pattern.match(name):
        raise SeedValidationError(ERROR_INVALID_NAME.format(resource_type, name))


def validate_label_key(key: str) -> None:
    """
    Validate a label key with an optional DNS subdomain prefix.

    Raises:
        SeedValidationError: If key is invalid
    """
    prefix, _, name = key.rpartition("/")
    if prefix:
        validate_resource_name(prefix, "label prefix")
    if not name or len(name) > 63 or not LABEL_NAME.match(name):
        raise SeedValidationError(f"label key '{key}' is invalid", field="opt_in_label")


def validate_port(port: int) -> None:
    """Validate a TCP port number."""
    if not 1 <= port <= 65535:
        raise SeedValidationError(
            f"port {port} is out of range (1-65535)", field="port"
        )


def validate_http_path(path: str) -> None:
    """Validate the webhook path the API server will call."""
    if not path.startswith("/"):
        raise SeedValidationError(
            f"path '{path}' must start with '/'", field="webhook_path"
        )
    if any(char.isspace() for char in path) or "?" in path:
        raise SeedValidationError(
            f"path '{path}' must not contain whitespace or a query",
            field="webhook_path",
        )


def _expect_equal(field: str, expected: Any, actual: Any) -> None:
    if expected != actual:
        raise ConsistencyError(ERROR_MISMATCH.format(field, expected, actual), field)


def validate_graph(graph: ResourceGraph) -> None:
    """
    Check every cross-resource reference of a built graph.

    Args:
        graph: Fully built resource graph

    Raises:
        ConsistencyError: If two resources disagree on a shared value
    """
    identity = graph.identity
    issuer = graph.trust_chain.issuer
    cert_meta = graph.trust_chain.certificate.metadata
    cert_spec = graph.trust_chain.certificate.spec
    deployment = graph.workload.deployment
    service = graph.workload.service
    container = graph.workload.container
    pod_spec = deployment.spec.template.spec
    webhook = graph.admission.webhook
    service_ref = webhook.client_config.service

    # Namespaces
    namespace = graph.namespace.metadata.name
    _expect_equal("namespace", identity.namespace, namespace)
    _expect_equal("certificate.namespace", namespace, cert_meta.namespace)
    _expect_equal("deployment.namespace", namespace, deployment.metadata.namespace)
    _expect_equal("service.namespace", namespace, service.metadata.namespace)

    # Trust chain
    _expect_equal(
        "certificate.dnsNames", list(identity.dns_names), list(cert_spec.dns_names)
    )
    _expect_equal(
        "certificate.issuerRef.name", issuer.metadata.name, cert_spec.issuer_ref.name
    )
    _expect_equal("certificate.issuerRef.kind", issuer.kind, cert_spec.issuer_ref.kind)
    _expect_equal(
        "certificate.secretName", identity.secret_name, cert_spec.secret_name
    )

    # TLS secret mount
    volumes = {volume.name: volume for volume in pod_spec.volumes or []}
    mounts = container.volume_mounts or []
    if len(mounts) != 1:
        raise ConsistencyError(
            f"expected one TLS volume mount, found {len(mounts)}", "volumeMounts"
        )
    mount = mounts[0]
    if mount.name not in volumes or volumes[mount.name].secret is None:
        raise ConsistencyError(
            f"mount '{mount.name}' has no matching secret volume", "volumes"
        )
    _expect_equal(
        "volume.secret.secretName",
        cert_spec.secret_name,
        volumes[mount.name].secret.secret_name,
    )

    env = {var.name: var.value for var in container.env or []}
    for env_name in (ENV_TLS_CERT_FILE, ENV_TLS_KEY_FILE):
        if env_name not in env:
            raise ConsistencyError("environment variable is missing", env_name)
        _expect_equal(
            f"{env_name} directory", mount.mount_path, posixpath.dirname(env[env_name])
        )

    # Labels and selectors
    pod_labels = deployment.spec.template.metadata.labels
    _expect_equal(
        "deployment.selector.matchLabels",
        pod_labels,
        deployment.spec.selector.match_labels,
    )
    _expect_equal("service.selector", pod_labels, service.spec.selector)
    _expect_equal("pod labels", identity.labels, pod_labels)

    # Ports
    container_ports = container.ports or []
    if len(container_ports) != 1:
        raise ConsistencyError(
            f"expected one container port, found {len(container_ports)}", "ports"
        )
    container_port = container_ports[0].container_port
    service_port = graph.workload.service_port.port
    _expect_equal("container.containerPort", identity.port, container_port)
    _expect_equal("service.port", container_port, service_port)
    _expect_equal("webhook.clientConfig.service.port", service_port, service_ref.port)

    # Webhook routing and CA injection
    _expect_equal(
        "webhook.clientConfig.service.name", service.metadata.name, service_ref.name
    )
    _expect_equal(
        "webhook.clientConfig.service.namespace",
        service.metadata.namespace,
        service_ref.namespace,
    )
    annotations = graph.admission.webhook_configuration.metadata.annotations or {}
    _expect_equal(
        CA_INJECTION_ANNOTATION,
        f"{cert_meta.namespace}/{cert_meta.name}",
        annotations.get(CA_INJECTION_ANNOTATION),
    )
    if webhook.name not in cert_spec.dns_names:
        raise ConsistencyError(
            f"webhook name '{webhook.name}' is not a certificate DNS name",
            "webhook.name",
        )

    logger.debug(f"Validated cross-references of {identity.name} in {namespace}")
