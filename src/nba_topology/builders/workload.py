"""
Workload builder for the annotator.

Builds the single-replica Deployment and the Service in front of it. The
container terminates TLS itself: certificate and key paths are passed via
environment and point into the volume mounted from the trust chain's
secret. Probes, resource limits and rollout strategy are left to cluster
defaults.
"""

import logging

from kubernetes import client

from nba_topology.constants import (
    APPS_API_VERSION,
    CORE_API_VERSION,
    DEFAULT_REPLICAS,
    ENV_ADDR,
    ENV_TLS_CERT_FILE,
    ENV_TLS_KEY_FILE,
    KIND_DEPLOYMENT,
    KIND_SERVICE,
    PORT_NAME,
    TLS_VOLUME_NAME,
)
from nba_topology.errors import ConfigurationError
from nba_topology.models.graph import TrustChain, Workload
from nba_topology.models.identity import ServiceIdentity

logger = logging.getLogger(__name__)


def build_deployment(
    identity: ServiceIdentity,
    trust_chain: TrustChain,
    image: str,
    command: list[str],
) -> client.V1Deployment:
    """
    Build the annotator Deployment.

    Args:
        identity: Resolved service identity
        trust_chain: Trust chain providing the TLS secret
        image: Container image
        command: Container command

    Returns:
        Deployment manifest object
    """
    if not image or image != image.strip():
        raise ConfigurationError(
            f"container image {image!r} is empty or has surrounding whitespace",
            user_action="Set NBA_IMAGE to an image reference",
        )
    if not command:
        raise ConfigurationError(
            "container command cannot be empty", user_action="Set NBA_COMMAND"
        )

    container = client.V1Container(
        name=identity.name,
        image=image,
        command=list(command),
        ports=[client.V1ContainerPort(container_port=identity.port, name=PORT_NAME)],
        env=[
            client.V1EnvVar(name=ENV_ADDR, value=identity.listen_address),
            client.V1EnvVar(name=ENV_TLS_CERT_FILE, value=identity.cert_file),
            client.V1EnvVar(name=ENV_TLS_KEY_FILE, value=identity.key_file),
        ],
        volume_mounts=[
            client.V1VolumeMount(
                name=TLS_VOLUME_NAME,
                mount_path=identity.cert_mount_path,
                read_only=True,
            )
        ],
    )

    pod_template = client.V1PodTemplateSpec(
        metadata=client.V1ObjectMeta(labels=identity.labels),
        spec=client.V1PodSpec(
            containers=[container],
            volumes=[
                client.V1Volume(
                    name=TLS_VOLUME_NAME,
                    secret=client.V1SecretVolumeSource(
                        secret_name=trust_chain.secret_name
                    ),
                )
            ],
        ),
    )

    return client.V1Deployment(
        api_version=APPS_API_VERSION,
        kind=KIND_DEPLOYMENT,
        metadata=client.V1ObjectMeta(
            name=identity.name,
            namespace=identity.namespace,
        ),
        spec=client.V1DeploymentSpec(
            replicas=DEFAULT_REPLICAS,
            selector=client.V1LabelSelector(match_labels=identity.labels),
            template=pod_template,
        ),
    )


def build_service(identity: ServiceIdentity) -> client.V1Service:
    """Build the Service selecting the annotator pods on the HTTPS port."""
    return client.V1Service(
        api_version=CORE_API_VERSION,
        kind=KIND_SERVICE,
        metadata=client.V1ObjectMeta(
            name=identity.name,
            namespace=identity.namespace,
        ),
        spec=client.V1ServiceSpec(
            selector=identity.labels,
            ports=[client.V1ServicePort(port=identity.port, name=PORT_NAME)],
        ),
    )


def build_workload(
    identity: ServiceIdentity,
    trust_chain: TrustChain,
    image: str,
    command: list[str],
) -> Workload:
    """
    Build the Deployment and Service pair.

    Args:
        identity: Resolved service identity
        trust_chain: Trust chain providing the TLS secret
        image: Container image
        command: Container command

    Returns:
        Workload holding both resources
    """
    deployment = build_deployment(identity, trust_chain, image, command)
    service = build_service(identity)
    logger.debug(
        f"Workload {identity.name} mounts secret {trust_chain.secret_name} "
        f"at {identity.cert_mount_path} and listens on {identity.listen_address}"
    )
    return Workload(deployment=deployment, service=service)
