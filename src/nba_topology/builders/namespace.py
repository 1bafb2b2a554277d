"""Namespace builder."""

from kubernetes import client

from nba_topology.constants import CORE_API_VERSION, KIND_NAMESPACE
from nba_topology.models.identity import ServiceIdentity


def build_namespace(identity: ServiceIdentity) -> client.V1Namespace:
    """Build the Namespace holding every namespaced resource."""
    return client.V1Namespace(
        api_version=CORE_API_VERSION,
        kind=KIND_NAMESPACE,
        metadata=client.V1ObjectMeta(name=identity.namespace),
    )
