"""
Resolved identity of the annotator service.

Every name, namespace, port and secret reference that appears in more than
one generated resource is read from a ServiceIdentity, so those references
cannot drift apart.
"""

import posixpath

from pydantic import BaseModel, Field

from nba_topology.constants import (
    APP_LABEL_KEY,
    CLUSTER_DOMAIN,
    LISTEN_HOST,
    TLS_CERT_KEY,
    TLS_KEY_KEY,
    TLS_MOUNT_PATH,
)


class ServiceIdentity(BaseModel):
    """Closed set of identifiers derived from the seed values."""

    model_config = {"frozen": True}

    name: str = Field(..., description="Service name shared by all resources")
    namespace: str = Field(..., description="Namespace of all namespaced resources")
    secret_name: str = Field(..., description="TLS secret name")
    port: int = Field(..., description="HTTPS listening port", ge=1, le=65535)
    webhook_path: str = Field(..., description="Mutation endpoint path")
    opt_in_label: str = Field(..., description="Namespace opt-in label key")

    @property
    def labels(self) -> dict[str, str]:
        """Pod labels and Service selector. A new dict on every access."""
        return {APP_LABEL_KEY: self.name}

    @property
    def service_host(self) -> str:
        return f"{self.name}.{self.namespace}.svc"

    @property
    def dns_names(self) -> tuple[str, str]:
        """Short and fully-qualified cluster-local DNS names of the Service."""
        return (self.service_host, f"{self.service_host}.{CLUSTER_DOMAIN}")

    @property
    def listen_address(self) -> str:
        return f"{LISTEN_HOST}:{self.port}"

    @property
    def webhook_name(self) -> str:
        return self.service_host

    @property
    def cert_mount_path(self) -> str:
        return TLS_MOUNT_PATH

    @property
    def cert_file(self) -> str:
        return posixpath.join(self.cert_mount_path, TLS_CERT_KEY)

    @property
    def key_file(self) -> str:
        return posixpath.join(self.cert_mount_path, TLS_KEY_KEY)
