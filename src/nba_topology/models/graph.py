"""
Outputs of each synthesis stage.

Each builder returns one of these values and later builders take them as
arguments, so the data flows in one direction and shared values are read
from a single place. The containers are frozen but the Kubernetes models
they hold are not, so the emitter re-checks the graph before rendering.
"""

from dataclasses import dataclass

from kubernetes import client

from nba_topology.models.cert_manager import Certificate, ClusterIssuer
from nba_topology.models.identity import ServiceIdentity


@dataclass(frozen=True)
class TrustChain:
    """Self-signed issuer and the certificate request it signs."""

    issuer: ClusterIssuer
    certificate: Certificate

    @property
    def secret_name(self) -> str:
        return self.certificate.spec.secret_name

    @property
    def certificate_name(self) -> str:
        return self.certificate.metadata.name

    @property
    def ca_injection_ref(self) -> str:
        """Value of the cert-manager CA injection annotation."""
        return f"{self.certificate.metadata.namespace}/{self.certificate_name}"


@dataclass(frozen=True)
class Workload:
    """Annotator Deployment and the Service in front of it."""

    deployment: client.V1Deployment
    service: client.V1Service

    @property
    def container(self) -> client.V1Container:
        return self.deployment.spec.template.spec.containers[0]

    @property
    def service_port(self) -> client.V1ServicePort:
        return self.service.spec.ports[0]


@dataclass(frozen=True)
class AdmissionRegistration:
    """Mutating webhook registration of the annotator."""

    webhook_configuration: client.V1MutatingWebhookConfiguration

    @property
    def webhook(self) -> client.V1MutatingWebhook:
        return self.webhook_configuration.webhooks[0]


@dataclass(frozen=True)
class ResourceGraph:
    """Fully wired resource set, ready for emission."""

    identity: ServiceIdentity
    namespace: client.V1Namespace
    trust_chain: TrustChain
    workload: Workload
    admission: AdmissionRegistration

    def resources(self) -> tuple:
        """All resources in emission order."""
        return (
            self.namespace,
            self.trust_chain.issuer,
            self.trust_chain.certificate,
            self.workload.deployment,
            self.workload.service,
            self.admission.webhook_configuration,
        )
