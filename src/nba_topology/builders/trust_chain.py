"""
Trust chain builder.

Produces the self-signed ClusterIssuer and the Certificate request whose
secret the workload mounts. Key, validity and usage policy is fixed: RSA
2048 in PKCS1 encoding, valid for 90 days and renewed 15 days before expiry.
"""

import logging

from nba_topology.constants import (
    CERT_DURATION,
    CERT_IS_CA,
    CERT_KEY_ALGORITHM,
    CERT_KEY_ENCODING,
    CERT_KEY_SIZE,
    CERT_RENEW_BEFORE,
    CERT_USAGES,
    DEFAULT_ISSUER_NAME,
    DEFAULT_ORGANIZATION,
)
from nba_topology.models.cert_manager import (
    Certificate,
    CertificatePrivateKey,
    CertificateSpec,
    CertificateSubject,
    ClusterIssuer,
    IssuerReference,
    ResourceMetadata,
)
from nba_topology.models.graph import TrustChain
from nba_topology.models.identity import ServiceIdentity
from nba_topology.utils.validation import validate_resource_name

logger = logging.getLogger(__name__)


def build_cluster_issuer(name: str = DEFAULT_ISSUER_NAME) -> ClusterIssuer:
    """Build the self-signed ClusterIssuer."""
    validate_resource_name(name, "issuer")
    return ClusterIssuer(metadata=ResourceMetadata(name=name))


def build_certificate(
    identity: ServiceIdentity,
    issuer: ClusterIssuer,
    organization: str = DEFAULT_ORGANIZATION,
) -> Certificate:
    """
    Build the Certificate request for the annotator Service.

    Args:
        identity: Resolved service identity
        issuer: Issuer that signs the certificate
        organization: Subject organization

    Returns:
        Certificate named after the service, issuing into identity.secret_name
    """
    return Certificate(
        metadata=ResourceMetadata(name=identity.name, namespace=identity.namespace),
        spec=CertificateSpec(
            secret_name=identity.secret_name,
            duration=CERT_DURATION,
            renew_before=CERT_RENEW_BEFORE,
            subject=CertificateSubject(
                organizations=(organization,) if organization else ()
            ),
            is_ca=CERT_IS_CA,
            private_key=CertificatePrivateKey(
                algorithm=CERT_KEY_ALGORITHM,
                encoding=CERT_KEY_ENCODING,
                size=CERT_KEY_SIZE,
            ),
            usages=CERT_USAGES,
            dns_names=identity.dns_names,
            issuer_ref=IssuerReference(
                name=issuer.metadata.name,
                kind=issuer.kind,
            ),
        ),
    )


def build_trust_chain(
    identity: ServiceIdentity,
    issuer_name: str = DEFAULT_ISSUER_NAME,
    organization: str = DEFAULT_ORGANIZATION,
) -> TrustChain:
    """
    Build the issuer and certificate pair.

    Args:
        identity: Resolved service identity
        issuer_name: Name of the self-signed ClusterIssuer
        organization: Subject organization of the certificate

    Returns:
        TrustChain exposing the secret name and CA injection reference
    """
    issuer = build_cluster_issuer(issuer_name)
    certificate = build_certificate(identity, issuer, organization)
    logger.debug(
        f"Certificate {certificate.metadata.name} issued by {issuer.metadata.name} "
        f"into secret {certificate.spec.secret_name}"
    )
    return TrustChain(issuer=issuer, certificate=certificate)
