"""
Data models for the topology synthesizer.

This package contains the resolved service identity, pydantic models for the
cert-manager custom resources and the frozen stage outputs that make up
the resource graph.
"""

from .cert_manager import (
    Certificate,
    CertificatePrivateKey,
    CertificateSpec,
    CertificateSubject,
    ClusterIssuer,
    ClusterIssuerSpec,
    IssuerReference,
    ResourceMetadata,
)
from .graph import AdmissionRegistration, ResourceGraph, TrustChain, Workload
from .identity import ServiceIdentity

__all__ = [
    "ServiceIdentity",
    "ClusterIssuer",
    "ClusterIssuerSpec",
    "Certificate",
    "CertificateSpec",
    "CertificateSubject",
    "CertificatePrivateKey",
    "IssuerReference",
    "ResourceMetadata",
    "TrustChain",
    "Workload",
    "AdmissionRegistration",
    "ResourceGraph",
]
