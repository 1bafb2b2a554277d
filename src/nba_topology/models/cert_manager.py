"""
Pydantic models for the cert-manager resources of the topology.

These models describe the self-signed ClusterIssuer and the Certificate
request. Field names follow Python conventions and serialize to the
camelCase names of the cert-manager.io/v1 schema.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

from nba_topology.constants import (
    CERT_MANAGER_API_VERSION,
    CERT_MANAGER_GROUP,
    KIND_CERTIFICATE,
    KIND_CLUSTER_ISSUER,
)

FROZEN = {"populate_by_name": True, "frozen": True}


class ResourceMetadata(BaseModel):
    """Subset of ObjectMeta used by the custom resources."""

    model_config = FROZEN

    name: str = Field(..., min_length=1, description="Resource name")
    namespace: str | None = Field(
        None, description="Namespace (None if cluster scoped)"
    )


class SelfSignedIssuer(BaseModel):
    """Empty marker block selecting the self-signed issuer type."""

    model_config = FROZEN


class ClusterIssuerSpec(BaseModel):
    model_config = FROZEN

    self_signed: SelfSignedIssuer = Field(
        default_factory=SelfSignedIssuer, alias="selfSigned"
    )


class ClusterIssuer(BaseModel):
    """Cluster-wide self-signed trust root."""

    model_config = FROZEN

    api_version: Literal["cert-manager.io/v1"] = Field(
        CERT_MANAGER_API_VERSION, alias="apiVersion"
    )
    kind: Literal["ClusterIssuer"] = KIND_CLUSTER_ISSUER
    metadata: ResourceMetadata
    spec: ClusterIssuerSpec = Field(default_factory=ClusterIssuerSpec)

    def to_manifest(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class IssuerReference(BaseModel):
    """Reference from a Certificate to the issuer that signs it."""

    model_config = FROZEN

    name: str = Field(..., min_length=1)
    kind: Literal["Issuer", "ClusterIssuer"]
    group: str = CERT_MANAGER_GROUP


class CertificateSubject(BaseModel):
    model_config = FROZEN

    organizations: tuple[str, ...] = ()


class CertificatePrivateKey(BaseModel):
    """Key generation policy for the issued certificate."""

    model_config = FROZEN

    algorithm: Literal["RSA", "ECDSA", "Ed25519"]
    encoding: Literal["PKCS1", "PKCS8"]
    size: int = Field(..., gt=0)


class CertificateSpec(BaseModel):
    """Spec of a cert-manager Certificate."""

    model_config = FROZEN

    secret_name: str = Field(..., min_length=1, alias="secretName")
    duration: str
    renew_before: str = Field(..., alias="renewBefore")
    subject: CertificateSubject = Field(default_factory=CertificateSubject)
    is_ca: bool = Field(False, alias="isCA")
    private_key: CertificatePrivateKey = Field(..., alias="privateKey")
    usages: tuple[str, ...]
    dns_names: tuple[str, ...] = Field(..., min_length=1, alias="dnsNames")
    issuer_ref: IssuerReference = Field(..., alias="issuerRef")


class Certificate(BaseModel):
    """Certificate request consumed by the cert-manager controller."""

    model_config = FROZEN

    api_version: Literal["cert-manager.io/v1"] = Field(
        CERT_MANAGER_API_VERSION, alias="apiVersion"
    )
    kind: Literal["Certificate"] = KIND_CERTIFICATE
    metadata: ResourceMetadata
    spec: CertificateSpec

    def to_manifest(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
