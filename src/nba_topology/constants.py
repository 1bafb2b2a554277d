"""
Constants used throughout the topology synthesizer.

This module defines the fixed policy values of the generated topology:
- API versions and kinds of every emitted resource
- cert-manager key, validity and usage policy
- TLS mount contract shared by the container env and its volume
- Admission webhook registration policy
"""

# API versions and kinds
CORE_API_VERSION = "v1"
APPS_API_VERSION = "apps/v1"
ADMISSION_API_VERSION = "admissionregistration.k8s.io/v1"
CERT_MANAGER_GROUP = "cert-manager.io"
CERT_MANAGER_API_VERSION = f"{CERT_MANAGER_GROUP}/v1"

KIND_NAMESPACE = "Namespace"
KIND_CLUSTER_ISSUER = "ClusterIssuer"
KIND_CERTIFICATE = "Certificate"
KIND_DEPLOYMENT = "Deployment"
KIND_SERVICE = "Service"
KIND_MUTATING_WEBHOOK = "MutatingWebhookConfiguration"

# Emission order: namespace first, then namespaced resources in dependency order
EMIT_ORDER = (
    KIND_NAMESPACE,
    KIND_CLUSTER_ISSUER,
    KIND_CERTIFICATE,
    KIND_DEPLOYMENT,
    KIND_SERVICE,
    KIND_MUTATING_WEBHOOK,
)
CLUSTER_SCOPED_KINDS = frozenset({KIND_NAMESPACE, KIND_CLUSTER_ISSUER})

# Default seed values
DEFAULT_SERVICE_NAME = "network-bandwidth-annotator"
DEFAULT_NAMESPACE = "nba"
DEFAULT_SECRET_NAME = "tls-network-bandwidth-annotator"
DEFAULT_PORT = 8443
DEFAULT_ISSUER_NAME = "selfsigned-issuer"
DEFAULT_ORGANIZATION = "Thomas Kosiewski"
DEFAULT_IMAGE = "default-registry:61940/networkbandwidthannotator:0.1.0"
DEFAULT_COMMAND = "./network-bandwidth-annotator -v"
DEFAULT_WEBHOOK_PATH = "/mutate"
DEFAULT_OPT_IN_LABEL = "nba-enabled"

# Identity derivation
APP_LABEL_KEY = "app"
CLUSTER_DOMAIN = "cluster.local"
LISTEN_HOST = "0.0.0.0"
PORT_NAME = "https"

# Certificate policy
CERT_DURATION = "2160h"  # 90 days
CERT_RENEW_BEFORE = "360h"  # 15 days
CERT_KEY_ALGORITHM = "RSA"
CERT_KEY_ENCODING = "PKCS1"
CERT_KEY_SIZE = 2048
CERT_USAGES = ("server auth", "client auth")
CERT_IS_CA = False

# TLS mount contract
TLS_VOLUME_NAME = "tls-certs"
TLS_MOUNT_PATH = "/certs"
TLS_CERT_KEY = "tls.crt"
TLS_KEY_KEY = "tls.key"
ENV_ADDR = "ADDR"
ENV_TLS_CERT_FILE = "TLS_CERT_FILE"
ENV_TLS_KEY_FILE = "TLS_KEY_FILE"

# Workload policy
DEFAULT_REPLICAS = 1

# Admission webhook policy
CA_INJECTION_ANNOTATION = f"{CERT_MANAGER_GROUP}/inject-ca-from"
WEBHOOK_FAILURE_POLICY = "Ignore"
WEBHOOK_SIDE_EFFECTS = "None"
WEBHOOK_TIMEOUT_SECONDS = 5
WEBHOOK_ADMISSION_REVIEW_VERSIONS = ("v1", "v1beta1")
WEBHOOK_OPERATIONS = ("CREATE", "UPDATE")
WEBHOOK_API_GROUPS = ("",)
WEBHOOK_API_VERSIONS = ("v1",)
WEBHOOK_RESOURCES = ("pods",)
WEBHOOK_SCOPE = "Namespaced"
OPT_IN_LABEL_VALUE = "true"

# Error message templates
ERROR_INVALID_NAME = (
    "{} '{}' is invalid. Must contain only lowercase letters, numbers, "
    "and hyphens, and must start and end with an alphanumeric character"
)
ERROR_NAME_TOO_LONG = "{} '{}' is too long (max {} characters)"
ERROR_MISMATCH = "{} mismatch: expected {!r}, got {!r}"
