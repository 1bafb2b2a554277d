"""
NBA Topology - deployment topology synthesizer for the network-bandwidth-annotator.

This package derives a complete, cross-referenced set of Kubernetes resources
for the annotator admission webhook from a handful of seed identity values:
- Namespace and self-signed cert-manager trust chain
- Single-replica Deployment and Service with TLS mounted from the issued secret
- MutatingWebhookConfiguration wired to the Service and the Certificate
"""

__version__ = "0.1.0"
