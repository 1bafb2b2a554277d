"""
Admission registration builder.

Registers the annotator as a mutating webhook for pod create and update in
namespaces that opt in via label. Routing is read from the built Service and
the CA bundle is injected by cert-manager from the trust chain's
Certificate. The webhook fails open (Ignore) after a 5 second timeout so an
unavailable annotator never blocks pod scheduling.
"""

import logging

from kubernetes import client

from nba_topology.constants import (
    ADMISSION_API_VERSION,
    CA_INJECTION_ANNOTATION,
    KIND_MUTATING_WEBHOOK,
    OPT_IN_LABEL_VALUE,
    WEBHOOK_ADMISSION_REVIEW_VERSIONS,
    WEBHOOK_API_GROUPS,
    WEBHOOK_API_VERSIONS,
    WEBHOOK_FAILURE_POLICY,
    WEBHOOK_OPERATIONS,
    WEBHOOK_RESOURCES,
    WEBHOOK_SCOPE,
    WEBHOOK_SIDE_EFFECTS,
    WEBHOOK_TIMEOUT_SECONDS,
)
from nba_topology.models.graph import AdmissionRegistration, TrustChain, Workload
from nba_topology.models.identity import ServiceIdentity

logger = logging.getLogger(__name__)


def build_admission_registration(
    identity: ServiceIdentity,
    trust_chain: TrustChain,
    workload: Workload,
) -> AdmissionRegistration:
    """
    Build the MutatingWebhookConfiguration for the annotator.

    Args:
        identity: Resolved service identity
        trust_chain: Trust chain whose Certificate supplies the CA bundle
        workload: Workload whose Service receives admission reviews

    Returns:
        AdmissionRegistration holding the webhook configuration
    """
    service = workload.service
    webhook = client.V1MutatingWebhook(
        name=identity.webhook_name,
        client_config=client.AdmissionregistrationV1WebhookClientConfig(
            service=client.AdmissionregistrationV1ServiceReference(
                name=service.metadata.name,
                namespace=service.metadata.namespace,
                path=identity.webhook_path,
                port=workload.service_port.port,
            )
        ),
        namespace_selector=client.V1LabelSelector(
            match_labels={identity.opt_in_label: OPT_IN_LABEL_VALUE}
        ),
        rules=[
            client.V1RuleWithOperations(
                api_groups=list(WEBHOOK_API_GROUPS),
                api_versions=list(WEBHOOK_API_VERSIONS),
                operations=list(WEBHOOK_OPERATIONS),
                resources=list(WEBHOOK_RESOURCES),
                scope=WEBHOOK_SCOPE,
            )
        ],
        failure_policy=WEBHOOK_FAILURE_POLICY,
        admission_review_versions=list(WEBHOOK_ADMISSION_REVIEW_VERSIONS),
        side_effects=WEBHOOK_SIDE_EFFECTS,
        timeout_seconds=WEBHOOK_TIMEOUT_SECONDS,
    )

    webhook_configuration = client.V1MutatingWebhookConfiguration(
        api_version=ADMISSION_API_VERSION,
        kind=KIND_MUTATING_WEBHOOK,
        metadata=client.V1ObjectMeta(
            name=identity.name,
            namespace=identity.namespace,
            annotations={CA_INJECTION_ANNOTATION: trust_chain.ca_injection_ref},
        ),
        webhooks=[webhook],
    )

    logger.debug(
        f"Webhook {webhook.name} routes to {service.metadata.name}:"
        f"{workload.service_port.port}{identity.webhook_path} "
        f"with CA from {trust_chain.ca_injection_ref}"
    )
    return AdmissionRegistration(webhook_configuration=webhook_configuration)
