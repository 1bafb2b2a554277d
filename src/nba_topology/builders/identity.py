"""
Identity resolution for the annotator topology.

Turns the seed settings into the ServiceIdentity every builder reads its
shared names, ports and paths from.
"""

import logging

from nba_topology.models.identity import ServiceIdentity
from nba_topology.settings import Settings
from nba_topology.utils.validation import (
    validate_dns_label,
    validate_http_path,
    validate_label_key,
    validate_port,
    validate_resource_name,
)

logger = logging.getLogger(__name__)


def resolve_identity(settings: Settings) -> ServiceIdentity:
    """
    Derive the service identity from seed settings.

    Args:
        settings: Seed configuration

    Returns:
        Frozen identity shared by all builders

    Raises:
        SeedValidationError: If any seed value is malformed
    """
    validate_dns_label(settings.service_name, "service", rfc1035=True)
    validate_dns_label(settings.namespace, "namespace")
    validate_resource_name(settings.secret_name, "secret")
    validate_port(settings.port)
    validate_http_path(settings.webhook_path)
    validate_label_key(settings.opt_in_label)

    identity = ServiceIdentity(
        name=settings.service_name,
        namespace=settings.namespace,
        secret_name=settings.secret_name,
        port=settings.port,
        webhook_path=settings.webhook_path,
        opt_in_label=settings.opt_in_label,
    )
    logger.debug(
        f"Resolved identity {identity.name} in {identity.namespace} "
        f"(dns names: {', '.join(identity.dns_names)})"
    )
    return identity
