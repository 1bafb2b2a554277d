"""
Synthesis pipeline for the annotator topology.

Runs identity resolution and the three builders in a single linear pass,
then checks the finished graph for cross-reference consistency. Each stage
receives the outputs of earlier stages as arguments; nothing is mutated
once built.
"""

import time
from collections.abc import Callable
from typing import TypeVar

from nba_topology.builders import (
    build_admission_registration,
    build_namespace,
    build_trust_chain,
    build_workload,
    resolve_identity,
)
from nba_topology.emitter import render_manifest
from nba_topology.errors import SchemaError, SynthesisError
from nba_topology.models.graph import ResourceGraph
from nba_topology.observability.logging import (
    SynthesisLogger,
    generate_correlation_id,
    set_correlation_id,
)
from nba_topology.settings import Settings, load_settings
from nba_topology.utils.validation import validate_graph

logger = SynthesisLogger(__name__)

T = TypeVar("T")


def _run_stage(
    stage: str,
    resource_type: str,
    resource_name: str,
    namespace: str,
    build: Callable[[], T],
) -> T:
    """Run one builder, logging its outcome and normalizing schema failures."""
    logger.log_stage_start(stage, resource_name, namespace)
    start_time = time.monotonic()
    try:
        result = build()
    except SynthesisError as e:
        logger.log_stage_error(stage, resource_name, namespace, e)
        raise
    except ValueError as e:
        # Raised by kubernetes client-side validation and pydantic models
        error = SchemaError(str(e), kind=resource_type, cause=e)
        logger.log_stage_error(stage, resource_name, namespace, error)
        raise error from e

    logger.log_stage_success(
        stage, resource_type, resource_name, namespace, time.monotonic() - start_time
    )
    return result


def synthesize(settings: Settings | None = None) -> ResourceGraph:
    """
    Build the complete, validated resource graph.

    Args:
        settings: Seed configuration (default: loaded from the environment)

    Returns:
        Resource graph whose cross-references have been checked

    Raises:
        SynthesisError: If a seed is malformed or a resource is inconsistent
    """
    if settings is None:
        settings = load_settings()

    set_correlation_id(generate_correlation_id())

    identity = _run_stage(
        "identity",
        "ServiceIdentity",
        settings.service_name,
        settings.namespace,
        lambda: resolve_identity(settings),
    )
    name, namespace = identity.name, identity.namespace

    namespace_resource = _run_stage(
        "namespace",
        "Namespace",
        namespace,
        namespace,
        lambda: build_namespace(identity),
    )
    trust_chain = _run_stage(
        "trust_chain",
        "ClusterIssuer/Certificate",
        name,
        namespace,
        lambda: build_trust_chain(
            identity,
            issuer_name=settings.issuer_name,
            organization=settings.certificate_organization,
        ),
    )
    workload = _run_stage(
        "workload",
        "Deployment/Service",
        name,
        namespace,
        lambda: build_workload(
            identity, trust_chain, settings.image, settings.command_args
        ),
    )
    admission = _run_stage(
        "admission",
        "MutatingWebhookConfiguration",
        name,
        namespace,
        lambda: build_admission_registration(identity, trust_chain, workload),
    )

    graph = ResourceGraph(
        identity=identity,
        namespace=namespace_resource,
        trust_chain=trust_chain,
        workload=workload,
        admission=admission,
    )
    _run_stage(
        "consistency", "ResourceGraph", name, namespace, lambda: validate_graph(graph)
    )
    return graph


def synthesize_manifest(settings: Settings | None = None) -> str:
    """Synthesize the graph and render it as a YAML manifest stream."""
    graph = synthesize(settings)
    return _run_stage(
        "emit",
        "Manifest",
        graph.identity.name,
        graph.identity.namespace,
        lambda: render_manifest(graph),
    )
