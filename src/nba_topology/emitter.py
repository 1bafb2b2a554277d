"""
Manifest emitter for the resource graph.

Serializes an already consistent graph into Kubernetes manifest documents
and a multi-document YAML stream. The emitter has no domain logic; it only
enforces emission order and the minimal resource schema.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from kubernetes import client

from nba_topology.constants import CLUSTER_SCOPED_KINDS, EMIT_ORDER
from nba_topology.errors import SchemaError
from nba_topology.models.graph import ResourceGraph
from nba_topology.utils.validation import validate_graph

logger = logging.getLogger(__name__)


def serialize_resource(resource: Any, api_client: client.ApiClient) -> dict[str, Any]:
    """
    Convert a resource object to its manifest dictionary.

    Args:
        resource: Kubernetes model or pydantic custom resource model
        api_client: Client used to serialize Kubernetes models

    Returns:
        Manifest dictionary with camelCase keys and no null values
    """
    if hasattr(resource, "to_manifest"):
        return resource.to_manifest()
    return api_client.sanitize_for_serialization(resource)


def check_document(document: dict[str, Any]) -> None:
    """
    Check the fields every emitted document must carry.

    Raises:
        SchemaError: If the document lacks apiVersion, kind or metadata
    """
    kind = document.get("kind")
    if not kind:
        raise SchemaError("document has no kind")
    if not document.get("apiVersion"):
        raise SchemaError("missing apiVersion", kind=kind)

    metadata = document.get("metadata") or {}
    if not metadata.get("name"):
        raise SchemaError("missing metadata.name", kind=kind)
    if kind not in CLUSTER_SCOPED_KINDS and not metadata.get("namespace"):
        raise SchemaError(
            f"namespaced resource '{metadata['name']}' has no metadata.namespace",
            kind=kind,
        )


def to_documents(graph: ResourceGraph) -> list[dict[str, Any]]:
    """
    Serialize the graph into ordered manifest documents.

    Args:
        graph: Fully built resource graph

    Returns:
        One document per resource, namespace first

    Raises:
        ConsistencyError: If the graph was changed after it was built
            and its cross-references no longer agree
        SchemaError: If any document violates the resource schema
    """
    validate_graph(graph)
    api_client = client.ApiClient()
    documents = [
        serialize_resource(resource, api_client) for resource in graph.resources()
    ]

    for document in documents:
        check_document(document)

    kinds = tuple(document["kind"] for document in documents)
    if kinds != EMIT_ORDER:
        raise SchemaError(f"unexpected resource order {kinds}, expected {EMIT_ORDER}")

    return documents


def render_manifest(graph: ResourceGraph) -> str:
    """
    Render the graph as a multi-document YAML stream.

    The output contains no timestamps or generated values, so identical
    graphs always render to identical bytes.
    """
    documents = to_documents(graph)
    manifest = yaml.safe_dump_all(
        documents, sort_keys=False, default_flow_style=False, explicit_start=True
    )
    logger.debug(
        f"Rendered {len(documents)} documents for {graph.identity.name}",
        extra={"document_count": len(documents), "operation": "render"},
    )
    return manifest


def write_manifest(graph: ResourceGraph, path: str | Path) -> Path:
    """
    Render the graph and write it to a file.

    Args:
        graph: Resource graph to emit
        path: Destination file, parent directories are created

    Returns:
        Path that was written
    """
    manifest = render_manifest(graph)
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(manifest, encoding="utf-8")
    logger.info(
        f"Wrote manifest to {target}",
        extra={"resource_name": graph.identity.name, "operation": "emit"},
    )
    return target
