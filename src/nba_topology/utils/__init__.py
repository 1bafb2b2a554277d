"""
Utils package - helper modules for the topology synthesizer.

Contains helper modules for:
- Seed value validation
- Cross-resource consistency checking
"""

from nba_topology.utils.validation import (
    validate_graph,
    validate_resource_name,
)

__all__ = [
    "validate_graph",
    "validate_resource_name",
]
