"""
Builders for each stage of the topology.

Every builder is a pure function: it takes the resolved identity and the
outputs of earlier stages and returns a new frozen stage value.
"""

from .admission import build_admission_registration
from .identity import resolve_identity
from .namespace import build_namespace
from .trust_chain import build_trust_chain
from .workload import build_workload

__all__ = [
    "resolve_identity",
    "build_namespace",
    "build_trust_chain",
    "build_workload",
    "build_admission_registration",
]
