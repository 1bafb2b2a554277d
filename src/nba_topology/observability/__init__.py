"""Observability helpers for the topology synthesizer."""

from .logging import SynthesisLogger, setup_structured_logging

__all__ = ["SynthesisLogger", "setup_structured_logging"]
