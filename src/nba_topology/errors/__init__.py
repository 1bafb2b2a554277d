"""
Error handling module for the topology synthesizer.

This module provides the error hierarchy raised during synthesis. Every
error is fatal: synthesis stops and no manifest is emitted.
"""

from .synthesis_errors import (
    ConfigurationError,
    ConsistencyError,
    SchemaError,
    SeedValidationError,
    SynthesisError,
)

__all__ = [
    "SynthesisError",
    "SeedValidationError",
    "ConfigurationError",
    "SchemaError",
    "ConsistencyError",
]
