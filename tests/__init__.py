"""
Tests package - test suite for the topology synthesizer.

Contains:
- unit/: Unit tests for identity resolution, builders, emission and the pipeline
"""
