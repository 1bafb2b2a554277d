"""Shared pytest fixtures for topology synthesis tests."""

import logging
import os

import pytest

from nba_topology.builders import (
    build_admission_registration,
    build_trust_chain,
    build_workload,
    resolve_identity,
)
from nba_topology.settings import Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep NBA_* variables of the calling shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("NBA_") or key in {"LOG_LEVEL", "JSON_LOGS"}:
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings():
    """Default seed settings, ignoring any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def make_settings():
    """Build settings from field-name overrides, ignoring any .env file."""

    def factory(**overrides):
        aliased = {
            Settings.model_fields[name].validation_alias: value
            for name, value in overrides.items()
        }
        return Settings(_env_file=None, **aliased)

    return factory


@pytest.fixture
def identity(settings):
    return resolve_identity(settings)


@pytest.fixture
def trust_chain(identity):
    return build_trust_chain(identity)


@pytest.fixture
def workload(identity, trust_chain, settings):
    return build_workload(identity, trust_chain, settings.image, settings.command_args)


@pytest.fixture
def admission(identity, trust_chain, workload):
    return build_admission_registration(identity, trust_chain, workload)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_structured_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
