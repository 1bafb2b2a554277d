"""Unit tests for the synthesis error hierarchy."""

from nba_topology.errors import (
    ConfigurationError,
    ConsistencyError,
    SchemaError,
    SeedValidationError,
    SynthesisError,
)


class TestSynthesisErrors:
    """Test cases for error categories and messages."""

    def test_hierarchy(self):
        for error in (
            SeedValidationError("bad"),
            ConfigurationError("bad"),
            SchemaError("bad"),
            ConsistencyError("bad"),
        ):
            assert isinstance(error, SynthesisError)

    def test_user_action_is_appended(self):
        error = SynthesisError("boom", category="seed", user_action="Fix it")
        assert str(error) == "boom\nAction required: Fix it"

    def test_seed_validation_error_field(self):
        error = SeedValidationError("out of range", field="port")

        assert error.category == "seed"
        assert error.field == "port"
        assert str(error).startswith("Validation error in field 'port': out of range")

    def test_schema_error_kind(self):
        cause = ValueError("missing name")
        error = SchemaError("missing name", kind="Deployment", cause=cause)

        assert error.category == "schema"
        assert error.kind == "Deployment"
        assert error.cause is cause
        assert str(error).startswith("Deployment: missing name")

    def test_consistency_error_field(self):
        error = ConsistencyError("mismatch", field="service.port")

        assert error.category == "consistency"
        assert str(error).startswith("Inconsistent reference 'service.port'")
