"""Unit tests for environment driven settings."""

import pytest
from pydantic import ValidationError

from nba_topology.settings import Settings


class TestSettings:
    """Test cases for loading seed values."""

    def test_defaults(self, settings):
        assert settings.service_name == "network-bandwidth-annotator"
        assert settings.namespace == "nba"
        assert settings.secret_name == "tls-network-bandwidth-annotator"
        assert settings.port == 8443
        assert settings.issuer_name == "selfsigned-issuer"
        assert settings.webhook_path == "/mutate"
        assert settings.opt_in_label == "nba-enabled"
        assert settings.output_path == ""

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NBA_SERVICE_NAME", "demo")
        monkeypatch.setenv("NBA_NAMESPACE", "team-a")
        monkeypatch.setenv("NBA_SECRET_NAME", "tls-demo")
        monkeypatch.setenv("NBA_PORT", "9443")

        settings = Settings(_env_file=None)

        assert settings.service_name == "demo"
        assert settings.namespace == "team-a"
        assert settings.secret_name == "tls-demo"
        assert settings.port == 9443

    def test_invalid_port_type(self, monkeypatch):
        monkeypatch.setenv("NBA_PORT", "https")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_command_args(self, settings):
        assert settings.command_args == ["./network-bandwidth-annotator", "-v"]

    def test_settings_are_frozen(self, settings):
        with pytest.raises(ValidationError):
            settings.namespace = "other"
