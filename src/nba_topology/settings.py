"""Centralized synthesizer settings using pydantic-settings.

This module is the single source of truth for every seed value the topology
is derived from. Builders receive these values as arguments and never read
the environment themselves.
"""

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from nba_topology.constants import (
    DEFAULT_COMMAND,
    DEFAULT_IMAGE,
    DEFAULT_ISSUER_NAME,
    DEFAULT_NAMESPACE,
    DEFAULT_OPT_IN_LABEL,
    DEFAULT_ORGANIZATION,
    DEFAULT_PORT,
    DEFAULT_SECRET_NAME,
    DEFAULT_SERVICE_NAME,
    DEFAULT_WEBHOOK_PATH,
)
from nba_topology.errors import ConfigurationError


class Settings(BaseSettings):
    """Synthesizer configuration loaded from environment variables.

    Defaults reproduce the reference annotator topology. Override via the
    environment variables documented per field.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Seed identity
    service_name: str = Field(
        default=DEFAULT_SERVICE_NAME,
        description="Name shared by the Deployment, Service, Certificate and webhook",
        validation_alias="NBA_SERVICE_NAME",
    )
    namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        description="Namespace every namespaced resource is placed in",
        validation_alias="NBA_NAMESPACE",
    )
    secret_name: str = Field(
        default=DEFAULT_SECRET_NAME,
        description="TLS secret issued by cert-manager and mounted by the workload",
        validation_alias="NBA_SECRET_NAME",
    )
    port: int = Field(
        default=DEFAULT_PORT,
        description="HTTPS port of the container, Service and webhook client config",
        validation_alias="NBA_PORT",
    )

    # Trust chain
    issuer_name: str = Field(
        default=DEFAULT_ISSUER_NAME,
        description="Name of the self-signed ClusterIssuer",
        validation_alias="NBA_ISSUER_NAME",
    )
    certificate_organization: str = Field(
        default=DEFAULT_ORGANIZATION,
        description="Subject organization written into the certificate request",
        validation_alias="NBA_CERTIFICATE_ORGANIZATION",
    )

    # Workload
    image: str = Field(
        default=DEFAULT_IMAGE,
        description="Container image of the annotator",
        validation_alias="NBA_IMAGE",
    )
    command: str = Field(
        default=DEFAULT_COMMAND,
        description="Whitespace separated container command",
        validation_alias="NBA_COMMAND",
    )

    # Admission webhook
    webhook_path: str = Field(
        default=DEFAULT_WEBHOOK_PATH,
        description="HTTP path the API server calls on the annotator Service",
        validation_alias="NBA_WEBHOOK_PATH",
    )
    opt_in_label: str = Field(
        default=DEFAULT_OPT_IN_LABEL,
        description="Namespace label that opts a namespace into mutation",
        validation_alias="NBA_OPT_IN_LABEL",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_logs: bool = Field(
        default=False,
        validation_alias="JSON_LOGS",
        description="Enable JSON formatted logging for structured log aggregation",
    )
    correlation_ids: bool = Field(
        default=True,
        validation_alias="CORRELATION_IDS",
        description="Tag every log line of a synthesis run with a shared ID",
    )

    # Output
    output_path: str = Field(
        default="",
        validation_alias="NBA_OUTPUT_PATH",
        description="File to write the manifest to (empty = stdout)",
    )

    @property
    def command_args(self) -> list[str]:
        """Split the configured command into container argv.

        Returns:
            List of command tokens
        """
        return self.command.split()



def load_settings() -> Settings:
    """
    Load settings from the environment.

    Raises:
        ConfigurationError: If an environment value cannot be parsed
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid environment configuration: {e}",
            user_action="Fix the NBA_* environment variables",
            cause=e,
        ) from e
