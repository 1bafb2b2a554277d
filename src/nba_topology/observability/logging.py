"""
Structured logging utilities for the topology synthesizer.

This module provides correlation ID tracking per synthesis run and
structured log formatting. Logs go to stderr; stdout is reserved for the
emitted manifest.
"""

import json
import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import UTC, datetime

# Context variable for tracking the current synthesis run
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


class CorrelationIDFilter(logging.Filter):
    """Logging filter that adds correlation ID to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Add correlation ID to the log record.

        Args:
            record: The log record to process

        Returns:
            True to allow the record to be processed
        """
        current_correlation_id = correlation_id.get()
        if not current_correlation_id:
            current_correlation_id = generate_correlation_id()
            correlation_id.set(current_correlation_id)

        record.correlation_id = current_correlation_id
        return True


class StructuredFormatter(logging.Formatter):
    """
    Structured JSON formatter for logs with correlation ID support.

    Formats log records as structured JSON for log aggregation in CI.
    """

    structured_fields = (
        "resource_type",
        "resource_name",
        "namespace",
        "operation",
        "duration",
        "error_type",
        "document_count",
    )

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as structured JSON.

        Args:
            record: The log record to format

        Returns:
            JSON-formatted log message
        """
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "correlation_id": getattr(record, "correlation_id", ""),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for field in self.structured_fields:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        return json.dumps(log_data)


def generate_correlation_id() -> str:
    """
    Generate a new correlation ID.

    Returns:
        Unique correlation ID string
    """
    return str(uuid.uuid4())[:8]


def set_correlation_id(corr_id: str) -> str:
    """
    Set the correlation ID for the current context.

    Args:
        corr_id: Correlation ID to set

    Returns:
        The correlation ID that was set
    """
    correlation_id.set(corr_id)
    return corr_id


def get_correlation_id() -> str:
    """Get the current correlation ID, or empty string if none set."""
    return correlation_id.get("")


def setup_structured_logging(
    log_level: str = "INFO",
    enable_json_formatting: bool = False,
    correlation_id_enabled: bool = True,
) -> None:
    """
    Set up structured logging for the synthesizer.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        enable_json_formatting: Whether to use JSON formatting
        correlation_id_enabled: Whether to enable correlation ID tracking
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)

    if enable_json_formatting:
        formatter = StructuredFormatter()
    elif correlation_id_enabled:
        formatter = logging.Formatter(
            "%(asctime)s - %(correlation_id)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    handler.setFormatter(formatter)

    if correlation_id_enabled:
        handler.addFilter(CorrelationIDFilter())

    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    logging.getLogger("kubernetes").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


class SynthesisLogger:
    """
    Logger for synthesis stages with structured logging support.

    Each stage of the pipeline reports start, success and failure with the
    resource it produces.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def log_stage_start(
        self,
        stage: str,
        resource_name: str,
        namespace: str,
    ) -> None:
        """
        Log the start of a synthesis stage.

        Args:
            stage: Pipeline stage (identity, trust_chain, workload, admission, emit)
            resource_name: Name of the resource being built
            namespace: Namespace of the resource
        """
        self.logger.debug(
            f"Starting {stage} for {resource_name}",
            extra={
                "resource_name": resource_name,
                "namespace": namespace,
                "operation": f"{stage}_start",
            },
        )

    def log_stage_success(
        self,
        stage: str,
        resource_type: str,
        resource_name: str,
        namespace: str,
        duration: float,
    ) -> None:
        """
        Log successful completion of a synthesis stage.

        Args:
            stage: Pipeline stage
            resource_type: Kind(s) of resource produced
            resource_name: Name of the resource
            namespace: Namespace of the resource
            duration: Stage duration in seconds
        """
        self.logger.info(
            f"Built {resource_type} {resource_name}",
            extra={
                "resource_type": resource_type,
                "resource_name": resource_name,
                "namespace": namespace,
                "operation": f"{stage}_success",
                "duration": duration,
            },
        )

    def log_stage_error(
        self,
        stage: str,
        resource_name: str,
        namespace: str,
        error: Exception,
    ) -> None:
        """
        Log a failed synthesis stage.

        Args:
            stage: Pipeline stage
            resource_name: Name of the resource
            namespace: Namespace of the resource
            error: The error that occurred
        """
        self.logger.error(
            f"Synthesis stage {stage} failed for {resource_name}: {error}",
            extra={
                "resource_name": resource_name,
                "namespace": namespace,
                "operation": f"{stage}_error",
                "error_type": type(error).__name__,
            },
        )
