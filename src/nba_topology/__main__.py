"""
Entry point for the topology synthesizer.

Usage:
    python -m nba_topology > manifest.yaml
    NBA_OUTPUT_PATH=dist/nba.k8s.yaml nba-topology

Environment Variables:
    NBA_SERVICE_NAME, NBA_NAMESPACE, NBA_SECRET_NAME, NBA_PORT: seed identity
    NBA_OUTPUT_PATH: Write the manifest to this file instead of stdout
    LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    JSON_LOGS: Set to 'true' for JSON formatted logs on stderr
"""

import logging
import sys

from nba_topology.emitter import write_manifest
from nba_topology.errors import ConfigurationError, SynthesisError
from nba_topology.observability.logging import setup_structured_logging
from nba_topology.settings import load_settings
from nba_topology.synthesis import synthesize, synthesize_manifest


def main() -> None:
    """
    Synthesize the topology and emit the manifest.

    Exits with status 1 when synthesis fails; nothing is written in that case.
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        setup_structured_logging()
        logging.error(f"Synthesis failed: {e}")
        sys.exit(1)

    setup_structured_logging(
        log_level=settings.log_level,
        enable_json_formatting=settings.json_logs,
        correlation_id_enabled=settings.correlation_ids,
    )

    try:
        if settings.output_path:
            write_manifest(synthesize(settings), settings.output_path)
        else:
            sys.stdout.write(synthesize_manifest(settings))
    except SynthesisError as e:
        logging.error(f"Synthesis failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
