"""
Ruleset Engine configuration constants.

Reads from config.env (via python-dotenv) with fallback defaults.
Existing environment variables take precedence over config.env values.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).parent.parent / "config.env")

# Server constants
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "30079"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# OpenTelemetry constants
OTEL_SERVICE_NAME = os.environ.get("OTEL_SERVICE_NAME", "ruleset-engine")
OTEL_COLLECTOR_ENDPOINT = os.environ.get("OTEL_COLLECTOR_ENDPOINT", "")
OTEL_ENABLE_TRACING = os.environ.get("OTEL_ENABLE_TRACING", "true").lower() == "true"

# Ruleset constants
RULESET_NAME_MAX_LENGTH = int(os.environ.get("RULESET_NAME_MAX_LENGTH", "100"))
DEFAULT_MATCH_TYPE = os.environ.get("DEFAULT_MATCH_TYPE", "exact").lower()
