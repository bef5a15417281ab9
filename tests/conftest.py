"""Test configuration."""

import os

# Tests never send telemetry
os.environ.setdefault("OBSERVABILITY__SEND_TO_LOGFIRE", "false")
os.environ.setdefault("ENVIRONMENT", "test")
