"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from usertasks.shared.telemetry.logging import get_logger, setup_logging
from usertasks.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_tracer,
    setup_from_settings,
)
from usertasks.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "setup_logging",
    "get_logger",
    "TelemetryConfig",
    "setup_from_settings",
    "get_tracer",
    "traced",
    "add_span_attributes",
]
