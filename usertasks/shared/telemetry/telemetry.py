"""OpenTelemetry tracing for processes that embed the bridge client.

Nothing here runs on import. Applications (and scripts/check_connection.py)
opt in with setup_from_settings(); otherwise spans go to whatever provider
the host process installed.
"""

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from usertasks.core.config import Settings

logger = logging.getLogger(__name__)


def _build_exporter(exporter_type: str, otlp_endpoint: str | None) -> SpanExporter | None:
    if exporter_type == "otlp" and otlp_endpoint:
        return OTLPSpanExporter(
            endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
        )
    if exporter_type == "none":
        return None
    return ConsoleSpanExporter()


class TelemetryConfig:
    """Tracer provider for bridge calls, with httpx and logging instrumentation.

    Attributes:
        tracer_provider: The installed provider, or None while disabled.
    """

    def __init__(
        self,
        service_name: str,
        service_version: str,
        enabled: bool = True,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "TelemetryConfig":
        return cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=settings.telemetry_enabled,
            environment=settings.telemetry_environment,
        )

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Install a TracerProvider and instrument outbound httpx calls and logs.

        Args:
            exporter_type: "console", "otlp", or "none" (spans are sampled
                but not exported).
            otlp_endpoint: OTLP gRPC endpoint (e.g. http://localhost:4317).
            sample_rate: Sampling rate 0.0-1.0.

        Returns:
            The provider, or None when telemetry is disabled.
        """
        if not self.enabled:
            logger.debug("Telemetry disabled")
            return None

        provider = TracerProvider(
            resource=Resource(
                attributes={
                    SERVICE_NAME: self.service_name,
                    SERVICE_VERSION: self.service_version,
                    "deployment.environment": self.environment,
                }
            ),
            sampler=TraceIdRatioBased(sample_rate),
        )
        exporter = _build_exporter(exporter_type, otlp_endpoint)
        if exporter is not None:
            provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(provider)
        HTTPXClientInstrumentor().instrument(tracer_provider=provider)
        LoggingInstrumentor().instrument(tracer_provider=provider, set_logging_format=True)
        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s, version=%s, exporter=%s",
            self.service_name,
            self.service_version,
            exporter_type,
        )
        return provider

    def shutdown(self) -> None:
        """Flush remaining spans and stop the provider; instrumentation is removed."""
        if self.tracer_provider is None:
            return
        HTTPXClientInstrumentor().uninstrument()
        LoggingInstrumentor().uninstrument()
        self.tracer_provider.shutdown()
        self.tracer_provider = None
        logger.info("Telemetry shutdown complete")


def setup_from_settings(settings: Settings) -> TelemetryConfig:
    """Build and initialize telemetry from settings; the caller owns shutdown()."""
    telemetry = TelemetryConfig.from_settings(settings)
    telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    return telemetry


def get_tracer(name: str) -> trace.Tracer:
    """Return a tracer for creating custom spans (e.g. get_tracer(__name__))."""
    return trace.get_tracer(name)
