"""Logging and tracing bootstrap.

Request-handling code only uses the stdlib logging and OpenTelemetry API;
this module wires them to real outputs at process start.
"""

import logging

from opentelemetry import trace
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from balance_gateway.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    if settings.debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)


def configure_tracing(settings: Settings) -> trace.Tracer:
    """Install an SDK tracer provider and return the gateway tracer.

    Spans are exported over OTLP gRPC when OTEL_EXPORTER_OTLP_ENDPOINT is set,
    otherwise they are recorded and dropped.
    """
    provider = TracerProvider(
        resource=Resource.create({SERVICE_NAME: settings.otel_service_name})
    )

    if settings.otel_exporter_otlp_endpoint:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

        exporter = OTLPSpanExporter(endpoint=settings.otel_exporter_otlp_endpoint)
        provider.add_span_processor(BatchSpanProcessor(exporter))
        logger.info("Exporting traces to %s", settings.otel_exporter_otlp_endpoint)
    else:
        logger.info("OTEL_EXPORTER_OTLP_ENDPOINT not set - traces not exported")

    trace.set_tracer_provider(provider)
    return provider.get_tracer("balance_gateway")


def shutdown_tracing() -> None:
    """Flush pending spans."""
    provider = trace.get_tracer_provider()
    if isinstance(provider, TracerProvider):
        provider.shutdown()
