"""OpenTelemetry and logging configuration.

Spans, metrics and log records are tagged with the restaurant they come from,
taken from the restaurant settings at setup time.
"""

import logging
import os

from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from pythonjsonlogger import jsonlogger

from restaurant_ordering.config.settings import RestaurantSettings, get_settings

logger = logging.getLogger(__name__)

SERVICE_NAME = "restaurant-ordering"
DEFAULT_OTLP_ENDPOINT = "http://localhost:4318"


def get_service_resource(settings: RestaurantSettings | None = None) -> Resource:
    """Create the OpenTelemetry resource identifying this restaurant.

    Args:
        settings: Restaurant settings; the shared instance when omitted

    Returns:
        Resource with service, environment and restaurant attributes
    """
    settings = settings or get_settings()

    return Resource.create(
        {
            "service.name": os.getenv("OTEL_SERVICE_NAME", SERVICE_NAME),
            "deployment.environment": os.getenv("ENVIRONMENT", "development"),
            "restaurant.name": settings.restaurant_name,
            "restaurant.currency": settings.currency,
        }
    )


def _otlp_endpoint() -> str:
    return os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", DEFAULT_OTLP_ENDPOINT)


def setup_tracing(resource: Resource) -> None:
    """Export order and payment spans over OTLP/HTTP."""
    endpoint = _otlp_endpoint()
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces")))
    trace.set_tracer_provider(provider)

    logger.info(f"Order tracing exported to {endpoint}")


def setup_metrics(resource: Resource) -> None:
    """Export order and payment counters over OTLP/HTTP once a minute."""
    endpoint = _otlp_endpoint()
    reader = PeriodicExportingMetricReader(
        OTLPMetricExporter(endpoint=f"{endpoint}/v1/metrics"), export_interval_millis=60000
    )
    metrics.set_meter_provider(MeterProvider(resource=resource, metric_readers=[reader]))

    logger.info(f"Order metrics exported to {endpoint}")


def setup_observability(
    enable_exporters: bool = True, settings: RestaurantSettings | None = None
) -> Resource:
    """Initialize OpenTelemetry tracing and metrics for a restaurant.

    Args:
        enable_exporters: Whether to enable OTLP exporters; always off under
            ENVIRONMENT=test
        settings: Restaurant settings; the shared instance when omitted

    Returns:
        Resource: The resource the providers were created with
    """
    if os.getenv("ENVIRONMENT", "development") == "test":
        enable_exporters = False

    resource = get_service_resource(settings)

    if enable_exporters:
        setup_tracing(resource)
        setup_metrics(resource)
    else:
        # Providers without exporters, spans and measurements stay in-process
        trace.set_tracer_provider(TracerProvider(resource=resource))
        metrics.set_meter_provider(MeterProvider(resource=resource))

    logger.info(f"Observability configured for {resource.attributes['restaurant.name']}")
    return resource


def configure_logging(log_level: str = "INFO", settings: RestaurantSettings | None = None) -> None:
    """Configure structured JSON logging.

    Every record carries the restaurant name and currency as static fields.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            LOG_LEVEL in the environment wins
        settings: Restaurant settings; the shared instance when omitted
    """
    settings = settings or get_settings()
    level_str = os.getenv("LOG_LEVEL", log_level).upper()
    level = getattr(logging, level_str, logging.INFO)

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s",
        timestamp=True,
        static_fields={
            "restaurant": settings.restaurant_name,
            "currency": settings.currency,
        },
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logger.info(f"Structured JSON logging configured at {level_str} level")
