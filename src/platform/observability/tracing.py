"""
OpenTelemetry tracing for the marketplace API.

Spans are exported over OTLP/gRPC when OTEL_EXPORTER_OTLP_ENDPOINT is set and printed
when OTEL_CONSOLE_EXPORT is true; with neither, spans are created and dropped.
"""

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Span, Status, StatusCode
from sqlalchemy.ext.asyncio import AsyncEngine

from src.platform.config.core_setting import settings


def setup_tracing(service_name: str | None = None) -> TracerProvider:
    """Install the global tracer provider. Call once per process, at startup."""
    provider = TracerProvider(
        resource=Resource(attributes={SERVICE_NAME: service_name or settings.SERVICE_NAME})
    )
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT))
        )
    if settings.OTEL_CONSOLE_EXPORT:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    return provider


def instrument_app(app: FastAPI) -> None:
    FastAPIInstrumentor.instrument_app(app, excluded_urls='health')


def instrument_engine(engine: AsyncEngine) -> None:
    # The instrumentor hooks sync engine events; AsyncEngine wraps one
    SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)


def mark_failed(span: Span, exc: BaseException) -> None:
    span.record_exception(exc)
    span.set_status(Status(StatusCode.ERROR, f'{type(exc).__name__}: {exc}'))
