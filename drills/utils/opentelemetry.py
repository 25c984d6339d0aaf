"""\
OpenTelemetry
=============

Created on: Monday, October 19 2026
Last updated on: Monday, October 19 2026

This module provides `OpenTelemetry` integration for the exercise
runner. Every exercise run is wrapped in a span so a slow or failing
exercise can be spotted from a trace.
"""

from __future__ import annotations

import sys

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
    OTLPSpanExporter,
)
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.export import ConsoleSpanExporter
from opentelemetry.sdk.trace.export import SimpleSpanProcessor

from drills.core.config import Config
from drills.utils.logging import get_logger

__all__: tuple[str, ...] = ("get_tracer",)

logger = get_logger(__name__)


def get_tracer(
    config: Config | None = None,
    name: str | None = None,
) -> trace.Tracer:
    """Configure and return a tracer.

    The tracer comes from a dedicated `TracerProvider` rather than the
    global one, so building several runners in one process never trips
    over the "provider already set" guard of the API.

    With telemetry disabled the provider has no span processor and spans
    are dropped. In debug mode spans are printed to the console,
    otherwise they are exported over OTLP/gRPC, falling back to the
    console when the OTLP exporter cannot be built. Console spans go to
    standard error, next to the log records.

    :param config: Configuration object, a default `Config` is used when
        omitted.
    :param name: Override for the service name, defaults to the name
        from the configuration.
    :return: A configured `OpenTelemetry Tracer` instance.
    """
    if config is None:
        config = Config()
    service = name or config.telemetry.name or config.name
    resource = Resource.create(
        {
            "service.name": service,
            "service.version": config.version,
            "deployment.environment": (
                "development" if config.debug else "production"
            ),
        }
    )
    provider = TracerProvider(resource=resource)
    if config.telemetry.enabled:
        if config.debug:
            exporter = ConsoleSpanExporter(out=sys.stderr)
            processor = SimpleSpanProcessor(exporter)
        else:
            try:
                processor = BatchSpanProcessor(OTLPSpanExporter())
            except Exception as error:
                logger.warning(
                    f"OTLP exporter unavailable, using console: {error}"
                )
                exporter = ConsoleSpanExporter(out=sys.stderr)
                processor = SimpleSpanProcessor(exporter)
        provider.add_span_processor(processor)
    return provider.get_tracer(service, config.version)
