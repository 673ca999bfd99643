"""OpenTelemetry tracing setup for the Ruleset Engine."""

from functools import wraps

from opentelemetry import trace


def telemetry_init(service_name, collector_endpoint=None, enable_tracing=True):
    """Install the process tracer provider.

    Spans go to the OTLP collector when an endpoint is given, to the console
    otherwise. With tracing disabled a no-op provider is installed so that
    ``traced`` operations stay cheap.
    """
    if not enable_tracing:
        trace.set_tracer_provider(trace.NoOpTracerProvider())
        return

    from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
    from opentelemetry.sdk.resources import SERVICE_NAME, Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

    resource = Resource.create(attributes={SERVICE_NAME: service_name})
    provider = TracerProvider(resource=resource)
    if collector_endpoint:
        exporter = OTLPSpanExporter(endpoint=collector_endpoint, insecure=True)
    else:
        exporter = ConsoleSpanExporter()
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)


def traced(span_name: str):
    """Run the decorated engine operation inside a span named ``span_name``.

    The wrapped function receives the active span as ``span`` keyword-only
    argument so it can attach result attributes.
    """
    tracer = trace.get_tracer("ruleset_engine")

    def decorator(func):
        @wraps(func)
        def wrapped(*args, **kwargs):
            with tracer.start_as_current_span(span_name) as span:
                return func(*args, span=span, **kwargs)
        return wrapped
    return decorator
