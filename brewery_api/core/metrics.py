from prometheus_fastapi_instrumentator import Instrumentator


def instrument_app(app):
    """
    Instruments the FastAPI application with Prometheus metrics.
    Request counts and latencies per handler are exposed on /metrics.
    """
    Instrumentator(excluded_handlers=["/metrics"]).instrument(app).expose(app, include_in_schema=False)
