"""
OpenTelemetry Instrumentation for FastAPI

Creates spans for inbound requests and MongoDB operations.
Trace export is left to the OpenTelemetry SDK / collector configured in the environment.
"""

from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.pymongo import PymongoInstrumentor

from app.core.config import config
from app.core.logger import logger


def instrument_app(app) -> bool:
    """
    Instrument FastAPI application with OpenTelemetry for automatic span creation.

    Args:
        app: FastAPI application instance

    Returns:
        True when instrumentation was applied
    """
    if not config.enable_tracing:
        logger.debug("OpenTelemetry instrumentation disabled")
        return False

    try:
        FastAPIInstrumentor.instrument_app(app)
        logger.info("FastAPI instrumented with OpenTelemetry")

        # Motor drives PyMongo underneath
        PymongoInstrumentor().instrument()
        logger.info("PyMongo instrumented with OpenTelemetry")

        return True
    except Exception as e:
        logger.error("Failed to instrument application", error=e)
        return False
