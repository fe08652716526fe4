"""
Observability helpers combining logging, metrics and tracing for a service.
"""

from .logging import get_logger, set_user_context
from .metrics import MetricsCollector
from .tracing import add_span_attributes, add_span_event


class ObservabilityManager:
    """Centralized observability manager for services.

    Request id context is owned by the ``BaseService`` middleware; this only
    attaches the authenticated caller.
    """

    def __init__(self, service_name: str, metrics: MetricsCollector):
        self.service_name = service_name
        self.metrics = metrics
        self.logger = get_logger(f"{service_name}.observability")

    def trace_request(self, user_id: str):
        """Attach the authenticated caller to logs and the current span."""
        set_user_context(user_id)
        add_span_attributes(user_id=user_id)

    def log_error(self, error_type: str, error_message: str, **kwargs):
        """Log an expected failure with full context."""
        self.logger.warning(
            "Request rejected",
            error_type=error_type,
            error_message=error_message,
            **kwargs
        )

        self.metrics.record_error(error_type)
        add_span_event("error", error_type=error_type, error_message=error_message)

    def log_business_event(self, event_type: str, **kwargs):
        """Log business event with full context."""
        self.logger.info(
            "Business event",
            event_type=event_type,
            **kwargs
        )

        self.metrics.record_business_event(event_type)
        add_span_event("business_event", event_type=event_type)


def get_observability_manager(service_name: str, metrics: MetricsCollector) -> ObservabilityManager:
    """Get an observability manager for a service."""
    return ObservabilityManager(service_name, metrics)
