"""Structured logger for observability."""

import logging
from typing import Any, Optional

_logger = logging.getLogger("car_catalog")
_logger.setLevel(logging.INFO)

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_request(
    request_id: str,
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event for an API request.

    Args:
        request_id: Request identifier (UUID string)
        component: Component name (e.g., 'cars', 'matches')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "request_id": request_id,
        "component": component,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    _logger.log(level, " | ".join(log_parts))


def log_car_operation(
    request_id: str,
    operation: str,
    status_code: int,
    car_id: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Log the outcome of a car listing operation.

    Args:
        request_id: Request identifier
        operation: Operation name (e.g., 'create', 'delete')
        status_code: HTTP status returned to the client
        car_id: Listing identifier, when the operation targets one
        **kwargs: Additional fields
    """
    fields: dict[str, Any] = {"operation": operation, "status_code": status_code}
    if car_id is not None:
        fields["car_id"] = car_id
    fields.update(kwargs)

    level = logging.WARNING if status_code >= 400 else logging.INFO
    log_request(request_id=request_id, component="cars", level=level, **fields)


logger = _logger
