"""
API Gateway response helpers shared by the products handlers.
"""

import functools
import json
from typing import Any, Callable, Dict, Optional

from aws_lambda_powertools.metrics import MetricUnit

from products_api.handlers.models.env_vars import get_handler_env_vars
from products_api.handlers.utils.errors import (
    ProductServiceError,
    UnhandledError,
    format_error_response,
    log_error_metrics,
)
from products_api.handlers.utils.observability import logger, metrics

CORS_ALLOW_HEADERS = "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token"
CORS_ALLOW_METHODS = "OPTIONS,POST,GET,PUT,DELETE"


def default_headers(request_id: Optional[str] = None) -> Dict[str, str]:
    """Headers carried by every products API response."""
    headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": get_handler_env_vars().CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
    }
    if request_id:
        headers["X-Request-ID"] = request_id
    return headers


def create_api_response(
    status_code: int,
    body: Any = None,
    request_id: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Create a standardized API Gateway proxy response.

    ``body`` is serialized to JSON unless it is already a string; ``None``
    produces an empty body (used for 204).
    """
    response_headers = default_headers(request_id)
    if headers:
        response_headers.update(headers)

    if body is None:
        serialized = ""
    elif isinstance(body, str):
        serialized = body
    else:
        serialized = json.dumps(body)

    return {
        "statusCode": status_code,
        "headers": response_headers,
        "body": serialized,
    }


def create_error_response(error: ProductServiceError, request_id: Optional[str] = None) -> Dict[str, Any]:
    """Translate a product service error into its API Gateway response."""
    return create_api_response(
        status_code=error.status_code,
        body=format_error_response(error, request_id=request_id),
        request_id=request_id,
    )


def handle_product_errors(func: Callable[[Dict[str, Any], Any], Dict[str, Any]]):
    """Decorator translating every failure raised by a Lambda handler into a response."""

    @functools.wraps(func)
    def wrapper(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
        request_id = getattr(context, "aws_request_id", None)
        try:
            return func(event, context)

        except ProductServiceError as e:
            log_error_metrics(e)
            return create_error_response(e, request_id=request_id)

        except Exception as e:
            logger.exception("Unexpected error in handler", extra={
                "error": str(e),
                "function_name": func.__name__,
            })
            metrics.add_metric(name="UnhandledError", unit=MetricUnit.Count, value=1)
            return create_error_response(UnhandledError("An unexpected error occurred"), request_id=request_id)

    return wrapper
