"""
Error taxonomy for the products API.

Every expected failure is a ``ProductServiceError`` tagged with an
``ErrorKind``. The kind alone decides the HTTP status and the response body,
so translating an error into a response never depends on the concrete
exception class that carried it.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from aws_lambda_powertools.metrics import MetricUnit
from pydantic import BaseModel, Field

from products_api.handlers.utils.observability import logger, metrics, tracer
from products_api.models.output import (
    InternalServerErrorOutput,
    MalformedInputOutput,
    NotFoundErrorOutput,
    ValidationErrorOutput,
)


class ErrorKind(str, Enum):
    """Kinds of failure a products handler can report."""
    NOT_FOUND = "NOT_FOUND"
    VALIDATION = "VALIDATION"
    MALFORMED_INPUT = "MALFORMED_INPUT"
    UNHANDLED = "UNHANDLED"


HTTP_STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.MALFORMED_INPUT: 400,
    ErrorKind.UNHANDLED: 500,
}

METRIC_BY_KIND: Dict[ErrorKind, str] = {
    ErrorKind.NOT_FOUND: "ProductNotFound",
    ErrorKind.VALIDATION: "ValidationError",
    ErrorKind.MALFORMED_INPUT: "MalformedInput",
    ErrorKind.UNHANDLED: "UnhandledError",
}


class ErrorContext(BaseModel):
    """Context information attached to errors for logging."""

    request_id: str = Field(description="Unique request identifier")
    operation: str = Field(description="Operation being performed")
    resource_id: Optional[str] = Field(default=None, description="Product identifier")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ProductServiceError(Exception):
    """Base exception for every failure the handlers translate to a response."""

    kind: ErrorKind = ErrorKind.UNHANDLED

    def __init__(self, message: str, context: Optional[ErrorContext] = None):
        super().__init__(message)
        self.message = message
        self.context = context
        self.error_id = str(uuid.uuid4())

    @property
    def status_code(self) -> int:
        return get_http_status_code(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_id": self.error_id,
            "kind": self.kind.value,
            "status_code": self.status_code,
            "message": self.message,
            "context": self.context.model_dump(mode="json") if self.context else None,
        }


class ProductNotFoundError(ProductServiceError):
    """Raised when no product is stored under the requested identifier."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, product_id: str, context: Optional[ErrorContext] = None):
        super().__init__(f"Product with ID '{product_id}' not found", context=context)
        self.product_id = product_id


class ProductValidationError(ProductServiceError):
    """Raised when a request body fails validation; carries every violation."""

    kind = ErrorKind.VALIDATION

    def __init__(self, errors: List[str], context: Optional[ErrorContext] = None):
        super().__init__(f"Request validation failed with {len(errors)} error(s)", context=context)
        self.errors = errors


class MalformedInputError(ProductServiceError):
    """Raised when the request body cannot be parsed as JSON."""

    kind = ErrorKind.MALFORMED_INPUT

    def __init__(self, reason: str, context: Optional[ErrorContext] = None):
        super().__init__(f"malformed JSON: {reason}", context=context)
        self.reason = reason


class UnhandledError(ProductServiceError):
    """Wraps an unexpected exception so it is reported as a generic failure."""

    kind = ErrorKind.UNHANDLED


def create_error_context(
    request_id: str,
    operation: str,
    resource_id: Optional[str] = None,
) -> ErrorContext:
    """Create an error context for consistent error handling."""
    return ErrorContext(
        request_id=request_id,
        operation=operation,
        resource_id=resource_id,
    )


def get_http_status_code(error: ProductServiceError) -> int:
    """Get the HTTP status code for an error's kind."""
    return HTTP_STATUS_BY_KIND[error.kind]


def _not_found_body(error: ProductServiceError, request_id: Optional[str]) -> Dict[str, Any]:
    return NotFoundErrorOutput().model_dump()


def _validation_body(error: ProductServiceError, request_id: Optional[str]) -> Dict[str, Any]:
    return ValidationErrorOutput(errors=getattr(error, "errors", [error.message])).model_dump()


def _malformed_body(error: ProductServiceError, request_id: Optional[str]) -> Dict[str, Any]:
    return MalformedInputOutput(error=error.message).model_dump()


def _unhandled_body(error: ProductServiceError, request_id: Optional[str]) -> Dict[str, Any]:
    # Internal details stay in the logs
    return InternalServerErrorOutput(request_id=request_id).model_dump(exclude_none=True)


_BODY_BY_KIND: Dict[ErrorKind, Callable[[ProductServiceError, Optional[str]], Dict[str, Any]]] = {
    ErrorKind.NOT_FOUND: _not_found_body,
    ErrorKind.VALIDATION: _validation_body,
    ErrorKind.MALFORMED_INPUT: _malformed_body,
    ErrorKind.UNHANDLED: _unhandled_body,
}


def format_error_response(error: ProductServiceError, request_id: Optional[str] = None) -> Dict[str, Any]:
    """Format an error as the JSON body returned to the caller."""
    return _BODY_BY_KIND[error.kind](error, request_id)


@tracer.capture_method
def log_error_metrics(error: ProductServiceError) -> None:
    """Log error metrics for monitoring and alerting."""

    metrics.add_metric(name=METRIC_BY_KIND[error.kind], unit=MetricUnit.Count, value=1)

    tracer.put_annotation("error_kind", error.kind.value)
    tracer.put_metadata("error_details", error.to_dict())

    unhandled = error.kind is ErrorKind.UNHANDLED
    log = logger.error if unhandled else logger.warning
    log(
        "Product service error occurred",
        extra={
            "error_id": error.error_id,
            "error_kind": error.kind.value,
            "status_code": error.status_code,
            "error_message": error.message,
            "context": error.context.model_dump(mode="json") if error.context else None,
        },
        exc_info=error if unhandled else None,
    )
