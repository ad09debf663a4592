"""
Business Logic Layer Module.

Coordinates request parsing, schema validation and the data access layer for
every product operation. Handlers never talk to DynamoDB directly.
"""

from products_api.logic.product_service import (
    ProductService,
    format_validation_errors,
    get_product_service,
    parse_request_body,
)

__all__ = [
    "ProductService",
    "format_validation_errors",
    "get_product_service",
    "parse_request_body",
]
