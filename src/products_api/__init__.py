"""
Products API service package.

This package follows the three-layer Lambda layout:

- handlers: API Gateway entry points, one per route plus a single-function router
- logic: product operations, request parsing and schema validation
- dal: DynamoDB access for the products table
- models: Pydantic models for products, request schema and error bodies
"""

__version__ = "1.0.0"
__description__ = "Product CRUD API on AWS Lambda and DynamoDB"

from products_api.models.product import Product
from products_api.models.input import ProductRequest
from products_api.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "Product",
    "ProductRequest",
    "logger",
    "tracer",
    "metrics",
]
