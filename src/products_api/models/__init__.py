"""
Product models: the stored entity, request schema and error response bodies.
"""

from .input import ProductRequest
from .output import (
    InternalServerErrorOutput,
    MalformedInputOutput,
    NotFoundErrorOutput,
    ValidationErrorOutput,
)
from .product import PRODUCT_ID_FIELD, Product

__all__ = [
    # Input models
    "ProductRequest",

    # Output models
    "InternalServerErrorOutput",
    "MalformedInputOutput",
    "NotFoundErrorOutput",
    "ValidationErrorOutput",

    # Domain models
    "PRODUCT_ID_FIELD",
    "Product",
]
