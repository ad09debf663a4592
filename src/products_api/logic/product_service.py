"""
Business Logic Layer for product management.

Each operation is a short sequence of store calls: existence checks always
run before the write or delete they guard, and nothing is retried.
"""

import json
import math
from typing import Any, Dict, List, Optional

from aws_lambda_powertools.metrics import MetricUnit
from pydantic import ValidationError

from products_api.dal import DalHandler, get_dal_handler
from products_api.handlers.models.env_vars import get_handler_env_vars
from products_api.handlers.utils.errors import (
    ErrorContext,
    MalformedInputError,
    ProductNotFoundError,
    ProductValidationError,
)
from products_api.handlers.utils.observability import logger, metrics, tracer
from products_api.models.input import ProductRequest
from products_api.models.product import Product


# DynamoDB numbers: 38 significant digits, magnitude between 1E-130 and 1E126
MAX_NUMBER_DIGITS = 38
MIN_NUMBER_MAGNITUDE = 1e-130
MAX_NUMBER_MAGNITUDE = 1e126


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON value")


def _parse_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number {literal} is out of range")
    if value and not MIN_NUMBER_MAGNITUDE <= abs(value) < MAX_NUMBER_MAGNITUDE:
        raise ValueError(f"number {literal} cannot be stored")
    return value


def _parse_int(literal: str) -> int:
    if len(literal.lstrip("-")) > MAX_NUMBER_DIGITS:
        raise ValueError(f"number {literal} has more than {MAX_NUMBER_DIGITS} digits")
    return int(literal)


def parse_request_body(body: Optional[str], context: Optional[ErrorContext] = None) -> Dict[str, Any]:
    """
    Parse a request body into product attributes.

    Args:
        body: Raw request body
        context: Error context for tracing

    Returns:
        The decoded JSON object

    Raises:
        MalformedInputError: If the body is empty or not valid JSON
        ProductValidationError: If the body is JSON but not an object
    """
    if body is None or not body.strip():
        raise MalformedInputError("request body is empty", context=context)

    try:
        parsed = json.loads(
            body,
            parse_constant=_reject_constant,
            parse_float=_parse_float,
            parse_int=_parse_int,
        )
    except ValueError as e:
        raise MalformedInputError(str(e), context=context) from e

    if not isinstance(parsed, dict):
        raise ProductValidationError(["body: Input should be a JSON object"], context=context)
    return parsed


def format_validation_errors(exc: ValidationError) -> List[str]:
    """Flatten pydantic errors into ``"<field>: <message>"`` strings."""
    messages = []
    for error in exc.errors():
        location = '.'.join(str(part) for part in error['loc']) or 'body'
        messages.append(f"{location}: {error['msg']}")
    return messages


class ProductService:
    """Business logic service for product management."""

    def __init__(self, dal: DalHandler, validate_schema: bool = True):
        """
        Initialize product service.

        Args:
            dal: Data access layer for the products table
            validate_schema: Enforce ``ProductRequest`` on create and update
        """
        self.dal = dal
        self.validate_schema = validate_schema

        logger.info("Product service initialized", extra={
            "validate_schema": validate_schema,
        })

    @tracer.capture_method
    def _parse_attributes(self, body: Optional[str], context: Optional[ErrorContext]) -> Dict[str, Any]:
        attributes = parse_request_body(body, context=context)

        if self.validate_schema:
            try:
                ProductRequest.model_validate(attributes)
            except ValidationError as e:
                raise ProductValidationError(format_validation_errors(e), context=context) from e

        return attributes

    @tracer.capture_method
    def _fetch_existing(self, product_id: Optional[str], context: Optional[ErrorContext]) -> Dict[str, Any]:
        if not product_id:
            raise ProductNotFoundError(product_id or "", context=context)

        item = self.dal.get_product(product_id)
        if item is None:
            raise ProductNotFoundError(product_id, context=context)
        return item

    @tracer.capture_method
    def create_product(self, body: Optional[str], context: Optional[ErrorContext] = None) -> Dict[str, Any]:
        """
        Create a product from a request body.

        Args:
            body: Raw JSON request body
            context: Error context for tracing

        Returns:
            The stored product, including its generated ``productID``
        """
        attributes = self._parse_attributes(body, context)
        product = Product.create(attributes)

        stored = self.dal.put_product(product.to_item())

        metrics.add_metric(name="ProductCreated", unit=MetricUnit.Count, value=1)
        tracer.put_annotation("product_id", product.productID)
        logger.info("Product created", extra={"product_id": product.productID})
        return stored

    @tracer.capture_method
    def get_product(self, product_id: Optional[str], context: Optional[ErrorContext] = None) -> Dict[str, Any]:
        """Fetch a product, raising ``ProductNotFoundError`` when absent."""
        item = self._fetch_existing(product_id, context)
        metrics.add_metric(name="ProductRetrieved", unit=MetricUnit.Count, value=1)
        return item

    @tracer.capture_method
    def update_product(
        self,
        product_id: Optional[str],
        body: Optional[str],
        context: Optional[ErrorContext] = None,
    ) -> Dict[str, Any]:
        """
        Overwrite an existing product.

        Existence is checked before the body is parsed, so an unknown
        identifier yields not-found even when the body is invalid. The path
        identifier always wins over any ``productID`` in the body.

        Args:
            product_id: Identifier from the request path
            body: Raw JSON request body
            context: Error context for tracing

        Returns:
            The stored product
        """
        self._fetch_existing(product_id, context)
        attributes = self._parse_attributes(body, context)
        product = Product.with_id(attributes, product_id)

        stored = self.dal.put_product(product.to_item())

        metrics.add_metric(name="ProductUpdated", unit=MetricUnit.Count, value=1)
        logger.info("Product updated", extra={"product_id": product_id})
        return stored

    @tracer.capture_method
    def delete_product(self, product_id: Optional[str], context: Optional[ErrorContext] = None) -> None:
        self._fetch_existing(product_id, context)
        self.dal.delete_product(product_id)

        metrics.add_metric(name="ProductDeleted", unit=MetricUnit.Count, value=1)
        logger.info("Product deleted", extra={"product_id": product_id})

    @tracer.capture_method
    def list_products(self, context: Optional[ErrorContext] = None) -> List[Dict[str, Any]]:
        """Return every stored product, in store order."""
        items = self.dal.scan_products()

        metrics.add_metric(name="ProductsListed", unit=MetricUnit.Count, value=1)
        logger.info("Products listed", extra={"count": len(items)})
        return items


# Shared across warm invocations of the same execution environment
_product_service: Optional[ProductService] = None


def get_product_service() -> ProductService:
    """Get or create the product service configured from the environment."""
    global _product_service

    if _product_service is None:
        env_vars = get_handler_env_vars()
        _product_service = ProductService(
            dal=get_dal_handler(
                table_name=env_vars.PRODUCTS_TABLE_NAME,
                endpoint_url=env_vars.DYNAMODB_ENDPOINT,
            ),
            validate_schema=env_vars.schema_validation_enabled,
        )

    return _product_service
