"""
DynamoDB implementation of the products Data Access Layer.

Products are stored one item per record, keyed by ``productID``. boto3 only
accepts ``Decimal`` for numbers, so floats are converted on the way in and
``Decimal`` values are converted back to ``int``/``float`` on the way out.
"""

import functools
import time
from decimal import Decimal
from typing import Any, Dict, List, Optional

import boto3
from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import BotoCoreError, ClientError

from products_api.handlers.utils.errors import ErrorKind, ProductServiceError
from products_api.handlers.utils.observability import logger, metrics, tracer
from products_api.models.product import PRODUCT_ID_FIELD


class DataStoreError(ProductServiceError):
    """Raised when a DynamoDB call fails."""

    kind = ErrorKind.UNHANDLED

    def __init__(self, message: str, operation: str, table_name: str, error_code: str = "DAL_ERROR"):
        super().__init__(message)
        self.operation = operation
        self.table_name = table_name
        self.error_code = error_code


def to_dynamodb(value: Any) -> Any:
    """Convert a JSON-native value into one boto3 can serialize."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {key: to_dynamodb(inner) for key, inner in value.items()}
    if isinstance(value, list):
        return [to_dynamodb(inner) for inner in value]
    return value


def from_dynamodb(value: Any) -> Any:
    """Convert a boto3-deserialized value back into JSON-native types."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {key: from_dynamodb(inner) for key, inner in value.items()}
    if isinstance(value, (list, set)):
        return [from_dynamodb(inner) for inner in value]
    return value


def handle_dynamodb_errors(operation: str):
    """Decorator to translate DynamoDB failures into ``DataStoreError``."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(self: 'DynamoDBHandler', *args, **kwargs):
            operation_start = time.time()
            try:
                result = func(self, *args, **kwargs)

            except ClientError as e:
                error_code = e.response['Error']['Code']
                error_message = e.response['Error']['Message']

                metrics.add_metric(name=f"DynamoDB{operation}Error", unit=MetricUnit.Count, value=1)
                logger.error(f"DynamoDB {operation} error", extra={
                    "error_code": error_code,
                    "error_message": error_message,
                    "table_name": self.table_name,
                    "operation": operation,
                })
                raise DataStoreError(
                    message=f"DynamoDB error: {error_message}",
                    operation=operation,
                    table_name=self.table_name,
                    error_code=f"DYNAMODB_{error_code}",
                ) from e

            except BotoCoreError as e:
                metrics.add_metric(name=f"DynamoDB{operation}Error", unit=MetricUnit.Count, value=1)
                logger.error(f"DynamoDB connection error during {operation}", extra={
                    "error": str(e),
                    "table_name": self.table_name,
                })
                raise DataStoreError(
                    message=f"Database connection error: {e}",
                    operation=operation,
                    table_name=self.table_name,
                    error_code="DATABASE_CONNECTION_ERROR",
                ) from e

            operation_duration = (time.time() - operation_start) * 1000
            metrics.add_metric(name=f"DynamoDB{operation}Duration", unit=MetricUnit.Milliseconds, value=operation_duration)
            tracer.put_annotation("dynamodb_operation", operation)
            return result

        return wrapper
    return decorator


class DynamoDBHandler:
    """DynamoDB handler for the products table."""

    def __init__(
        self,
        table_name: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ):
        """
        Initialize DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            region_name: AWS region name
            endpoint_url: DynamoDB endpoint URL (for local testing)
        """
        self.table_name = table_name

        resource_kwargs = {}
        if region_name:
            resource_kwargs['region_name'] = region_name
        if endpoint_url:
            resource_kwargs['endpoint_url'] = endpoint_url

        self.dynamodb = boto3.resource('dynamodb', **resource_kwargs)
        self.table = self.dynamodb.Table(table_name)

        logger.info("DynamoDB handler initialized", extra={
            "table_name": table_name,
            "region_name": region_name,
            "endpoint_url": endpoint_url,
        })

    @tracer.capture_method
    @handle_dynamodb_errors("GetItem")
    def get_product(self, product_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a single product from DynamoDB.

        Args:
            product_id: Partition key of the product

        Returns:
            Product attributes or None if not found

        Raises:
            DataStoreError: If the DynamoDB operation fails
        """
        response = self.table.get_item(Key={PRODUCT_ID_FIELD: product_id})
        item = response.get('Item')
        if item is None:
            logger.debug("Product not found", extra={"product_id": product_id})
            return None
        return from_dynamodb(item)

    @tracer.capture_method
    @handle_dynamodb_errors("PutItem")
    def put_product(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Put a product into DynamoDB, overwriting any existing record.

        Args:
            item: Product attributes including ``productID``

        Returns:
            The stored attributes, unchanged
        """
        self.table.put_item(Item=to_dynamodb(item))

        logger.info("Product stored successfully", extra={
            "table_name": self.table_name,
            "product_id": item.get(PRODUCT_ID_FIELD),
        })
        return item

    @tracer.capture_method
    @handle_dynamodb_errors("DeleteItem")
    def delete_product(self, product_id: str) -> None:
        self.table.delete_item(Key={PRODUCT_ID_FIELD: product_id})
        logger.info("Product deleted successfully", extra={
            "table_name": self.table_name,
            "product_id": product_id,
        })

    @tracer.capture_method
    @handle_dynamodb_errors("Scan")
    def scan_products(self) -> List[Dict[str, Any]]:
        """
        Read the whole products table.

        DynamoDB returns at most 1 MB per scan call, so pages are followed
        through ``LastEvaluatedKey`` until the table is exhausted.

        Returns:
            Every stored product
        """
        items: List[Dict[str, Any]] = []
        scan_kwargs: Dict[str, Any] = {}
        pages = 0

        while True:
            response = self.table.scan(**scan_kwargs)
            items.extend(from_dynamodb(item) for item in response.get('Items', []))
            pages += 1

            last_evaluated_key = response.get('LastEvaluatedKey')
            if not last_evaluated_key:
                break
            scan_kwargs['ExclusiveStartKey'] = last_evaluated_key

        logger.info("Scan completed successfully", extra={
            "table_name": self.table_name,
            "items_count": len(items),
            "pages": pages,
        })
        return items
