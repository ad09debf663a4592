"""
Pytest configuration and shared fixtures for the products API.

This module provides common test fixtures and configuration used across
unit, integration, and end-to-end tests.
"""

import json
import os

# Must be set before products_api creates its Powertools instances
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "PRODUCTS_TABLE_NAME": "test-products-table",
    "VALIDATE_PRODUCT_SCHEMA": "true",
    "ENVIRONMENT": "test",
    "POWERTOOLS_SERVICE_NAME": "test-products-api",
    "POWERTOOLS_METRICS_NAMESPACE": "TestProductsApi",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",
})

from typing import Any, Callable, Dict, Optional
from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws

from products_api.handlers.utils.observability import metrics
from products_api.logic import product_service as product_service_module

TABLE_NAME = "test-products-table"


# DynamoDB fixtures
@pytest.fixture
def dynamodb_table():
    """Create a mock DynamoDB products table for testing."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        table = dynamodb.create_table(
            TableName=TABLE_NAME,
            KeySchema=[
                {"AttributeName": "productID", "KeyType": "HASH"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "productID", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )

        table.wait_until_exists()
        yield table


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Drop the cached product service and any unflushed metrics between tests."""
    monkeypatch.setattr(product_service_module, "_product_service", None)
    yield
    metrics.clear_metrics()


# Sample data fixtures
@pytest.fixture
def sample_product_data() -> Dict[str, Any]:
    """A product body that satisfies the product schema."""
    return {
        "name": "Pen",
        "description": "Blue ink",
        "price": 1.5,
        "available": True,
    }


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Factory building API Gateway REST proxy events."""

    def _build(
        method: str,
        path: str,
        body: Any = None,
        product_id: Optional[str] = None,
        is_base64_encoded: bool = False,
    ) -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)

        resource = "/products/{id}" if product_id is not None else "/products"
        return {
            "resource": resource,
            "path": path,
            "httpMethod": method,
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
            },
            "multiValueHeaders": {
                "Content-Type": ["application/json"],
                "User-Agent": ["test-agent/1.0"],
            },
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "pathParameters": {"id": product_id} if product_id is not None else None,
            "stageVariables": None,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "resourcePath": resource,
                "httpMethod": method,
                "path": path,
                "protocol": "HTTP/1.1",
                "requestTimeEpoch": 1704110400000,
                "identity": {
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
            },
            "body": body,
            "isBase64Encoded": is_base64_encoded,
        }

    return _build


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-products-function"
    context.function_version = "$LATEST"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-products-function"
    context.memory_limit_in_mb = 256
    context.aws_request_id = "test-lambda-request-id"
    context.log_group_name = "/aws/lambda/test-products-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


# Error simulation fixtures
@pytest.fixture
def mock_dynamodb_error():
    """Build botocore ClientErrors for testing error handling."""
    from botocore.exceptions import ClientError

    def create_error(error_code: str, message: str = "Test error"):
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                }
            },
            operation_name="TestOperation"
        )

    return create_error


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)
