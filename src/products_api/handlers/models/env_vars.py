"""
Environment variable models for type-safe configuration.

Every products handler validates its environment through this model before
touching the data store, so a misconfigured deployment fails on the first
invocation instead of on the first DynamoDB call.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class ProductsEnvVars(BaseModel):
    """Environment variables for the products handlers."""

    # DynamoDB table keyed by productID
    PRODUCTS_TABLE_NAME: Annotated[str, Field(
        default='ProductsTable',
        description='DynamoDB table name for product storage',
        min_length=1
    )] = 'ProductsTable'

    # Custom endpoint for DynamoDB Local / LocalStack
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        default=None,
        description='DynamoDB endpoint URL override'
    )] = None

    # Enforce the fixed name/description/price/available schema on writes
    VALIDATE_PRODUCT_SCHEMA: Annotated[str, Field(
        default='true',
        description='Validate product bodies against the product schema (true/false)',
        pattern=r'^(true|false)$'
    )] = 'true'

    ENVIRONMENT: Annotated[str, Field(
        default='dev',
        description='Deployment environment name',
        pattern=r'^(dev|test|staging|prod)$'
    )] = 'dev'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='products-api',
        description='Service name for AWS Powertools'
    )] = 'products-api'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        default='*',
        description='CORS allowed origins for API responses'
    )] = '*'

    @property
    def schema_validation_enabled(self) -> bool:
        """Check if product schema validation is enabled."""
        return self.VALIDATE_PRODUCT_SCHEMA.lower() == 'true'


def get_handler_env_vars() -> ProductsEnvVars:
    """
    Get typed environment variables for the products handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=ProductsEnvVars)
