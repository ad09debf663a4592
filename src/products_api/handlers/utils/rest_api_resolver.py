"""
REST API resolver for the single-function deployment of the products API.

This module provides a configured API Gateway REST resolver with OpenAPI
documentation support.
"""

from aws_lambda_powertools.event_handler import APIGatewayRestResolver
from aws_lambda_powertools.event_handler.openapi.models import Tag

# API path constants
PRODUCTS_PATH = '/products'
PRODUCT_PATH = '/products/<product_id>'

# OpenAPI tags for documentation
PRODUCTS_TAG = Tag(name='Products', description='Product CRUD operations')

app = APIGatewayRestResolver(debug=False)

app.enable_swagger(
    path='/swagger',
    title='Products API',
    version='1.0.0',
    description='CRUD API for products stored in DynamoDB',
    tags=[PRODUCTS_TAG],
)
