"""
Create Product handler - POST /products.

Parses the JSON body, validates it against the product schema when enabled,
stores it under a freshly generated ``productID`` and returns 201.
"""

from typing import Any, Dict

from aws_lambda_env_modeler import init_environment_variables
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext

from products_api.handlers.models.env_vars import ProductsEnvVars
from products_api.handlers.utils.errors import create_error_context
from products_api.handlers.utils.observability import logger, metrics, tracer
from products_api.handlers.utils.request import get_request_body
from products_api.handlers.utils.responses import create_api_response, handle_product_errors
from products_api.logic.product_service import get_product_service
from products_api.models.product import PRODUCT_ID_FIELD


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
@init_environment_variables(model=ProductsEnvVars)
@handle_product_errors
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda handler for product creation.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        API Gateway response with the created product
    """
    logger.info("Create product request received")

    api_event = APIGatewayProxyEvent(event)
    error_context = create_error_context(
        request_id=context.aws_request_id,
        operation="create_product",
    )

    product = get_product_service().create_product(
        body=get_request_body(api_event, context=error_context),
        context=error_context,
    )

    return create_api_response(
        status_code=201,
        body=product,
        request_id=context.aws_request_id,
        headers={"Location": f"/products/{product[PRODUCT_ID_FIELD]}"},
    )
