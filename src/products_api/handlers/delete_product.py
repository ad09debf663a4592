"""
Delete Product handler - DELETE /products/{id}.
"""

from typing import Any, Dict

from aws_lambda_env_modeler import init_environment_variables
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext

from products_api.handlers.models.env_vars import ProductsEnvVars
from products_api.handlers.utils.errors import create_error_context
from products_api.handlers.utils.observability import logger, metrics, tracer
from products_api.handlers.utils.request import get_product_id
from products_api.handlers.utils.responses import create_api_response, handle_product_errors
from products_api.logic.product_service import get_product_service


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
@init_environment_variables(model=ProductsEnvVars)
@handle_product_errors
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    product_id = get_product_id(APIGatewayProxyEvent(event))
    logger.info("Delete product request received", extra={"product_id": product_id})

    error_context = create_error_context(
        request_id=context.aws_request_id,
        operation="delete_product",
        resource_id=product_id,
    )

    get_product_service().delete_product(product_id, context=error_context)

    return create_api_response(
        status_code=204,
        request_id=context.aws_request_id,
    )
