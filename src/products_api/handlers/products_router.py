"""
Products Router - serves every products route from one Lambda function.

This is the single-function alternative to the per-route handlers. Routing is
done by the Powertools REST resolver; parsing, validation, persistence and
error translation are shared with the per-route handlers.
"""

from typing import Any, Dict

from aws_lambda_env_modeler import init_environment_variables
from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from products_api.handlers.models.env_vars import ProductsEnvVars
from products_api.handlers.utils.errors import (
    ErrorContext,
    ProductServiceError,
    UnhandledError,
    create_error_context,
    log_error_metrics,
)
from products_api.handlers.utils.observability import logger, metrics, tracer
from products_api.handlers.utils.request import get_request_body
from products_api.handlers.utils.responses import create_api_response, create_error_response
from products_api.handlers.utils.rest_api_resolver import PRODUCT_PATH, PRODUCTS_PATH, PRODUCTS_TAG, app
from products_api.logic.product_service import get_product_service
from products_api.models.product import PRODUCT_ID_FIELD


def _request_id() -> str:
    return app.lambda_context.aws_request_id


def _error_context(operation: str, product_id: str | None = None) -> ErrorContext:
    return create_error_context(
        request_id=_request_id(),
        operation=operation,
        resource_id=product_id,
    )


def _to_response(api_response: Dict[str, Any]) -> Response:
    return Response(
        status_code=api_response["statusCode"],
        body=api_response["body"],
        headers=api_response["headers"],
    )


@app.exception_handler(ProductServiceError)
def handle_product_service_error(ex: ProductServiceError) -> Response:
    log_error_metrics(ex)
    return _to_response(create_error_response(ex, request_id=_request_id()))


@app.exception_handler(Exception)
def handle_unexpected_error(ex: Exception) -> Response:
    logger.exception("Unexpected error in route", extra={"error": str(ex)})
    metrics.add_metric(name="UnhandledError", unit=MetricUnit.Count, value=1)
    return _to_response(
        create_error_response(UnhandledError("An unexpected error occurred"), request_id=_request_id())
    )


@app.post(PRODUCTS_PATH, tags=[PRODUCTS_TAG.name])
@tracer.capture_method
def create_product() -> Response:
    context = _error_context("create_product")
    product = get_product_service().create_product(
        body=get_request_body(app.current_event, context=context),
        context=context,
    )
    return _to_response(create_api_response(
        status_code=201,
        body=product,
        request_id=_request_id(),
        headers={"Location": f"{PRODUCTS_PATH}/{product[PRODUCT_ID_FIELD]}"},
    ))


@app.get(PRODUCT_PATH, tags=[PRODUCTS_TAG.name])
@tracer.capture_method
def get_product(product_id: str) -> Response:
    product = get_product_service().get_product(product_id, context=_error_context("get_product", product_id))
    return _to_response(create_api_response(status_code=200, body=product, request_id=_request_id()))


@app.put(PRODUCT_PATH, tags=[PRODUCTS_TAG.name])
@tracer.capture_method
def update_product(product_id: str) -> Response:
    context = _error_context("update_product", product_id)
    product = get_product_service().update_product(
        product_id=product_id,
        body=get_request_body(app.current_event, context=context),
        context=context,
    )
    return _to_response(create_api_response(status_code=200, body=product, request_id=_request_id()))


@app.delete(PRODUCT_PATH, tags=[PRODUCTS_TAG.name])
@tracer.capture_method
def delete_product(product_id: str) -> Response:
    get_product_service().delete_product(product_id, context=_error_context("delete_product", product_id))
    return _to_response(create_api_response(status_code=204, request_id=_request_id()))


@app.get(PRODUCTS_PATH, tags=[PRODUCTS_TAG.name])
@tracer.capture_method
def list_products() -> Response:
    products = get_product_service().list_products(context=_error_context("list_products"))
    return _to_response(create_api_response(status_code=200, body=products, request_id=_request_id()))


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
@init_environment_variables(model=ProductsEnvVars)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function for the single-function deployment.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        API Gateway response
    """
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
    return app.resolve(event, context)
