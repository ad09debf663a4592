"""
Request helpers for API Gateway proxy events.
"""

from typing import Optional

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from products_api.handlers.utils.errors import ErrorContext, MalformedInputError

PRODUCT_ID_PATH_PARAMETER = 'id'


def get_request_body(event: APIGatewayProxyEvent, context: Optional[ErrorContext] = None) -> Optional[str]:
    """Return the request body as text, decoding base64 bodies first."""
    if event.body is None:
        return None

    try:
        return event.decoded_body
    except ValueError as e:
        # binascii.Error and UnicodeDecodeError both subclass ValueError
        raise MalformedInputError(f"request body could not be decoded: {e}", context=context) from e


def get_product_id(event: APIGatewayProxyEvent) -> Optional[str]:
    """Return the ``{id}`` path parameter, if present."""
    path_parameters = event.path_parameters or {}
    return path_parameters.get(PRODUCT_ID_PATH_PARAMETER)
