"""
Unit tests for error translation and API response helpers.
"""

import json
from unittest.mock import Mock

import pytest

from products_api.dal.dynamodb_handler import DataStoreError
from products_api.handlers.utils.errors import (
    HTTP_STATUS_BY_KIND,
    ErrorKind,
    MalformedInputError,
    ProductNotFoundError,
    ProductValidationError,
    UnhandledError,
    create_error_context,
    format_error_response,
    get_http_status_code,
)
from products_api.handlers.utils.responses import (
    create_api_response,
    create_error_response,
    handle_product_errors,
)


class TestErrorKinds:
    """Test cases for the error kind to status mapping."""

    def test_every_kind_has_a_status(self):
        assert set(HTTP_STATUS_BY_KIND) == set(ErrorKind)

    @pytest.mark.parametrize("error, status", [
        (ProductNotFoundError("missing"), 404),
        (ProductValidationError(["name: Field required"]), 400),
        (MalformedInputError("Expecting value"), 400),
        (UnhandledError("boom"), 500),
        (DataStoreError("down", operation="GetItem", table_name="t"), 500),
    ])
    def test_status_codes(self, error, status):
        assert get_http_status_code(error) == status
        assert error.status_code == status

    def test_error_context_is_serializable(self):
        context = create_error_context(request_id="req-1", operation="get_product", resource_id="p-1")
        error = ProductNotFoundError("p-1", context=context)

        details = error.to_dict()

        assert details["kind"] == "NOT_FOUND"
        assert details["context"]["resource_id"] == "p-1"
        json.dumps(details)


class TestFormatErrorResponse:
    """Test cases for error body formatting."""

    def test_not_found(self):
        assert format_error_response(ProductNotFoundError("x")) == {"error": "not found"}

    def test_validation_lists_every_violation(self):
        error = ProductValidationError(["name: Field required", "price: Input should be a valid number"])

        assert format_error_response(error) == {
            "errors": ["name: Field required", "price: Input should be a valid number"],
        }

    def test_malformed_input_names_parse_failure(self):
        body = format_error_response(MalformedInputError("Expecting value: line 1 column 1 (char 0)"))

        assert body == {"error": "malformed JSON: Expecting value: line 1 column 1 (char 0)"}

    def test_unhandled_hides_internal_details(self):
        error = DataStoreError("DynamoDB error: secret table details", operation="Scan", table_name="t")

        body = format_error_response(error, request_id="req-9")

        assert body == {"error": "internal server error", "request_id": "req-9"}


class TestCreateApiResponse:
    """Test cases for API Gateway response construction."""

    def test_json_body_and_headers(self):
        response = create_api_response(status_code=200, body={"productID": "p-1"}, request_id="req-1")

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == {"productID": "p-1"}
        assert response["headers"]["Content-Type"] == "application/json"
        assert response["headers"]["X-Request-ID"] == "req-1"
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"

    def test_empty_body_still_has_content_type(self):
        response = create_api_response(status_code=204)

        assert response["body"] == ""
        assert response["headers"]["Content-Type"] == "application/json"

    def test_extra_headers_merged(self):
        response = create_api_response(status_code=201, body={}, headers={"Location": "/products/p-1"})

        assert response["headers"]["Location"] == "/products/p-1"
        assert response["headers"]["Content-Type"] == "application/json"

    def test_error_response(self):
        response = create_error_response(ProductNotFoundError("p-1"), request_id="req-1")

        assert response["statusCode"] == 404
        assert json.loads(response["body"]) == {"error": "not found"}


class TestHandleProductErrors:
    """Test cases for the handler error boundary."""

    @pytest.fixture
    def context(self):
        context = Mock()
        context.aws_request_id = "req-42"
        return context

    def test_passes_through_success(self, context):
        handler = handle_product_errors(lambda event, ctx: {"statusCode": 200})

        assert handler({}, context) == {"statusCode": 200}

    def test_translates_service_errors(self, context):
        def handler(event, ctx):
            raise ProductValidationError(["body: Input should be a JSON object"])

        response = handle_product_errors(handler)({}, context)

        assert response["statusCode"] == 400
        assert json.loads(response["body"]) == {"errors": ["body: Input should be a JSON object"]}

    def test_unexpected_errors_become_generic_500(self, context):
        def handler(event, ctx):
            raise RuntimeError("connection reset by peer")

        response = handle_product_errors(handler)({}, context)

        assert response["statusCode"] == 500
        body = json.loads(response["body"])
        assert body == {"error": "internal server error", "request_id": "req-42"}
        assert "connection reset" not in response["body"]
