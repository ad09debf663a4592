"""
Products Lambda handlers.

Each module in this package is a Lambda entry point:

- create_product: POST /products
- get_product: GET /products/{id}
- update_product: PUT /products/{id}
- delete_product: DELETE /products/{id}
- list_products: GET /products
- products_router: every route above from a single function

Handlers only deal with the API Gateway event and response shapes; product
rules live in ``products_api.logic`` and persistence in ``products_api.dal``.
"""

from products_api.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
