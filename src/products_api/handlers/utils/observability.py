"""
Powertools instances shared by the products handlers, logic and DAL.

Service name comes from POWERTOOLS_SERVICE_NAME; tracing is switched off in
tests with POWERTOOLS_TRACE_DISABLED.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

# Product KPIs (ProductCreated, ProductNotFound, DynamoDB*Duration, ...)
METRICS_NAMESPACE = 'ProductsApi'

logger: Logger = Logger()
tracer: Tracer = Tracer()

metrics = Metrics(namespace=METRICS_NAMESPACE)
