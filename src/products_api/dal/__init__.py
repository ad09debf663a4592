"""
Data Access Layer (DAL) for the products API.

This module defines the store interface the logic layer depends on and the
factory returning the DynamoDB implementation.
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class DalHandler(Protocol):
    """Protocol defining the data access layer interface."""

    def get_product(self, product_id: str) -> Optional[Dict[str, Any]]:
        """Retrieve a product by its ID, or None when absent."""
        ...

    def put_product(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """Create or overwrite a product."""
        ...

    def delete_product(self, product_id: str) -> None:
        """Delete a product by its ID."""
        ...

    def scan_products(self) -> List[Dict[str, Any]]:
        """Return every stored product."""
        ...


def get_dal_handler(table_name: str, endpoint_url: Optional[str] = None) -> DalHandler:
    """
    Factory function to get the appropriate DAL handler.

    Args:
        table_name: Name of the products table
        endpoint_url: Optional DynamoDB endpoint override

    Returns:
        DAL handler instance
    """
    # Import here to avoid circular imports
    from products_api.dal.dynamodb_handler import DynamoDBHandler

    return DynamoDBHandler(table_name=table_name, endpoint_url=endpoint_url)


__all__ = [
    'DalHandler',
    'get_dal_handler',
]
