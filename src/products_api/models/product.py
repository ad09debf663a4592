"""
Product domain model.

A product is an open set of caller-supplied attributes plus the
server-generated ``productID`` that is also its DynamoDB partition key.
"""

from typing import Annotated, Any, Dict
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

PRODUCT_ID_FIELD = 'productID'


class Product(BaseModel):
    """Stored product record."""

    model_config = ConfigDict(extra='allow')

    productID: Annotated[str, Field(
        min_length=1,
        description='Unique identifier of the product, immutable after creation',
        examples=['0b6f1c3e-5d0a-4c1b-9d67-3f2b1f0e8a11']
    )]

    @classmethod
    def with_id(cls, attributes: Dict[str, Any], product_id: str) -> 'Product':
        """
        Build a product from request attributes, forcing its identifier.

        Any ``productID`` present in ``attributes`` is discarded so the stored
        key always matches the identifier chosen by the server.

        Args:
            attributes: Caller-supplied product attributes
            product_id: Identifier the record is stored under

        Returns:
            Product instance carrying ``product_id``
        """
        data = {key: value for key, value in attributes.items() if key != PRODUCT_ID_FIELD}
        data[PRODUCT_ID_FIELD] = product_id
        return cls.model_validate(data)

    @classmethod
    def create(cls, attributes: Dict[str, Any]) -> 'Product':
        """Create a new product with a freshly generated identifier."""
        return cls.with_id(attributes, str(uuid4()))

    def to_item(self) -> Dict[str, Any]:
        """Attributes as stored and returned to callers."""
        return self.model_dump()
