"""
Input models for request validation using Pydantic.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class ProductRequest(BaseModel):
    """Fixed product schema enforced on create and update bodies.

    Types are strict: a price of ``"1.5"`` or ``true`` is rejected rather than
    coerced. Attributes outside the schema are accepted and stored as-is.
    """

    model_config = ConfigDict(extra='allow')

    name: Annotated[str, Field(
        strict=True,
        description='Product name',
        examples=['Pen']
    )]

    description: Annotated[str, Field(
        strict=True,
        description='Product description',
        examples=['Blue ink']
    )]

    price: Annotated[float, Field(
        strict=True,
        description='Unit price',
        examples=[1.5]
    )]

    available: Annotated[bool, Field(
        strict=True,
        description='Whether the product can currently be ordered',
        examples=[True]
    )]
