"""
Output models for API error responses using Pydantic.

Success responses carry the stored product itself; these models define the
bodies returned for each error kind.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, Field


class NotFoundErrorOutput(BaseModel):
    """Response model for 404 responses."""

    error: Annotated[str, Field(
        default='not found',
        description='Error indicator',
        examples=['not found']
    )] = 'not found'


class ValidationErrorOutput(BaseModel):
    """Response model for request bodies that fail schema validation."""

    errors: Annotated[list[str], Field(
        description='Every violation found in the request body',
        examples=[['name: Field required', 'price: Input should be a valid number']]
    )]


class MalformedInputOutput(BaseModel):
    """Response model for request bodies that are not valid JSON."""

    error: Annotated[str, Field(
        description='Parse failure description',
        examples=['malformed JSON: Expecting value: line 1 column 1 (char 0)']
    )]


class InternalServerErrorOutput(BaseModel):
    """Response model for unexpected failures."""

    error: Annotated[str, Field(
        default='internal server error',
        description='Generic error indicator'
    )] = 'internal server error'

    request_id: Annotated[Optional[str], Field(
        default=None,
        description='Lambda request ID for support correlation'
    )] = None
