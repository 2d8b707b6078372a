"""
Common response models and utilities.

Shared camelCase configuration and the plain message response.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys, accepting either case on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by delete operations."""

    message: str
