"""Shared schema configuration.

JSON bodies use camelCase names on the wire; snake_case is accepted too.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# An empty string counts as a missing field
RequiredStr = Annotated[str, Field(min_length=1)]


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    """Plain acknowledgement."""

    message: str
