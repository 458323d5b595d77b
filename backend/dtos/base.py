"""
Shared DTO base class.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for every API DTO.

    Python code uses snake_case attributes; JSON on the wire is camelCase.
    Both spellings are accepted on input.
    """

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
