"""Output schemas for API commands.

Importing this package registers every domain's schemas.
"""

from . import config, link, sync, watch  # noqa: F401
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = ["BaseOutputSchema", "get_output_schema", "register_output_schema"]
