"""Output schemas for API commands.

Importing this package registers every schema.
"""

from . import config, link
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = ["BaseOutputSchema", "config", "get_output_schema", "link", "register_output_schema"]
