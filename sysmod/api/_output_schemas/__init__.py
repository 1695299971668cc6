"""Output schemas for API commands, registered per (domain, command)."""

from . import config, module  # noqa: F401  (registration side effects)
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = ["BaseOutputSchema", "get_output_schema", "register_output_schema"]
