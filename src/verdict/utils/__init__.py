"""
Contains utility functions to resolve field values from arbitrary objects.
"""
from .query_object import (
    FieldResolution,
    NotFound,
    Resolved,
    field_value,
    optional_field,
    required_field,
    resolve_field,
)
