"""
This package enables you to validate the fields of your data one by one and collect the first error of each field.
It is designed to work with arbitrary object structures.
"""

from .analysis import VerdictResult
from .errors import VerdictError
from .execution import Verdict
from .types import Validator
from .utils import NotFound, Resolved, field_value, optional_field, required_field, resolve_field
from .validators import max_length, positive, regex_find, regex_match, required
