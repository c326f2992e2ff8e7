"""
Contains factories for commonly used validators. You are free to use your own validators, any function with the
signature `(value, field_name) -> Optional[str]` will do.
"""
import re
from decimal import Decimal
from numbers import Real
from typing import Any, Optional

from typeguard import check_type

from .types import Validator


def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    return pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)


def regex_match(pattern: str | re.Pattern[str], message: str) -> Validator[Optional[str]]:
    """
    Returns a validator which fails with `message` unless the whole value matches `pattern`.
    `None` and empty strings pass, combine it with `required` if the field is mandatory.
    A value which is not a string raises a TypeCheckError.
    """
    compiled = _compile(pattern)

    def validate_regex_match(value: Optional[str], field_name: str) -> Optional[str]:
        # pylint: disable=unused-argument
        if value is None or value == "":
            return None
        check_type(value, str)
        if compiled.fullmatch(value) is None:
            return message
        return None

    return validate_regex_match


def regex_find(pattern: str | re.Pattern[str], message: str) -> Validator[Optional[str]]:
    """
    Returns a validator which fails with `message` unless `pattern` is found somewhere in the value.
    `None` and empty strings pass, combine it with `required` if the field is mandatory.
    A value which is not a string raises a TypeCheckError.
    """
    compiled = _compile(pattern)

    def validate_regex_find(value: Optional[str], field_name: str) -> Optional[str]:
        # pylint: disable=unused-argument
        if value is None or value == "":
            return None
        check_type(value, str)
        if compiled.search(value) is None:
            return message
        return None

    return validate_regex_find


def _is_number(value: Any) -> bool:
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def required(value: Any, field_name: str) -> Optional[str]:
    """Fails on `None`, empty strings and zero"""
    if value is None or value == "" or (_is_number(value) and value == 0):
        return f"{field_name} is required"
    return None


def positive(value: Any, field_name: str) -> Optional[str]:
    """Fails on `None`, values which are not numbers and negative numbers"""
    if not _is_number(value) or value < 0:
        return f"{field_name} must be greater than zero"
    return None


def max_length(size: int) -> Validator[Any]:
    """
    Returns a validator which fails if the string representation of the value is longer than `size`.
    `None` passes.
    """

    def validate_max_length(value: Any, field_name: str) -> Optional[str]:
        if value is None:
            return None
        if len(str(value)) > size:
            return f"{field_name} must have maximum {size} characters"
        return None

    return validate_max_length
