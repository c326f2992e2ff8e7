"""
Contains the functions used to resolve the value of a named field from an arbitrary object.
"""
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, TypeVar, overload

from typeguard import TypeCheckError, check_type

_logger = logging.getLogger(__name__)

AttrT = TypeVar("AttrT")


@dataclass(frozen=True)
class Resolved:
    """
    The field could be resolved. `value` may still be `None` if the field holds no value.
    """

    value: Any


@dataclass(frozen=True)
class NotFound:
    """
    The field could not be resolved. `reason` describes what went wrong.
    """

    field_name: str
    reason: str


FieldResolution = Resolved | NotFound


def getter_names(field_name: str) -> tuple[str, str]:
    """
    Returns the names of the getter methods which are looked up for the given field name, e.g. for `age` these are
    `getAge` and `get_age`.
    """
    return f"get{field_name[:1].upper()}{field_name[1:]}", f"get_{field_name}"


_MISSING = object()


def _lookup(obj: Any, member_name: str) -> Any:
    try:
        return getattr(obj, member_name)
    except Exception:  # pylint: disable=broad-exception-caught
        # properties may raise anything, not only AttributeError
        return _MISSING


def _takes_no_arguments(member: Any) -> bool:
    try:
        inspect.signature(member).bind()
    except TypeError:
        return False
    except ValueError:
        # no signature available, e.g. for some builtins
        return True
    return True


def _invoke(field_name: str, member_name: str, accessor: Any) -> FieldResolution:
    try:
        return Resolved(accessor())
    except Exception as error:  # pylint: disable=broad-exception-caught
        _logger.debug("Accessor %s for %s failed: %r", member_name, field_name, error)
        return NotFound(field_name, f"{member_name}() raised {error!r}")


def _resolve_segment(obj: Any, field_name: str) -> FieldResolution:
    if isinstance(obj, Mapping):
        if field_name in obj:
            _logger.debug("Resolving %s via mapping key", field_name)
            return Resolved(obj[field_name])
        return NotFound(field_name, f"key {field_name} not in {type(obj).__name__}")
    camel_getter_name, snake_getter_name = getter_names(field_name)
    getter = _lookup(obj, camel_getter_name)
    if getter is not _MISSING and callable(getter) and _takes_no_arguments(getter):
        _logger.debug("Resolving %s via getter %s", field_name, camel_getter_name)
        return _invoke(field_name, camel_getter_name, getter)
    member = _lookup(obj, field_name)
    if member is not _MISSING:
        if not callable(member):
            _logger.debug("Resolving %s via attribute", field_name)
            return Resolved(member)
        if _takes_no_arguments(member):
            _logger.debug("Resolving %s via accessor %s()", field_name, field_name)
            return _invoke(field_name, field_name, member)
    getter = _lookup(obj, snake_getter_name)
    if getter is not _MISSING and callable(getter) and _takes_no_arguments(getter):
        _logger.debug("Resolving %s via getter %s", field_name, snake_getter_name)
        return _invoke(field_name, snake_getter_name, getter)
    _logger.debug("No accessor found for %s on %s", field_name, type(obj).__name__)
    return NotFound(field_name, f"{type(obj).__name__} has no accessor for {field_name}")


def resolve_field(obj: Any, field_name: str) -> FieldResolution:
    """
    Tries to resolve the value of `field_name` on `obj`. For each segment of a (possibly dotted) field name the
    following lookups are tried in this order, the first match wins:

    1. a getter method `getFieldName()`
    2. a member named exactly like the field; it is called if it is callable, otherwise its value is used
    3. a getter method `get_field_name()`

    Only callables which can be called without arguments count as getters or accessors, others are skipped.

    Mappings are treated as pre-extracted data: only their keys are looked up, their methods are never called.

    This function never raises. If no lookup matches or the matching accessor raises an exception, `NotFound` is
    returned.
    """
    current: FieldResolution = Resolved(obj)
    splitted_path = field_name.split(".")
    for index, segment in enumerate(splitted_path):
        assert isinstance(current, Resolved)
        if not segment:
            return NotFound(field_name, "empty path segment")
        current = _resolve_segment(current.value, segment)
        if isinstance(current, NotFound):
            current_path = ".".join(splitted_path[0 : index + 1])
            return NotFound(field_name, f"{current_path}: {current.reason}")
    return current


def field_value(obj: Any, field_name: str) -> Any:
    """
    Resolves `field_name` on `obj` and returns its value. If the field could not be resolved, `None` is returned.
    Note that the caller can't distinguish a field which couldn't be resolved from a field holding `None`.
    Use `resolve_field` if you need to.
    """
    resolution = resolve_field(obj, field_name)
    if isinstance(resolution, NotFound):
        return None
    return resolution.value


def optional_field(obj: Any, field_name: str, field_type: type[AttrT]) -> Optional[AttrT]:
    """
    Tries to resolve `field_name` on `obj`. If it is not existent, `None` will be returned.
    If the field is found but its type doesn't match `field_type`, `None` will be returned as well.
    """
    try:
        return required_field(obj, field_name, field_type)
    except (AttributeError, TypeCheckError):
        return None


@overload
def required_field(obj: Any, field_name: str, field_type: type[AttrT]) -> AttrT:
    ...


@overload
def required_field(obj: Any, field_name: str, field_type: Any) -> Any:
    ...


def required_field(obj: Any, field_name: str, field_type: Any) -> Any:
    """
    Tries to resolve `field_name` on `obj`. If it is not existent, an AttributeError will be raised.
    If the field is found, the type will be checked and a TypeCheckError will be raised if the type doesn't match the
    value.
    """
    resolution = resolve_field(obj, field_name)
    if isinstance(resolution, NotFound):
        raise AttributeError(f"{resolution.reason}")
    try:
        check_type(resolution.value, field_type)
    except TypeCheckError as error:
        raise TypeCheckError(f"{field_name}: {error}") from error
    return resolution.value
