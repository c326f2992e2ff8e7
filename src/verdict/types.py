"""
Contains the types used in the validation framework
"""
from typing import Any, Optional, Protocol, TypeAlias, TypeVar

ValueT = TypeVar("ValueT", contravariant=True)


class Validator(Protocol[ValueT]):
    """
    A validator receives the value of a field and the name of the field. It returns an error message if the value is
    invalid or `None` if the value passed the check. Validators must not keep state between calls.
    """

    def __call__(self, value: ValueT, field_name: str) -> Optional[str]:
        ...


ErrorMap: TypeAlias = dict[str, str]
