"""
Contains functionality to analyze the result of a validation process
"""
from typing import Any, Mapping, Optional

from frozendict import frozendict


class VerdictResult:
    """
    The function `Verdict.result` will return an instance of this class. It holds a snapshot of the errors at the
    time it was created, later validations don't change it. Note that the values are calculated only if you use them.
    """

    def __init__(self, errors: Mapping[str, str], data: Optional[Any] = None):
        self._errors: frozendict[str, str] = frozendict(errors)
        self._data = data

        self._fields_per_message: Optional[dict[str, list[str]]] = None

    @property
    def errors(self) -> frozendict[str, str]:
        """Maps the names of the failed fields to their error messages"""
        return self._errors

    @property
    def data(self) -> Optional[Any]:
        """The validated data or `None` if the values were passed directly"""
        return self._data

    @property
    def failed_fields(self) -> list[str]:
        """The names of the failed fields in the order they failed"""
        return list(self._errors.keys())

    @property
    def num_errors(self) -> int:
        """Number of failed fields (equivalent to `len(self.errors)`)"""
        return len(self._errors)

    @property
    def succeeded(self) -> bool:
        """`True` if no field failed"""
        return self.num_errors == 0

    @property
    def fields_per_message(self) -> dict[str, list[str]]:
        """
        Groups the failed fields by their error message. This is useful if you use the same message for
        several fields. Each call returns a new dictionary, changing it doesn't change this result.
        """
        if self._fields_per_message is None:
            self._fields_per_message = {}
            for field_name, message in self._errors.items():
                self._fields_per_message.setdefault(message, []).append(field_name)
        return {message: list(field_names) for message, field_names in self._fields_per_message.items()}

    def fields_with_message(self, message: str) -> list[str]:
        """Returns the names of all fields which failed with `message`"""
        return self.fields_per_message.get(message, [])
