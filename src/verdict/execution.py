"""
Contains the Verdict class which runs the validators and accumulates the errors per field.
"""
import logging
from typing import Any, Optional

from .analysis import VerdictResult
from .errors import VerdictError
from .types import ErrorMap, Validator
from .utils.query_object import field_value

_logger = logging.getLogger(__name__)


class Verdict:
    """
    Validates fields one by one and collects the first error of each field. The data to be validated can be passed
    to each call of `validate` or once at construction. In the latter case use `validate_field` and the field values
    will be resolved from the data by name (see `verdict.utils.resolve_field`).

    ```
    verdict = Verdict(customer)
    verdict.validate_field("name", required)
    verdict.validate_field("age", required, positive)
    verdict.check_has_errors()
    ```
    """

    def __init__(self, data: Optional[Any] = None):
        self._errors: ErrorMap = {}
        self._data = data
        self._data_type: Optional[type] = type(data) if data is not None else None
        if self._data_type is None:
            _logger.debug("Verdict created without data")
        else:
            _logger.debug("Verdict created with data of type %s", self._data_type.__name__)

    @property
    def errors(self) -> ErrorMap:
        """
        The error messages per field name. This is the live dictionary used by this instance, don't modify it.
        Use `add_error_on` to add errors or `result` to get an immutable snapshot.
        """
        return self._errors

    @property
    def data(self) -> Optional[Any]:
        """The data passed at construction"""
        return self._data

    @property
    def data_type(self) -> Optional[type]:
        """The type of the data passed at construction"""
        return self._data_type

    def has_errors(self) -> bool:
        """Returns `True` if at least one field has an error"""
        return len(self._errors) > 0

    def has_error_on(self, field_name: str) -> bool:
        """Returns `True` if there is an error on `field_name`"""
        return field_name in self._errors

    def get_error_on(self, field_name: str) -> Optional[str]:
        """Returns the error message of `field_name` or `None` if there is no error on it"""
        return self._errors.get(field_name)

    def add_error_on(self, field_name: str, message: str):
        """
        Explicitly sets an error on `field_name`. Use this to report the results of validations which were done
        outside of this instance. An existing error on that field will be overwritten.
        """
        self._errors[field_name] = message

    def check_has_errors(self):
        """
        Raises a VerdictError containing all errors (and the data, if any) if at least one field has an error.
        """
        if self.has_errors():
            raise VerdictError(self._errors, self._data)

    def result(self) -> VerdictResult:
        """Returns an immutable snapshot of the current errors for further analysis"""
        return VerdictResult(self._errors, self._data)

    @staticmethod
    def _check_arguments(field_name: str, validators: tuple[Validator[Any], ...]):
        if len(validators) == 0:
            raise ValueError("You need to pass at least one validator")
        if not field_name:
            raise ValueError("You need to pass a name")

    def validate(self, value: Any, field_name: str, *validators: Validator[Any]):
        """
        Runs the `validators` in the given order on `value`. The first validator returning a message stops the
        chain and its message is stored as error on `field_name`. If all validators pass, nothing is stored; an error
        stored on `field_name` by a previous call stays untouched.
        """
        self._check_arguments(field_name, validators)
        _logger.debug("Validating field %s with value %r", field_name, value)
        for validator in validators:
            message = validator(value, field_name)
            if message:
                _logger.debug("Validation of field %s failed: %s", field_name, message)
                self._errors[field_name] = message
                return
        _logger.debug("Validation of field %s passed", field_name)

    def validate_field(self, field_name: str, *validators: Validator[Any]):
        """
        Same as `validate` but the value is resolved from the data passed at construction. If the field can't be
        resolved, the validators receive `None`.
        """
        if self._data is None:
            raise RuntimeError(
                "You need to pass an object to be validated at construction "
                "if you want to use validate_field without passing the value"
            )
        self._check_arguments(field_name, validators)
        self.validate(field_value(self._data, field_name), field_name, *validators)

    def __repr__(self):
        data_type = self._data_type.__name__ if self._data_type is not None else None
        return f"Verdict(data_type={data_type}, errors={self._errors})"
