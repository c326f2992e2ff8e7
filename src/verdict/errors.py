"""
Contains the exception raised when a validation run ended with errors.
"""
from typing import Any, Mapping, Optional

from frozendict import frozendict


class VerdictError(Exception):
    """
    Raised by `Verdict.check_has_errors` if at least one field has an error. It carries a snapshot of the error map
    and the data which got validated (if the `Verdict` was created with data).
    Unlike `Verdict.errors`, which is the live dictionary of the `Verdict`, `errors` is an immutable copy taken when
    the exception was raised, so later validations don't change it.
    """

    def __init__(self, errors: Mapping[str, str], data: Optional[Any] = None):
        self.errors: frozendict[str, str] = frozendict(errors)
        self.data = data
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        lines = [f"{len(self.errors)} field(s) failed validation:"]
        lines.extend(f"\t{field_name}: {message}" for field_name, message in self.errors.items())
        return "\n".join(lines)
