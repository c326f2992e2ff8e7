import re
from decimal import Decimal
from typing import Any

import pytest
from typeguard import TypeCheckError

from verdict import max_length, positive, regex_find, regex_match, required


class TestRegexValidators:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(None, None, id="none passes"),
            pytest.param("", None, id="empty passes"),
            pytest.param("12345", None, id="full match"),
            pytest.param("123456", "invalid zip", id="too long"),
            pytest.param("a12345", "invalid zip", id="partial match"),
        ],
    )
    def test_regex_match(self, value: Any, expected: Any):
        validator = regex_match(r"\d{5}", "invalid zip")
        assert validator(value, "zip_code") == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(None, None, id="none passes"),
            pytest.param("", None, id="empty passes"),
            pytest.param("12345", None, id="full match"),
            pytest.param("zip: 12345 Berlin", None, id="substring"),
            pytest.param("Berlin", "no zip", id="not found"),
        ],
    )
    def test_regex_find(self, value: Any, expected: Any):
        validator = regex_find(r"\d{5}", "no zip")
        assert validator(value, "address") == expected

    def test_compiled_pattern(self):
        validator = regex_match(re.compile(r"[a-z]+", re.IGNORECASE), "letters only")
        assert validator("Hello", "word") is None
        assert validator("Hello!", "word") == "letters only"

    @pytest.mark.parametrize("factory", [regex_match, regex_find])
    def test_non_string_value(self, factory: Any):
        validator = factory(r"\d+", "message")
        with pytest.raises(TypeCheckError):
            validator(12345, "field")


class TestCommonValidators:
    @pytest.mark.parametrize("value", [None, "", 0, 0.0, Decimal(0)])
    def test_required_fails(self, value: Any):
        assert required(value, "name") == "name is required"

    @pytest.mark.parametrize("value", ["John", 1, -1, [], False])
    def test_required_passes(self, value: Any):
        assert required(value, "name") is None

    @pytest.mark.parametrize("value", [None, "5", -1, -0.5, True, Decimal("-2")])
    def test_positive_fails(self, value: Any):
        assert positive(value, "height") == "height must be greater than zero"

    @pytest.mark.parametrize("value", [0, 2, 1.5, Decimal("3")])
    def test_positive_passes(self, value: Any):
        assert positive(value, "height") is None

    def test_max_length(self):
        validator = max_length(4)
        assert validator(None, "name") is None
        assert validator("John", "name") is None
        assert validator(1234, "name") is None
        assert validator("Johnny", "name") == "name must have maximum 4 characters"
        assert validator(12345, "name") == "name must have maximum 4 characters"
