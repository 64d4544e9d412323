"""
Unit tests for the shared validator functions.
"""

import pytest

from education_platform.domain.exceptions import DomainValidationError, ValidationRule
from education_platform.domain.services import validator


class TestValidator:
    def test_validators_return_their_input(self):
        assert validator.validate_not_empty("x") == "x"
        assert validator.validate_min_length("abc", 3) == "abc"
        assert validator.validate_max_length("abc", 3) == "abc"
        assert validator.validate_non_negative(0) == 0

    def test_error_message_names_the_field(self):
        with pytest.raises(DomainValidationError) as exc:
            validator.validate_not_empty("", "Title")
        assert "Title" in exc.value.message
        assert exc.value.rule == ValidationRule.EMPTY

    def test_email_pattern(self):
        assert validator.is_valid_email("first.last+tag@sub.example.org")
        assert not validator.is_valid_email("first.last@example")

    @pytest.mark.parametrize(
        "digits,expected",
        [("12345678", ("1", "E")), ("00000001", ("4", "I")), ("00000000", ("6", "K"))],
    )
    def test_dni_check_characters(self, digits, expected):
        assert validator.dni_check_characters(digits) == expected

    def test_dni_requires_eight_digits(self):
        with pytest.raises(DomainValidationError):
            validator.dni_check_characters("1234")

    @pytest.mark.parametrize("value", [1.0, "1", True, None])
    def test_whole_number_rejects_other_types(self, value):
        with pytest.raises(DomainValidationError) as exc:
            validator.validate_whole_number(value)
        assert exc.value.rule == ValidationRule.INVALID_FORMAT
        assert validator.validate_whole_number(3) == 3
