"""
Unit tests for ValidationField and the built-in fields
"""

import datetime

import pytest

from core.interfaces.validation import FieldRule, Validatable
from core.validation import (
    UNDEFINED,
    CharsetField,
    CodeField,
    EmailField,
    IntegerStringField,
    RuleField,
    ValidationField,
)


class ProbeField(ValidationField):
    """Field that records hook calls"""

    def __init__(self, value=UNDEFINED, passes=True):
        super().__init__(value)
        self.passes = passes
        self.calls = []

    def on_validate(self):
        self.calls.append("on_validate")
        return self.passes

    def on_fail(self):
        self.calls.append("on_fail")
        return "probe failed"


class TestTemplateMethod:
    """validate() composition"""

    def test_valid_returns_none(self):
        """success is the absence of an error"""
        field = ProbeField("x", passes=True)
        assert field.validate() is None
        assert field.calls == ["on_validate"]

    def test_invalid_returns_message(self):
        """on_fail is only called on failure"""
        field = ProbeField("x", passes=False)
        assert field.validate() == "probe failed"
        assert field.calls == ["on_validate", "on_fail"]

    def test_no_state_between_calls(self):
        """repeated calls give the same outcome"""
        field = ProbeField("x", passes=False)
        assert field.validate() == field.validate()

    def test_abstract_base(self):
        """the base cannot be instantiated"""
        with pytest.raises(TypeError):
            ValidationField("x")

    def test_value_not_mutated(self):
        """the held value is kept as given"""
        payload = {"a": [1, 2]}
        field = ProbeField(payload)
        field.validate()
        assert field.value is payload
        assert payload == {"a": [1, 2]}

    def test_protocols(self):
        """fields satisfy the structural contracts"""
        field = EmailField("a@b.com")
        assert isinstance(field, FieldRule)
        assert isinstance(field, Validatable)


class TestTypePredicates:
    """Type classification predicates"""

    def test_string(self):
        assert ProbeField("abc").is_string() is True
        assert ProbeField(1).is_string() is False

    def test_number(self):
        """bool is not a number"""
        assert ProbeField(1).is_number() is True
        assert ProbeField(1.5).is_number() is True
        assert ProbeField(True).is_number() is False
        assert ProbeField("1").is_number() is False

    def test_boolean(self):
        assert ProbeField(False).is_boolean() is True
        assert ProbeField(0).is_boolean() is False

    def test_integer_is_safe_integer(self):
        """ints and integral floats within 2**53 - 1"""
        assert ProbeField(42).is_integer() is True
        assert ProbeField(-42).is_integer() is True
        assert ProbeField(5.0).is_integer() is True
        assert ProbeField(2**53 - 1).is_integer() is True
        assert ProbeField(2**53).is_integer() is False
        assert ProbeField(5.5).is_integer() is False
        assert ProbeField(float("inf")).is_integer() is False
        assert ProbeField(float("nan")).is_integer() is False
        assert ProbeField(True).is_integer() is False
        assert ProbeField("42").is_integer() is False

    def test_date(self):
        assert ProbeField(datetime.date(2024, 1, 1)).is_date() is True
        assert ProbeField(datetime.datetime(2024, 1, 1, 12, 0)).is_date() is True
        assert ProbeField("2024-01-01").is_date() is False

    def test_null_and_undefined(self):
        """None and a missing value are distinct"""
        assert ProbeField(None).is_null() is True
        assert ProbeField(None).is_undefined() is False
        assert ProbeField().is_undefined() is True
        assert ProbeField().is_null() is False

    def test_array(self):
        assert ProbeField([1, 2]).is_array() is True
        assert ProbeField((1, 2)).is_array() is True
        assert ProbeField("12").is_array() is False

    def test_object(self):
        assert ProbeField({"a": 1}).is_object() is True
        assert ProbeField([("a", 1)]).is_object() is False
        assert ProbeField(None).is_object() is False


class TestScanningPredicates:
    """Charset, integer-string and email predicates on the held value"""

    def test_under_charset(self):
        assert ProbeField("abc").is_under_charset("ABC", False) is True
        assert ProbeField("abc").is_under_charset("ABC", case_sensitive=True) is False

    def test_integer_string(self):
        assert ProbeField("123").is_integer_string() is True
        assert ProbeField("10e+1").is_integer_string() is False
        assert ProbeField("").is_integer_string() is True

    def test_email(self):
        assert ProbeField("john.doe@example.com").is_email() is True
        assert ProbeField(None).is_email() is False


class TestEmailField:
    """EmailField"""

    def test_valid(self):
        assert EmailField("john.doe@example.com").validate() is None

    def test_invalid(self):
        assert EmailField("@@-.com").validate() is not None
        assert EmailField("@@-.com").validate() == EmailField.default_message

    def test_custom_message(self):
        assert EmailField("nope", message="Bad email").validate() == "Bad email"

    def test_undefined(self):
        assert EmailField().validate() is not None


class TestIntegerStringField:
    """IntegerStringField"""

    def test_valid_and_invalid(self):
        assert IntegerStringField("123").validate() is None
        assert IntegerStringField("10e+1").validate() == IntegerStringField.default_message
        assert IntegerStringField(123).validate() is not None


class TestCharsetField:
    """CharsetField"""

    def test_case_folding(self):
        assert CharsetField("abc", charset="ABC", case_sensitive=False).validate() is None

    def test_default_message(self):
        message = CharsetField("abc", charset="ABC").validate()
        assert message == "Expected only characters from 'ABC'."

    def test_message_mentions_case(self):
        message = CharsetField("abcd", charset="ABC", case_sensitive=False).validate()
        assert "case-insensitive" in message


class TestCodeField:
    """CodeField"""

    def test_four_characters(self):
        assert CodeField("1234").validate() is None
        assert CodeField("  1234 ").validate() is None

    def test_wrong_length_or_type(self):
        assert CodeField("123").validate() == "Expected a combination of 4 characters."
        assert CodeField(1234).validate() is not None

    def test_custom_length(self):
        assert CodeField("123456", length=6).validate() is None


class TestRuleField:
    """Strategy-object variant"""

    def test_injected_rule(self):
        def positive(field):
            return field.is_integer() and field.value > 0

        assert RuleField(7, positive, "Expected a positive integer.").validate() is None
        assert RuleField(-7, positive, "Expected a positive integer.").validate() == "Expected a positive integer."

    def test_callable_message(self):
        field = RuleField("x", lambda f: f.is_number(), lambda f: f"{f.value!r} is not a number")
        assert field.validate() == "'x' is not a number"

    def test_message_not_built_on_success(self):
        def explode(field):
            raise AssertionError("on_fail must not run")

        assert RuleField(1, lambda f: True, explode).validate() is None


class TestUndefined:
    """UNDEFINED sentinel"""

    def test_singleton_and_falsy(self):
        import copy

        assert copy.copy(UNDEFINED) is UNDEFINED
        assert not UNDEFINED
        assert repr(UNDEFINED) == "UNDEFINED"
