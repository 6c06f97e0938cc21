"""Unit tests for shape_validator.schemas.primitives."""

from __future__ import annotations

import datetime

import pytest

from shape_validator.errors import ValidationError
from shape_validator.factories import validator
from shape_validator.sentinels import UNDEFINED

# ---------------------------------------------------------------------------
# string()
# ---------------------------------------------------------------------------


class TestString:
    def test_accepts_strings(self):
        schema = validator.string()
        assert schema.parse("hello") == "hello"
        assert schema.parse("") == ""

    @pytest.mark.parametrize("value", [123, None, UNDEFINED, {}, [], True, b"bytes"])
    def test_rejects_non_strings(self, value):
        with pytest.raises(ValidationError):
            validator.string().parse(value)

    def test_issue_describes_mismatch(self):
        with pytest.raises(ValidationError) as exc_info:
            validator.string().parse(123)

        (issue,) = exc_info.value.issues
        assert issue.path == ()
        assert issue.expected == "string"
        assert issue.received == "number"
        assert issue.message == 'Invalid value at "": expected string, received number. Value: 123'

    def test_returns_same_object(self):
        value = "same"
        assert validator.string().parse(value) is value


# ---------------------------------------------------------------------------
# number()
# ---------------------------------------------------------------------------


class TestNumber:
    @pytest.mark.parametrize("value", [123, 0, -123.45, float("inf"), float("-inf")])
    def test_accepts_numbers(self, value):
        assert validator.number().parse(value) == value

    def test_rejects_nan(self):
        with pytest.raises(ValidationError) as exc_info:
            validator.number().parse(float("nan"))

        (issue,) = exc_info.value.issues
        assert issue.expected == "number"
        assert issue.received == "number"

    @pytest.mark.parametrize("value", ["123", None, UNDEFINED, True, False, [1]])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValidationError):
            validator.number().parse(value)

    def test_accepts_integers_beyond_float_range(self):
        assert validator.number().parse(10**400) == 10**400

    def test_bool_is_reported_as_boolean(self):
        with pytest.raises(ValidationError) as exc_info:
            validator.number().parse(True)
        assert exc_info.value.issues[0].received == "boolean"

    def test_string_number_is_not_coerced(self):
        result = validator.number().safe_parse("42")
        assert result.success is False
        assert result.error.issues[0].message.endswith('Value: "42"')


# ---------------------------------------------------------------------------
# boolean()
# ---------------------------------------------------------------------------


class TestBoolean:
    def test_accepts_booleans(self):
        assert validator.boolean().parse(True) is True
        assert validator.boolean().parse(False) is False

    @pytest.mark.parametrize("value", [0, 1, "true", None, UNDEFINED])
    def test_rejects_non_booleans(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validator.boolean().parse(value)
        assert exc_info.value.issues[0].expected == "boolean"


# ---------------------------------------------------------------------------
# date()
# ---------------------------------------------------------------------------


class _InvalidDateTime(datetime.datetime):
    """A datetime that, like pandas.NaT, is not equal to itself."""

    def __eq__(self, other):
        return False

    def __ne__(self, other):
        return True

    __hash__ = datetime.datetime.__hash__


class TestDate:
    def test_accepts_datetime(self):
        value = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
        assert validator.date().parse(value) is value

    def test_accepts_date(self):
        value = datetime.date(2024, 1, 1)
        assert validator.date().parse(value) == value

    @pytest.mark.parametrize("value", ["2024-01-01", 1704067200, None, UNDEFINED, {}])
    def test_rejects_non_dates(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validator.date().parse(value)
        assert exc_info.value.issues[0].expected == "date"

    def test_rejects_invalid_timestamp(self):
        with pytest.raises(ValidationError) as exc_info:
            validator.date().parse(_InvalidDateTime(2024, 1, 1))

        (issue,) = exc_info.value.issues
        assert issue.expected == "date"
        assert issue.received == "date"

    def test_string_date_rendered_in_message(self):
        with pytest.raises(ValidationError) as exc_info:
            validator.date().parse("2024-01-01")
        assert exc_info.value.issues[0].received == "string"
        assert 'Value: "2024-01-01"' in exc_info.value.issues[0].message
