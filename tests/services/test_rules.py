# -*- coding: utf-8 -*-
"""
Tests for validation rule primitives.

Tests cover:
- Presence and conditional presence
- String length and format rules
- Numeric rules (including non-numeric input)
- Day-granularity date rules
- File checks
"""

from datetime import date, datetime, timedelta

import pytest

from models.attachment import AttachmentFile
from services.translation_manager import tr
from services.validation.rules import (
    attachment_validator,
    context_flag,
    date_after,
    date_not_in_future,
    date_not_in_past,
    email,
    field_equals,
    file_reference,
    file_size,
    file_type,
    format_file_size,
    format_number,
    integer,
    is_empty,
    matches_field,
    max_length,
    max_value,
    min_length,
    number_range,
    one_of,
    pattern,
    phone,
    positive,
    required,
    required_file,
    required_when,
    satisfies,
    to_number,
    valid_date,
)
from services.validation.schema import ValidationContext


class TestHelpers:
    """Test value coercion helpers."""

    @pytest.mark.parametrize("value", [None, "", "   ", [], {}])
    def test_empty_values(self, value):
        assert is_empty(value) is True

    @pytest.mark.parametrize("value", [0, False, "0", [0]])
    def test_non_empty_values(self, value):
        assert is_empty(value) is False

    def test_to_number_parses_strings(self):
        assert to_number("2500.50") == 2500.5
        assert to_number(" 42 ") == 42
        assert isinstance(to_number("42"), int)

    @pytest.mark.parametrize("value", ["abc", "NaN", "inf", float("nan"), float("inf"), True, None, object()])
    def test_to_number_rejects_non_finite(self, value):
        assert to_number(value) is None

    @pytest.mark.parametrize("value", ["1" + "0" * 400, "1e99999999", "-1E400", 10 ** 400])
    def test_to_number_rejects_values_beyond_float_range(self, value):
        assert to_number(value) is None

    def test_to_number_exponent_notation(self):
        assert to_number("1e3") == 1000
        assert to_number("2.5E-1") == 0.25

    def test_format_number(self):
        assert format_number(10000000) == "10,000,000"
        assert format_number(2.5) == "2.5"

    def test_format_file_size(self):
        assert format_file_size(5 * 1024 * 1024) == "5 MB"
        assert format_file_size(0) == "0 Bytes"


class TestPresenceRules:
    """Test required and required_when."""

    def test_required_fails_on_blank(self):
        rule = required()
        assert rule(None) == tr("validation.required")
        assert rule("  ") == tr("validation.required")
        assert rule("x") is None

    def test_required_message_override(self):
        assert required("validation.payment.amount_required")(None) == "Amount is required"

    def test_literal_message_is_returned_verbatim(self):
        assert required("Pick one")(None) == "Pick one"

    def test_required_when_is_inactive_when_predicate_false(self):
        rule = required_when(field_equals("payment_method", "check"))
        assert rule.is_active({"payment_method": "cash"}, None) is False
        assert rule.is_active({"payment_method": "check"}, None) is True

    def test_context_flag_predicate(self):
        predicate = context_flag("is_creating")
        assert predicate({}, ValidationContext(is_creating=True)) is True
        assert predicate({}, ValidationContext()) is False
        assert predicate({}, None) is False


class TestStringRules:
    """Test length and format rules."""

    def test_min_length_uses_stripped_value(self):
        rule = min_length(3)
        assert rule(" ab ") == tr("validation.min_length", min=3)
        assert rule("abc") is None

    def test_max_length(self):
        rule = max_length(5)
        assert rule("abcdef") == "Must not exceed 5 characters"
        assert rule("abcde") is None

    def test_length_rules_pass_on_empty(self):
        assert min_length(3)(None) is None
        assert max_length(3)("") is None

    def test_pattern_requires_full_match(self):
        rule = pattern(r"[a-z]+")
        assert rule("abc") is None
        assert rule("abc1") == tr("validation.invalid_format")

    @pytest.mark.parametrize("value", ["user@example.com", "first.last+tag@sub.example.org"])
    def test_valid_emails(self, value):
        assert email()(value) is None

    @pytest.mark.parametrize("value", ["user@", "@example.com", "user example.com", "user@example"])
    def test_invalid_emails(self, value):
        assert email()(value) == tr("validation.invalid_email")

    @pytest.mark.parametrize("value", ["+971 50 123 4567", "(02) 555-1234", "0501234567"])
    def test_valid_phones(self, value):
        assert phone()(value) is None

    @pytest.mark.parametrize("value", ["12345", "phone", "+-- ()---  ", "050-12a-4567"])
    def test_invalid_phones(self, value):
        assert phone()(value) == tr("validation.invalid_phone")

    def test_one_of(self):
        rule = one_of(("cash", "check"))
        assert rule("check") is None
        assert rule("checks") == tr("validation.invalid_choice")


class TestNumberRules:
    """Test numeric rules."""

    def test_positive_rejects_zero(self):
        assert positive()(0) == tr("validation.positive")
        assert positive()(0.01) is None

    def test_positive_rejects_negative(self):
        assert positive()(-5) == tr("validation.positive")

    @pytest.mark.parametrize("value", ["abc", "NaN", float("nan"), True])
    def test_non_numeric_input_fails_with_number_message(self, value):
        assert positive()(value) == tr("validation.invalid_number")

    def test_number_message_override(self):
        rule = positive("validation.payment.amount_positive", number_message="validation.payment.amount_invalid")
        assert rule("ten") == "Amount must be a valid number"
        assert rule(0) == "Amount must be greater than zero"

    def test_max_value_is_inclusive(self):
        rule = max_value(100)
        assert rule(100) is None
        assert rule(100.01) == "Must not exceed 100"

    def test_range_messages_carry_formatted_limits(self):
        rule = number_range(1, 1000)
        assert rule(0) == "Must be at least 1"
        assert rule(1001) == "Must not exceed 1,000"
        assert rule("500") is None

    def test_integer(self):
        rule = integer()
        assert rule(3) is None
        assert rule("3") is None
        assert rule(3.5) == tr("validation.integer")
        assert rule("three") == tr("validation.invalid_number")

    @pytest.mark.parametrize("value", ["1" + "0" * 400, 10 ** 400, "1e99999999"])
    def test_huge_numbers_fail_without_raising(self, value):
        assert integer()(value) == tr("validation.invalid_number")
        assert max_value(100)(value) == tr("validation.invalid_number")

    def test_integer_accepts_exponent_whole_number(self):
        assert integer()("1e3") is None
        assert integer()("1.5e0") == tr("validation.integer")


class TestDateRules:
    """Test day-granularity date rules."""

    def test_valid_date(self):
        rule = valid_date()
        assert rule("2024-02-29") is None
        assert rule("2023-02-29") == tr("validation.invalid_date")
        assert rule(date(2024, 1, 1)) is None

    def test_not_in_future_uses_day_granularity(self):
        ctx = ValidationContext(today=date(2024, 5, 10))
        rule = date_not_in_future()
        assert rule(datetime(2024, 5, 10, 23, 59), {}, ctx) is None
        assert rule("2024-05-11", {}, ctx) == tr("validation.date_in_future")

    def test_not_in_future_reports_unparseable_input(self):
        rule = date_not_in_future("validation.payment.date_in_future", "validation.payment.date_invalid")
        assert rule("31/12/2024") == "Invalid payment date"

    def test_not_in_past_accepts_today(self):
        ctx = ValidationContext(today=date(2024, 5, 10))
        rule = date_not_in_past()
        assert rule("2024-05-10", {}, ctx) is None
        assert rule("2024-05-09T08:00:00", {}, ctx) == tr("validation.date_in_past")

    def test_not_in_future_without_context_uses_wall_clock(self):
        tomorrow = date.today() + timedelta(days=1)
        assert date_not_in_future()(tomorrow) == tr("validation.date_in_future")
        assert date_not_in_future()(date.today()) is None

    def test_date_after_is_strict(self):
        rule = date_after("start_date")
        payload = {"start_date": "2024-01-01"}
        assert rule("2024-01-02", payload) is None
        assert rule("2024-01-01", payload) == tr("validation.date_not_after")

    def test_date_after_skips_comparison_without_other_date(self):
        assert date_after("start_date")("2024-01-01", {}) is None


class TestCrossFieldRules:
    """Test rules that read other fields."""

    def test_matches_field(self):
        rule = matches_field("new_password")
        assert rule("secret1", {"new_password": "secret1"}) is None
        assert rule("secret2", {"new_password": "secret1"}) == tr("validation.fields_mismatch")

    def test_satisfies(self):
        rule = satisfies(lambda value, payload, ctx: value in payload.get("allowed", ()))
        assert rule("a", {"allowed": ("a", "b")}) is None
        assert rule("c", {"allowed": ("a", "b")}) == tr("validation.invalid_value")

    def test_satisfies_treats_exception_as_failure(self):
        def broken(value, payload, ctx):
            raise RuntimeError("boom")

        assert satisfies(broken, "Broken")("x") == "Broken"


class TestFileRules:
    """Test attachment checks."""

    def test_file_reference_accepts_attachment_or_url(self):
        rule = file_reference()
        assert rule(AttachmentFile(name="id.png", data=b"x")) is None
        assert rule("https://cdn.example/id.png") is None
        assert rule(42) == tr("validation.file_required")

    def test_file_type(self):
        rule = file_type(("image/png",))
        assert rule(AttachmentFile(name="a.png", data=b"x")) is None
        assert rule(AttachmentFile(name="a.pdf", data=b"x")) == tr("validation.invalid_file_type")
        assert rule(None) is None

    def test_file_size(self):
        rule = file_size(1024)
        assert rule(AttachmentFile(name="a.png", data=b"x" * 1024)) is None
        assert rule(AttachmentFile(name="a.png", data=b"x" * 1025)) == "File size must not exceed 1 KB"

    def test_attachment_validator_first_failure_wins(self):
        validator = attachment_validator(
            required_file("validation.payment.check_image_required"),
            file_type(("image/png",)),
            file_size(10),
        )
        assert validator(None) == "Check image is required"
        assert validator(AttachmentFile(name="a.gif", data=b"x" * 100)) == tr("validation.invalid_file_type")
        assert validator(AttachmentFile(name="a.png", data=b"x")) is None
