# -*- coding: utf-8 -*-
"""
Tests for the payment schema.

Tests cover:
- Amount boundaries
- Payment date boundaries
- Method-dependent fields (check, bank transfer, cash)
- Status-dependent fields (due date, late fee)
- Attachment validators
"""

from datetime import date, timedelta

import pytest

from app.config import Config
from models.attachment import AttachmentFile
from services.translation_manager import tr
from services.validation import validate
from services.validation.schemas import payment_attachment_validators, payment_schema


def check_payment(base, **overrides):
    payload = dict(base)
    payload.update({
        "payment_method": "check",
        "check_number": "000123",
        "bank_name": "National Bank",
        "check_date": date.today().isoformat(),
    })
    payload.update(overrides)
    return payload


class TestAmount:
    """Test amount boundaries."""

    def test_valid_payment_passes(self, valid_payment):
        assert validate(payment_schema, valid_payment) == {}

    def test_zero_amount_fails(self, valid_payment):
        valid_payment["amount"] = 0
        assert validate(payment_schema, valid_payment) == {
            "amount": "Amount must be greater than zero",
        }

    def test_amount_above_ceiling_fails(self, valid_payment):
        valid_payment["amount"] = 10_000_001
        result = validate(payment_schema, valid_payment)
        assert result["amount"] == "Amount is too large (maximum 10,000,000)"

    def test_amount_at_ceiling_passes(self, valid_payment):
        valid_payment["amount"] = Config.MAX_PAYMENT_AMOUNT
        assert "amount" not in validate(payment_schema, valid_payment)

    def test_non_numeric_amount(self, valid_payment):
        valid_payment["amount"] = "abc"
        assert validate(payment_schema, valid_payment)["amount"] == "Amount must be a valid number"

    def test_amount_as_string(self, valid_payment):
        valid_payment["amount"] = "2500.50"
        assert validate(payment_schema, valid_payment) == {}

    def test_missing_amount(self, valid_payment):
        del valid_payment["amount"]
        assert validate(payment_schema, valid_payment)["amount"] == "Amount is required"


class TestPaymentDate:
    """Test payment date boundaries."""

    def test_tomorrow_fails(self, valid_payment, tomorrow):
        valid_payment["payment_date"] = tomorrow.isoformat()
        assert validate(payment_schema, valid_payment) == {
            "payment_date": "Payment date cannot be in the future",
        }

    def test_today_passes(self, valid_payment, today):
        valid_payment["payment_date"] = today
        assert validate(payment_schema, valid_payment) == {}

    def test_past_date_passes(self, valid_payment, yesterday):
        valid_payment["payment_date"] = yesterday.isoformat()
        assert validate(payment_schema, valid_payment) == {}

    def test_missing_date_reports_required_first(self, valid_payment):
        valid_payment["payment_date"] = ""
        assert validate(payment_schema, valid_payment)["payment_date"] == "Payment date is required"


class TestPaymentMethod:
    """Test method-dependent fields."""

    def test_cash_exempts_check_and_transfer_fields(self, valid_payment):
        valid_payment.update({"check_number": None, "bank_name": None, "transfer_reference": None})
        assert validate(payment_schema, valid_payment) == {}

    def test_check_without_number_reports_only_that(self, valid_payment):
        payload = check_payment(valid_payment)
        del payload["check_number"]
        assert validate(payment_schema, payload) == {
            "check_number": tr("validation.payment.check_number_required"),
        }

    def test_check_requires_bank_and_date(self, valid_payment):
        payload = check_payment(valid_payment, bank_name="", check_date=None)
        result = validate(payment_schema, payload)
        assert result == {
            "bank_name": "Bank name is required",
            "check_date": "Check date is required",
        }

    def test_check_date_must_be_today_or_later(self, valid_payment, yesterday, tomorrow):
        assert "check_date" in validate(payment_schema, check_payment(valid_payment, check_date=yesterday))
        assert validate(payment_schema, check_payment(valid_payment, check_date=tomorrow)) == {}

    def test_short_check_number(self, valid_payment):
        result = validate(payment_schema, check_payment(valid_payment, check_number="12"))
        assert result["check_number"] == "Check number must be at least 3 characters"

    def test_bank_transfer_requires_bank_and_reference(self, valid_payment):
        valid_payment["payment_method"] = "bank_transfer"
        result = validate(payment_schema, valid_payment)
        assert set(result) == {"bank_name", "transfer_reference"}

    def test_bank_transfer_does_not_require_check_fields(self, valid_payment):
        valid_payment.update({
            "payment_method": "bank_transfer",
            "bank_name": "National Bank",
            "transfer_reference": "TRX-2024-001",
        })
        assert validate(payment_schema, valid_payment) == {}

    def test_legacy_checks_spelling_is_rejected(self, valid_payment):
        valid_payment["payment_method"] = "checks"
        assert validate(payment_schema, valid_payment) == {"payment_method": "Invalid payment method"}


class TestPaymentStatus:
    """Test status-dependent fields."""

    @pytest.mark.parametrize("status", ["pending", "delayed"])
    def test_due_date_required(self, valid_payment, status):
        valid_payment["status"] = status
        assert validate(payment_schema, valid_payment) == {"due_date": "Due date is required"}

    @pytest.mark.parametrize("status", ["paid", "cancelled"])
    def test_due_date_not_required(self, valid_payment, status):
        valid_payment["status"] = status
        assert validate(payment_schema, valid_payment) == {}

    def test_unknown_status(self, valid_payment):
        valid_payment["status"] = "refunded"
        assert validate(payment_schema, valid_payment) == {"status": "Invalid payment status"}

    def test_late_fee_checked_only_when_delayed(self, valid_payment, today):
        valid_payment["late_fee"] = -10
        assert validate(payment_schema, valid_payment) == {}

        valid_payment.update({"status": "delayed", "due_date": today.isoformat()})
        assert validate(payment_schema, valid_payment) == {"late_fee": "Late fee cannot be negative"}

    def test_cleaner_drops_late_fee_unless_delayed(self, valid_payment):
        valid_payment["late_fee"] = 50
        assert payment_schema.clean(valid_payment)["late_fee"] is None

        valid_payment["status"] = "delayed"
        assert payment_schema.clean(valid_payment)["late_fee"] == 50


class TestPaymentAttachments:
    """Test attachment validators."""

    def test_check_image_required_for_check(self):
        validators = payment_attachment_validators({"payment_method": "check"})
        assert validators["check_image"](None) == "Check image is required"

    def test_check_image_optional_for_cash(self):
        validators = payment_attachment_validators({"payment_method": "cash"})
        assert validators["check_image"](None) is None
        assert validators["receipt_image"](None) is None

    def test_receipt_must_be_image(self):
        validators = payment_attachment_validators({})
        pdf = AttachmentFile(name="receipt.pdf", data=b"%PDF")
        assert validators["receipt_image"](pdf) == tr("validation.payment.image_invalid")

    def test_receipt_size_limit(self):
        validators = payment_attachment_validators({})
        big = AttachmentFile(name="receipt.png", size=Config.MAX_DOCUMENT_SIZE + 1)
        assert validators["receipt_image"](big) == "Image size must not exceed 10 MB"
