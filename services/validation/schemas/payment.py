# -*- coding: utf-8 -*-
"""
Payment schema.

Method-dependent fields:
- check: check_number, bank_name, check_date (today or later), check image
- bank_transfer: bank_name, transfer_reference
Status-dependent fields:
- pending/delayed: due_date
- delayed: late_fee (cleared for any other status)
"""

from typing import Any, Dict, Mapping

from app.config import Config, Vocabularies
from services.validation.rules import (
    attachment_validator,
    date_not_in_future,
    date_not_in_past,
    field_equals,
    field_in,
    file_size,
    file_type,
    integer,
    max_length,
    max_value,
    min_length,
    min_value,
    one_of,
    positive,
    required,
    required_file,
    required_when,
    valid_date,
)
from services.validation.schema import Schema, field

PAYMENT_METHODS = Vocabularies.values(Vocabularies.PAYMENT_METHODS)
PAYMENT_STATUSES = Vocabularies.values(Vocabularies.PAYMENT_STATUS)

is_check = field_equals("payment_method", "check")
needs_bank = field_in("payment_method", ("check", "bank_transfer"))
is_bank_transfer = field_equals("payment_method", "bank_transfer")
needs_due_date = field_in("status", ("pending", "delayed"))
is_delayed = field_equals("status", "delayed")


def clear_late_fee(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Late fee only means something on a delayed payment."""
    if payload.get("status") != "delayed":
        payload["late_fee"] = None
    return payload


payment_schema = Schema("payment", [
    field(
        "reservation_id",
        required("validation.payment.reservation_required"),
        positive("validation.payment.reservation_invalid", number_message="validation.payment.reservation_invalid"),
        integer("validation.payment.reservation_invalid", number_message="validation.payment.reservation_invalid"),
    ),
    field(
        "amount",
        required("validation.payment.amount_required"),
        positive("validation.payment.amount_positive", number_message="validation.payment.amount_invalid"),
        max_value(Config.MAX_PAYMENT_AMOUNT, "validation.payment.amount_too_large"),
    ),
    field(
        "payment_date",
        required("validation.payment.date_required"),
        date_not_in_future("validation.payment.date_in_future", "validation.payment.date_invalid"),
    ),
    field(
        "payment_method",
        required("validation.payment.method_required"),
        one_of(PAYMENT_METHODS, "validation.payment.method_invalid"),
    ),
    field(
        "status",
        required("validation.payment.status_required"),
        one_of(PAYMENT_STATUSES, "validation.payment.status_invalid"),
    ),
    field(
        "notes",
        max_length(Config.MAX_NOTES_LENGTH, "validation.payment.notes_too_long"),
    ),
    field(
        "check_number",
        required_when(is_check, "validation.payment.check_number_required"),
        min_length(3, "validation.payment.check_number_too_short"),
        max_length(50, "validation.payment.check_number_too_long"),
    ),
    field(
        "bank_name",
        required_when(needs_bank, "validation.payment.bank_name_required"),
        min_length(2, "validation.payment.bank_name_too_short"),
        max_length(100, "validation.payment.bank_name_too_long"),
    ),
    field(
        "check_date",
        required_when(is_check, "validation.payment.check_date_required"),
        date_not_in_past("validation.payment.check_date_in_past", "validation.payment.check_date_invalid"),
    ),
    field(
        "transfer_reference",
        required_when(is_bank_transfer, "validation.payment.transfer_reference_required"),
        min_length(3, "validation.payment.transfer_reference_too_short"),
        max_length(100, "validation.payment.transfer_reference_too_long"),
    ),
    field(
        "late_fee",
        min_value(0, "validation.payment.late_fee_negative", number_message="validation.payment.late_fee_invalid"),
        max_value(Config.MAX_LATE_FEE, "validation.payment.late_fee_too_large"),
        when=is_delayed,
    ),
    field(
        "due_date",
        required_when(needs_due_date, "validation.payment.due_date_required"),
        valid_date("validation.payment.due_date_invalid"),
    ),
], cleaners=[clear_late_fee])


def payment_attachment_validators(values: Mapping[str, Any]) -> Dict[str, Any]:
    """
    File validators for a payment form.

    The check image is mandatory only for check payments, so the
    validator set depends on the current values.
    """
    image_checks = (
        file_type(Config.IMAGE_TYPES, "validation.payment.image_invalid"),
        file_size(Config.MAX_DOCUMENT_SIZE, "validation.payment.image_too_large"),
    )

    validators = {
        "receipt_image": attachment_validator(*image_checks),
    }
    if values.get("payment_method") == "check":
        validators["check_image"] = attachment_validator(
            required_file("validation.payment.check_image_required"), *image_checks
        )
    else:
        validators["check_image"] = attachment_validator(*image_checks)
    return validators
