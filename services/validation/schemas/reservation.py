# -*- coding: utf-8 -*-
"""
Reservation schema.

A reservation either points at an existing tenant (``user_id``) or creates
one on the fly; the form tells which through the ``create_new_tenant``
context flag.
"""

from typing import Any, Dict, Mapping

from app.config import Config, Vocabularies
from services.validation.rules import (
    attachment_validator,
    context_flag,
    date_after,
    email,
    field_truthy,
    file_size,
    file_type,
    integer,
    max_length,
    min_length,
    negate,
    one_of,
    phone,
    positive,
    required,
    required_file,
    required_when,
    valid_date,
)
from services.validation.schema import Schema, field

creates_tenant = context_flag("create_new_tenant")
existing_tenant = negate(creates_tenant)
has_deposit = field_truthy("includes_deposit")

reservation_schema = Schema("reservation", [
    field(
        "user_id",
        required_when(existing_tenant, "validation.reservation.tenant_required"),
        positive("validation.reservation.tenant_invalid", number_message="validation.reservation.tenant_invalid"),
        integer("validation.reservation.tenant_invalid", number_message="validation.reservation.tenant_invalid"),
    ),
    field(
        "tenant_full_name",
        required_when(creates_tenant, "validation.tenant.full_name_required"),
        min_length(2, "validation.tenant.full_name_too_short"),
        max_length(100, "validation.tenant.full_name_too_long"),
    ),
    field(
        "tenant_email",
        required_when(creates_tenant, "validation.tenant.email_required"),
        email("validation.tenant.email_invalid"),
    ),
    field(
        "tenant_phone",
        required_when(creates_tenant, "validation.tenant.phone_required"),
        phone("validation.tenant.phone_invalid"),
    ),
    field(
        "tenant_id_number",
        required_when(creates_tenant, "validation.tenant.id_number_required"),
        min_length(4, "validation.tenant.id_number_too_short"),
        max_length(50, "validation.tenant.id_number_too_long"),
    ),
    field(
        "unit_id",
        required("validation.reservation.unit_required"),
        positive("validation.reservation.unit_invalid", number_message="validation.reservation.unit_invalid"),
        integer("validation.reservation.unit_invalid", number_message="validation.reservation.unit_invalid"),
    ),
    field(
        "contract_type",
        required("validation.reservation.contract_type_required"),
        one_of(Vocabularies.values(Vocabularies.CONTRACT_TYPES), "validation.reservation.contract_type_invalid"),
    ),
    field(
        "start_date",
        required("validation.reservation.start_date_required"),
        valid_date("validation.reservation.start_date_invalid"),
    ),
    field(
        "end_date",
        required("validation.reservation.end_date_required"),
        date_after("start_date", "validation.reservation.end_before_start", "validation.reservation.end_date_invalid"),
    ),
    field(
        "payment_method",
        required("validation.reservation.payment_method_required"),
        one_of(Vocabularies.RESERVATION_PAYMENT_METHODS, "validation.reservation.payment_method_invalid"),
    ),
    field(
        "payment_schedule",
        required("validation.reservation.payment_schedule_required"),
        one_of(Vocabularies.values(Vocabularies.PAYMENT_SCHEDULES), "validation.reservation.payment_schedule_invalid"),
    ),
    field(
        "deposit_amount",
        required_when(has_deposit, "validation.reservation.deposit_required"),
        positive("validation.reservation.deposit_positive", number_message="validation.reservation.deposit_invalid"),
    ),
    field(
        "notes",
        max_length(Config.MAX_NOTES_LENGTH, "validation.reservation.notes_too_long"),
    ),
])


def reservation_attachment_validators(values: Mapping[str, Any], creating_tenant: bool = False) -> Dict[str, Any]:
    """
    File validators for a reservation form.

    Identity images are mandatory when the reservation creates its tenant;
    the commercial register image is mandatory for commercial tenant types.
    """
    image_checks = (
        file_type(Config.IMAGE_TYPES, "validation.attachment.image_invalid"),
        file_size(Config.MAX_IMAGE_SIZE, "validation.attachment.image_too_large"),
    )
    pdf_checks = (
        file_type(Config.PDF_TYPES, "validation.attachment.pdf_invalid"),
        file_size(Config.MAX_DOCUMENT_SIZE, "validation.attachment.document_too_large"),
    )

    def image(mandatory: bool, message: str):
        if mandatory:
            return attachment_validator(required_file(message), *image_checks)
        return attachment_validator(*image_checks)

    commercial = values.get("tenant_type") in Vocabularies.COMMERCIAL_TENANT_TYPES

    return {
        "contract_image": attachment_validator(*image_checks),
        "contract_pdf": attachment_validator(*pdf_checks),
        "identity_image_front": image(creating_tenant, "validation.tenant.identity_front_required"),
        "identity_image_back": image(creating_tenant, "validation.tenant.identity_back_required"),
        "commercial_register_image": image(
            creating_tenant and commercial, "validation.tenant.commercial_register_required"
        ),
    }
