# -*- coding: utf-8 -*-
"""
Company schema.

Creating a company also provisions its manager account, so the manager
fields are required only when ``context.is_creating`` is true.
"""

from app.config import Config, Vocabularies
from services.validation.rules import (
    attachment_validator,
    context_flag,
    email,
    file_size,
    file_type,
    max_length,
    min_length,
    one_of,
    phone,
    required,
    required_when,
)
from services.validation.schema import Schema, field

is_creating = context_flag("is_creating")

company_schema = Schema("company", [
    field(
        "name",
        required("validation.company.name_required"),
        min_length(2, "validation.company.name_too_short"),
        max_length(100, "validation.company.name_too_long"),
    ),
    field(
        "company_type",
        required("validation.company.type_required"),
        one_of(Vocabularies.values(Vocabularies.COMPANY_TYPES), "validation.company.type_invalid"),
    ),
    field(
        "email",
        required("validation.company.email_required"),
        email("validation.company.email_invalid"),
    ),
    field(
        "phone",
        required("validation.company.phone_required"),
        phone("validation.company.phone_invalid"),
    ),
    field(
        "secondary_phone",
        phone("validation.company.phone_invalid"),
    ),
    field(
        "address",
        required("validation.company.address_required"),
        min_length(5, "validation.company.address_too_short"),
        max_length(255, "validation.company.address_too_long"),
    ),
    field(
        "registration_number",
        min_length(5, "validation.company.registration_too_short"),
        max_length(50, "validation.company.registration_too_long"),
    ),
    field(
        "manager_full_name",
        required_when(is_creating, "validation.company.manager_name_required"),
        min_length(2, "validation.company.manager_name_too_short"),
        max_length(100, "validation.company.manager_name_too_long"),
    ),
    field(
        "manager_email",
        required_when(is_creating, "validation.company.manager_email_required"),
        email("validation.company.manager_email_invalid"),
    ),
    field(
        "manager_phone",
        required_when(is_creating, "validation.company.manager_phone_required"),
        phone("validation.company.manager_phone_invalid"),
    ),
])

COMPANY_ATTACHMENT_VALIDATORS = {
    "logo_image": attachment_validator(
        file_type(Config.IMAGE_TYPES, "validation.company.logo_invalid"),
        file_size(Config.MAX_IMAGE_SIZE, "validation.company.logo_too_large"),
    ),
}
