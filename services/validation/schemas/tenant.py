# -*- coding: utf-8 -*-
"""
Tenant schema.

Password and identity documents are only mandatory when the tenant
account is being created.
"""

from app.config import Config, Vocabularies
from services.validation.rules import (
    context_flag,
    email,
    field_in,
    file_reference,
    max_length,
    min_length,
    one_of,
    pattern,
    phone,
    required,
    required_when,
)
from services.validation.schema import Schema, field

is_creating = context_flag("is_creating")


def _creating_commercial(payload, context) -> bool:
    return is_creating(payload, context) and field_in(
        "tenant_type", Vocabularies.COMMERCIAL_TENANT_TYPES
    )(payload, context)


tenant_schema = Schema("tenant", [
    field(
        "username",
        required("validation.tenant.username_required"),
        min_length(3, "validation.tenant.username_too_short"),
        max_length(50, "validation.tenant.username_too_long"),
        pattern(r"[A-Za-z0-9_]+", "validation.tenant.username_invalid"),
    ),
    field(
        "password",
        required_when(is_creating, "validation.tenant.password_required"),
        min_length(Config.MIN_PASSWORD_LENGTH, "validation.password_too_short"),
    ),
    field(
        "full_name",
        required("validation.tenant.full_name_required"),
        min_length(2, "validation.tenant.full_name_too_short"),
        max_length(100, "validation.tenant.full_name_too_long"),
    ),
    field(
        "email",
        required("validation.tenant.email_required"),
        email("validation.tenant.email_invalid"),
    ),
    field(
        "phone",
        required("validation.tenant.phone_required"),
        phone("validation.tenant.phone_invalid"),
    ),
    field(
        "whatsapp",
        phone("validation.tenant.whatsapp_invalid"),
    ),
    field(
        "id_number",
        required("validation.tenant.id_number_required"),
        min_length(4, "validation.tenant.id_number_too_short"),
        max_length(50, "validation.tenant.id_number_too_long"),
    ),
    field(
        "tenant_type",
        required("validation.tenant.type_required"),
        one_of(Vocabularies.values(Vocabularies.TENANT_TYPES), "validation.tenant.type_invalid"),
    ),
    field("address", max_length(255)),
    field("business_activities", max_length(500)),
    field("commercial_register_number", max_length(50)),
    field("license_number", max_length(50)),
    field(
        "identity_image_front",
        required_when(is_creating, "validation.tenant.identity_front_required"),
        file_reference("validation.tenant.identity_front_required"),
    ),
    field(
        "identity_image_back",
        required_when(is_creating, "validation.tenant.identity_back_required"),
        file_reference("validation.tenant.identity_back_required"),
    ),
    field(
        "commercial_register_image",
        required_when(_creating_commercial, "validation.tenant.commercial_register_required"),
        file_reference("validation.tenant.commercial_register_required"),
    ),
])
