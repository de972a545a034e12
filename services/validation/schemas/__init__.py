# -*- coding: utf-8 -*-
"""Entity schemas."""

from .auth import change_password_schema, login_schema
from .building import building_schema
from .company import COMPANY_ATTACHMENT_VALIDATORS, company_schema
from .payment import clear_late_fee, payment_attachment_validators, payment_schema
from .reservation import reservation_attachment_validators, reservation_schema
from .service import service_schema, service_type_change, subtypes_for
from .tenant import tenant_schema
from .unit import unit_schema

__all__ = [
    "building_schema",
    "change_password_schema",
    "clear_late_fee",
    "company_schema",
    "COMPANY_ATTACHMENT_VALIDATORS",
    "login_schema",
    "payment_attachment_validators",
    "payment_schema",
    "reservation_attachment_validators",
    "reservation_schema",
    "service_schema",
    "service_type_change",
    "subtypes_for",
    "tenant_schema",
    "unit_schema",
]
