# -*- coding: utf-8 -*-
"""
Service request schema.

The accepted subtypes depend on the selected service type, so changing the
type must also reset the subtype; ``service_type_change`` builds that
combined update for ``FormController.update_fields``.
"""

from typing import Any, Dict, Optional, Tuple

from app.config import Config, Vocabularies
from services.validation.rules import (
    integer,
    max_length,
    min_length,
    one_of,
    positive,
    required,
    satisfies,
)
from services.validation.schema import Schema, field


def subtypes_for(service_type: Optional[str]) -> Tuple[str, ...]:
    """Accepted subtype values for a service type (empty for unknown types)."""
    return Vocabularies.values(Vocabularies.SERVICE_SUBTYPES.get(service_type, []))


def _subtype_matches_type(value, payload, context) -> bool:
    return value in subtypes_for(payload.get("service_type"))


def service_type_change(new_type: str) -> Dict[str, Any]:
    """
    Field updates implied by selecting ``new_type``.

    The subtype falls back to the first subtype of the new type (None when
    the type has none).
    """
    subtypes = subtypes_for(new_type)
    return {
        "service_type": new_type,
        "service_subtype": subtypes[0] if subtypes else None,
    }


service_schema = Schema("service", [
    field(
        "reservation_id",
        required("validation.service.reservation_required"),
        positive("validation.service.reservation_invalid", number_message="validation.service.reservation_invalid"),
        integer("validation.service.reservation_invalid", number_message="validation.service.reservation_invalid"),
    ),
    field(
        "service_type",
        required("validation.service.type_required"),
        one_of(Vocabularies.values(Vocabularies.SERVICE_TYPES), "validation.service.type_invalid"),
    ),
    field(
        "service_subtype",
        required("validation.service.subtype_required"),
        satisfies(_subtype_matches_type, "validation.service.subtype_invalid"),
    ),
    field(
        "description",
        required("validation.service.description_required"),
        min_length(10, "validation.service.description_too_short"),
        max_length(Config.MAX_NOTES_LENGTH, "validation.service.description_too_long"),
    ),
])
