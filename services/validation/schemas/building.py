# -*- coding: utf-8 -*-
"""Building schema."""

from app.config import Config, Vocabularies
from services.validation.rules import (
    integer,
    max_length,
    min_length,
    number_range,
    one_of,
    positive,
    required,
)
from services.validation.schema import Schema, field

building_schema = Schema("building", [
    field(
        "company_id",
        required("validation.building.company_required"),
        positive("validation.building.company_invalid", number_message="validation.building.company_invalid"),
        integer("validation.building.company_invalid", number_message="validation.building.company_invalid"),
    ),
    field(
        "building_number",
        required("validation.building.number_required"),
        max_length(50, "validation.building.number_too_long"),
    ),
    field(
        "name",
        required("validation.building.name_required"),
        min_length(2, "validation.building.name_too_short"),
        max_length(100, "validation.building.name_too_long"),
    ),
    field(
        "address",
        required("validation.building.address_required"),
        min_length(5, "validation.building.address_too_short"),
        max_length(255, "validation.building.address_too_long"),
    ),
    field(
        "building_type",
        required("validation.building.type_required"),
        one_of(Vocabularies.values(Vocabularies.BUILDING_TYPES), "validation.building.type_invalid"),
    ),
    field(
        "total_units",
        required("validation.building.units_required"),
        integer("validation.building.units_integer", number_message="validation.number_only"),
        number_range(
            1, Config.MAX_BUILDING_UNITS,
            min_message="validation.building.units_min",
            max_message="validation.building.units_max",
        ),
    ),
    field(
        "total_floors",
        required("validation.building.floors_required"),
        integer("validation.building.floors_integer", number_message="validation.number_only"),
        number_range(
            1, Config.MAX_BUILDING_FLOORS,
            min_message="validation.building.floors_min",
            max_message="validation.building.floors_max",
        ),
    ),
    field(
        "internal_parking_spaces",
        integer("validation.building.parking_integer", number_message="validation.number_only"),
        number_range(
            0, Config.MAX_PARKING_SPACES,
            min_message="validation.building.parking_negative",
            max_message="validation.building.parking_max",
        ),
    ),
    field(
        "description",
        max_length(500),
    ),
])
