# -*- coding: utf-8 -*-
"""
Unit schema.

``unit_layout`` is only asked for apartments; for every other unit type
it is nullable and not checked.
"""

from app.config import Config, Vocabularies
from services.validation.rules import (
    field_equals,
    integer,
    max_length,
    max_value,
    number_range,
    one_of,
    positive,
    required,
    required_when,
)
from services.validation.schema import Schema, field

is_apartment = field_equals("unit_type", "apartment")

unit_schema = Schema("unit", [
    field(
        "building_id",
        required("validation.unit.building_required"),
        positive("validation.unit.building_invalid", number_message="validation.unit.building_invalid"),
        integer("validation.unit.building_invalid", number_message="validation.unit.building_invalid"),
    ),
    field(
        "unit_number",
        required("validation.unit.number_required"),
        max_length(20, "validation.unit.number_too_long"),
    ),
    field(
        "unit_type",
        required("validation.unit.type_required"),
        one_of(Vocabularies.values(Vocabularies.UNIT_TYPES), "validation.unit.type_invalid"),
    ),
    field(
        "unit_layout",
        required_when(is_apartment, "validation.unit.layout_required"),
        one_of(Vocabularies.values(Vocabularies.UNIT_LAYOUTS), "validation.unit.layout_invalid"),
    ),
    field(
        "floor",
        required("validation.unit.floor_required"),
        max_length(10, "validation.unit.floor_too_long"),
    ),
    field(
        "area",
        required("validation.unit.area_required"),
        positive("validation.unit.area_positive", number_message="validation.unit.area_invalid"),
        max_value(Config.MAX_UNIT_AREA, "validation.unit.area_too_large"),
    ),
    field(
        "bedrooms",
        integer("validation.unit.rooms_integer", number_message="validation.number_only"),
        number_range(0, Config.MAX_UNIT_BEDROOMS, min_message="validation.unit.rooms_negative"),
    ),
    field(
        "bathrooms",
        required("validation.unit.bathrooms_required"),
        integer("validation.unit.rooms_integer", number_message="validation.number_only"),
        number_range(0, Config.MAX_UNIT_BATHROOMS, min_message="validation.unit.rooms_negative"),
    ),
    field(
        "price",
        required("validation.unit.price_required"),
        positive("validation.unit.price_positive", number_message="validation.unit.price_invalid"),
        max_value(Config.MAX_UNIT_PRICE, "validation.unit.price_too_large"),
    ),
    field(
        "status",
        required("validation.unit.status_required"),
        one_of(Vocabularies.values(Vocabularies.UNIT_STATUS), "validation.unit.status_invalid"),
    ),
    field(
        "description",
        max_length(1000),
    ),
])
