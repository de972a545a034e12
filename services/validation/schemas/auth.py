# -*- coding: utf-8 -*-
"""Login and change-password schemas."""

from app.config import Config
from services.validation.rules import matches_field, min_length, required
from services.validation.schema import Schema, field

login_schema = Schema("login", [
    field(
        "username",
        required("validation.auth.username_required"),
        min_length(3, "validation.auth.username_too_short"),
    ),
    field(
        "password",
        required("validation.auth.password_required"),
        min_length(Config.MIN_PASSWORD_LENGTH, "validation.password_too_short"),
    ),
])

change_password_schema = Schema("change_password", [
    field(
        "current_password",
        required("validation.auth.current_password_required"),
    ),
    field(
        "new_password",
        required("validation.auth.new_password_required"),
        min_length(Config.MIN_PASSWORD_LENGTH, "validation.password_too_short"),
    ),
    field(
        "confirm_password",
        required("validation.auth.confirm_password_required"),
        matches_field("new_password", "validation.auth.passwords_mismatch"),
    ),
])
