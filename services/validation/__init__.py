# -*- coding: utf-8 -*-
"""Validation services package."""

from .schema import FieldSpec, Schema, ValidationContext, field
from .evaluator import ValidationResult, evaluate_field, validate, validate_async
from .validation_factory import ValidationFactory

__all__ = [
    'FieldSpec',
    'Schema',
    'ValidationContext',
    'ValidationFactory',
    'ValidationResult',
    'evaluate_field',
    'field',
    'validate',
    'validate_async',
]
