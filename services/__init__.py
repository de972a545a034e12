# -*- coding: utf-8 -*-
"""
Aqarat Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "ValidationFactory",
    "ValidationContext",
    "validate",
    "tr",
    "extract_error_message",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "ValidationFactory":
        from .validation.validation_factory import ValidationFactory
        return ValidationFactory
    elif name == "ValidationContext":
        from .validation.schema import ValidationContext
        return ValidationContext
    elif name == "validate":
        from .validation.evaluator import validate
        return validate
    elif name == "tr":
        from .translation_manager import tr
        return tr
    elif name == "extract_error_message":
        from .error_mapper import extract_error_message
        return extract_error_message
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
