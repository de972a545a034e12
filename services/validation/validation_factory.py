# -*- coding: utf-8 -*-
"""
Validation Factory - registry of entity schemas.

Provides a central point for looking up the schema of an entity and
validating records against it.
"""

from typing import Any, Dict, List, Mapping, Optional

from services.validation.evaluator import ValidationResult, validate
from services.validation.schema import Schema
from utils.logger import get_logger

logger = get_logger(__name__)


class ValidationFactory:
    """
    Registry mapping entity names to their schemas.

    Entity names are case-insensitive. Looking up an entity that was never
    registered is a configuration error and raises ``KeyError``.
    """

    def __init__(self, register_defaults: bool = True):
        """Initialize the validation factory."""
        self._schemas: Dict[str, Schema] = {}
        if register_defaults:
            self._register_default_schemas()

    def _register_default_schemas(self):
        """Register the built-in entity schemas."""
        from services.validation.schemas import (
            building_schema,
            change_password_schema,
            company_schema,
            login_schema,
            payment_schema,
            reservation_schema,
            service_schema,
            tenant_schema,
            unit_schema,
        )

        for schema in (
            company_schema,
            building_schema,
            unit_schema,
            payment_schema,
            reservation_schema,
            tenant_schema,
            service_schema,
            login_schema,
            change_password_schema,
        ):
            self.register_schema(schema)

    def register_schema(self, schema: Schema, entity: Optional[str] = None):
        """
        Register a schema.

        Args:
            schema: Schema instance
            entity: Name to register under (defaults to ``schema.entity``)
        """
        name = (entity or schema.entity).lower()
        if name in self._schemas and self._schemas[name] is not schema:
            logger.warning(f"Replacing schema registered for entity '{name}'")
        self._schemas[name] = schema

    def get_schema(self, entity: str) -> Schema:
        """
        Get a registered schema by entity name.

        Raises:
            KeyError: if no schema is registered for ``entity``
        """
        try:
            return self._schemas[entity.lower()]
        except KeyError:
            raise KeyError(f"No schema registered for entity: {entity}") from None

    def has_schema(self, entity: str) -> bool:
        return entity.lower() in self._schemas

    def validate(self, record: Mapping[str, Any], entity: str, context: Any = None) -> ValidationResult:
        """
        Validate a record using the schema of ``entity``.

        Returns:
            ValidationResult (empty if valid)
        """
        return validate(self.get_schema(entity), record, context)

    def is_valid(self, record: Mapping[str, Any], entity: str, context: Any = None) -> bool:
        """Check if a record passes validation."""
        return self.validate(record, entity, context).is_valid

    def get_registered_types(self) -> List[str]:
        """List of registered entity names."""
        return list(self._schemas.keys())
