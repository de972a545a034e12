# -*- coding: utf-8 -*-
"""
Validation Evaluator - applies a Schema to a payload.

Stateless and re-entrant: the same Schema can be evaluated concurrently by
any number of forms with different contexts.
"""

from typing import Any, Awaitable, Callable, Dict, Iterable, List, Mapping, Optional

from services.exceptions import FieldValidationError, FormValidationFailure
from services.validation.schema import FieldSpec, Schema, ValidationContext
from utils.datetime_utils import today
from utils.logger import get_logger

logger = get_logger(__name__)

# (value, payload, context) -> awaitable message | None
AsyncCheck = Callable[[Any, Mapping[str, Any], ValidationContext], Awaitable[Optional[str]]]


class ValidationResult(dict):
    """
    Field name -> first error message.

    An empty result means the payload is valid.
    """

    @property
    def is_valid(self) -> bool:
        return len(self) == 0

    @property
    def field_errors(self) -> List[FieldValidationError]:
        return [FieldValidationError(name, message) for name, message in self.items()]

    def first_error(self) -> Optional[str]:
        """First message in schema order, for a one-line summary."""
        return next(iter(self.values()), None)

    def summary(self, separator: str = " | ") -> str:
        return separator.join(self.values())

    def to_failure(self, message: str = "") -> FormValidationFailure:
        return FormValidationFailure(dict(self), message)


def evaluate_field(spec: FieldSpec, payload: Mapping[str, Any], context: ValidationContext) -> Optional[str]:
    """
    Evaluate one field's rules in order.

    Returns the first failing message, or None. A false applicability
    predicate or an inactive conditional rule exempts the field.
    """
    if spec.applies_when is not None and not spec.applies_when(payload, context):
        return None

    value = payload.get(spec.name)
    for rule in spec.rules:
        if not rule.is_active(payload, context):
            return None
        message = rule.evaluate(value, payload, context)
        if message:
            return message
    return None


def _prepare(schema: Schema, payload: Optional[Mapping[str, Any]], context: Any, fields: Optional[Iterable[str]]):
    ctx = ValidationContext.coerce(context)
    if ctx.today is None:
        # One reading of the clock per pass
        ctx = ctx.with_today(today())

    if fields is None:
        names = schema.field_names
    else:
        wanted = set(fields)
        unknown = wanted.difference(schema.field_names)
        if unknown:
            logger.debug(f"Ignoring fields not declared by schema '{schema.entity}': {sorted(unknown)}")
        names = tuple(name for name in schema.field_names if name in wanted)

    return payload or {}, ctx, names


def validate(
    schema: Schema,
    payload: Optional[Mapping[str, Any]],
    context: Any = None,
    fields: Optional[Iterable[str]] = None,
) -> ValidationResult:
    """
    Validate a payload against a schema.

    Args:
        schema: Entity schema
        payload: Candidate values; keys the schema does not declare are ignored
        context: ValidationContext, a mapping such as ``{"is_creating": True}``, or None
        fields: Restrict the pass to these field names (used by multi-step forms)

    Returns:
        ValidationResult (empty when valid), ordered as the schema declares fields
    """
    payload, ctx, names = _prepare(schema, payload, context, fields)

    result = ValidationResult()
    for name in names:
        message = evaluate_field(schema.fields[name], payload, ctx)
        if message:
            result[name] = message

    if result:
        logger.debug(f"Schema '{schema.entity}' rejected fields: {list(result)}")
    return result


async def validate_async(
    schema: Schema,
    payload: Optional[Mapping[str, Any]],
    context: Any = None,
    fields: Optional[Iterable[str]] = None,
    remote_checks: Optional[Dict[str, AsyncCheck]] = None,
) -> ValidationResult:
    """
    Validate, then run asynchronous checks (e.g. server-side uniqueness).

    Remote checks only run for fields that passed their local rules, and
    every remote check of the pass sees the same context (same ``today``).
    """
    payload, ctx, names = _prepare(schema, payload, context, fields)
    result = validate(schema, payload, ctx, fields=names)

    for name, check in (remote_checks or {}).items():
        if name not in names or name in result:
            continue
        message = await check(payload.get(name), payload, ctx)
        if message:
            result[name] = message

    # Keep schema order for display
    return ValidationResult((name, result[name]) for name in names if name in result)
