# -*- coding: utf-8 -*-
"""
Validation Rules - atomic field checks.

Each rule is a pure callable ``rule(value, payload, context)`` that returns
``None`` when satisfied, or a translated message when it fails. Messages are
stored as translation keys and resolved through ``tr()`` at failure time, so
any schema entry can pass its own key (or a literal string) to override the
default wording.

Rules other than ``Required``/``RequiredWhen``/``RequiredFile`` pass on empty
values; emptiness is the business of the required rules.
"""

import math
import re
from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from models.attachment import AttachmentFile
from services.translation_manager import tr
from utils.datetime_utils import to_date, today as current_date
from utils.logger import get_logger

logger = get_logger(__name__)

# (payload, context) -> bool
Predicate = Callable[[Mapping[str, Any], Any], bool]


def is_empty(value: Any) -> bool:
    """Check whether a value counts as "not provided"."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def to_number(value: Any) -> Optional[float]:
    """
    Coerce a form value to a number.

    Returns None for anything that is not a finite, float-sized number
    (NaN, inf, booleans, unparseable strings, integers beyond float range).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError:
            return None
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
        number = float(value)
        return number if math.isfinite(number) else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
        if not number.is_finite():
            return None
        # Must be finite as a float before any int() conversion
        approx = float(number)
        if not math.isfinite(approx):
            return None
        if "." in text or "e" in text.lower():
            return approx
        return int(number)
    return None


def format_number(number: float) -> str:
    """Format a limit for display inside a message (10000000 -> 10,000,000)."""
    if float(number).is_integer():
        return f"{int(number):,}"
    return f"{number:,}"


def format_file_size(size: int) -> str:
    """Human readable file size (5242880 -> 5 MB)."""
    if size <= 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    value = round(value, 2)
    if float(value).is_integer():
        value = int(value)
    return f"{value} {units[index]}"


class Rule(ABC):
    """
    Abstract base class for field rules.

    Subclasses implement ``evaluate`` and use ``fail()`` to build their
    message from the configured key.
    """

    default_message = "validation.invalid_value"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message

    def is_active(self, payload: Mapping[str, Any], context) -> bool:
        """
        Whether this rule applies to the current payload.

        An inactive rule exempts the whole field: the evaluator stops and
        evaluates none of the rules after it.
        """
        return True

    @abstractmethod
    def evaluate(self, value: Any, payload: Mapping[str, Any], context) -> Optional[str]:
        """
        Check a value.

        Args:
            value: The field value (possibly None)
            payload: Full candidate payload, for cross-field rules
            context: ValidationContext of the current pass

        Returns:
            None if satisfied, otherwise the translated message
        """
        pass

    def __call__(self, value: Any, payload: Optional[Mapping[str, Any]] = None, context=None) -> Optional[str]:
        return self.evaluate(value, payload or {}, context)

    def fail(self, message: Optional[str] = None, **params) -> str:
        return tr(message or self.message, **params)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


# ==================== Presence ====================

class Required(Rule):
    """Value must be present and non-blank."""

    default_message = "validation.required"

    def evaluate(self, value, payload, context):
        if is_empty(value):
            return self.fail()
        return None


class RequiredWhen(Required):
    """
    Value is required only when ``predicate(payload, context)`` holds.

    When the predicate is false the field is exempt: it may be empty, and
    no rule after this one is evaluated.
    """

    def __init__(self, predicate: Predicate, message: Optional[str] = None):
        super().__init__(message)
        self.predicate = predicate

    def is_active(self, payload, context) -> bool:
        return bool(self.predicate(payload, context))


# ==================== Strings ====================

class MinLength(Rule):
    """String must have at least ``length`` characters."""

    default_message = "validation.min_length"

    def __init__(self, length: int, message: Optional[str] = None):
        super().__init__(message)
        self.length = length

    def evaluate(self, value, payload, context):
        if is_empty(value):
            return None
        if len(str(value).strip()) < self.length:
            return self.fail(min=self.length)
        return None


class MaxLength(Rule):
    """String must have at most ``length`` characters."""

    default_message = "validation.max_length"

    def __init__(self, length: int, message: Optional[str] = None):
        super().__init__(message)
        self.length = length

    def evaluate(self, value, payload, context):
        if is_empty(value):
            return None
        if len(str(value)) > self.length:
            return self.fail(max=self.length)
        return None


class Pattern(Rule):
    """String must fully match a regular expression."""

    default_message = "validation.invalid_format"

    def __init__(self, regex, message: Optional[str] = None):
        super().__init__(message)
        self.regex = re.compile(regex) if isinstance(regex, str) else regex

    def evaluate(self, value, payload, context):
        if is_empty(value):
            return None
        if not self.regex.fullmatch(str(value).strip()):
            return self.fail()
        return None


class Email(Pattern):
    """Valid e-mail address."""

    EMAIL_PATTERN = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)

    default_message = "validation.invalid_email"

    def __init__(self, message: Optional[str] = None):
        super().__init__(self.EMAIL_PATTERN, message)


class Phone(Pattern):
    """Phone number: digits with optional +, spaces, dashes and parentheses."""

    PHONE_PATTERN = re.compile(r"\+?[0-9\s\-()]{7,20}")

    default_message = "validation.invalid_phone"

    def __init__(self, message: Optional[str] = None):
        super().__init__(self.PHONE_PATTERN, message)

    def evaluate(self, value, payload, context):
        error = super().evaluate(value, payload, context)
        if error or is_empty(value):
            return error
        # At least 7 real digits once formatting is stripped
        if len(re.sub(r"\D", "", str(value))) < 7:
            return self.fail()
        return None


# ==================== Choices ====================

class OneOf(Rule):
    """Value must be one of a fixed set."""

    default_message = "validation.invalid_choice"

    def __init__(self, allowed: Iterable[Any], message: Optional[str] = None):
        super().__init__(message)
        self.allowed = tuple(allowed)

    def evaluate(self, value, payload, context):
        if is_empty(value):
            return None
        if value not in self.allowed:
            return self.fail()
        return None


# ==================== Numbers ====================

class NumberRange(Rule):
    """
    Numeric bounds check.

    Non-numeric input (including NaN) fails with ``number_message`` rather
    than raising. ``min_value`` is inclusive unless ``exclusive_min`` is set.
    """

    default_message = "validation.invalid_number"

    def __init__(
        self,
        min_value: Optional[float] = None,
        max_value: Optional[float] = None,
        *,
        exclusive_min: bool = False,
        number_message: Optional[str] = None,
        min_message: Optional[str] = None,
        max_message: Optional[str] = None,
    ):
        super().__init__(number_message)
        self.min_value = min_value
        self.max_value = max_value
        self.exclusive_min = exclusive_min
        self.min_message = min_message or (
            "validation.positive" if exclusive_min and min_value == 0 else "validation.min_value"
        )
        self.max_message = max_message or "validation.max_value"

    def evaluate(self, value, payload, context):
        if is_empty(value):
            return None
        number = to_number(value)
        if number is None:
            return self.fail()
        if self.min_value is not None:
            too_small = number <= self.min_value if self.exclusive_min else number < self.min_value
            if too_small:
                return self.fail(self.min_message, min=format_number(self.min_value))
        if self.max_value is not None and number > self.max_value:
            return self.fail(self.max_message, max=format_number(self.max_value))
        return None


class Integer(Rule):
    """Value must be a whole number."""

    default_message = "validation.integer"

    def __init__(self, message: Optional[str] = None, number_message: Optional[str] = None):
        super().__init__(message)
        self.number_message = number_message or "validation.invalid_number"

    def evaluate(self, value, payload, context):
        if is_empty(value):
            return None
        number = to_number(value)
        if number is None:
            return self.fail(self.number_message)
        if not isinstance(number, int) and not number.is_integer():
            return self.fail()
        return None


# ==================== Dates ====================

def _today(context) -> date:
    """Reference day of the validation pass."""
    pinned = getattr(context, "today", None)
    return pinned if pinned is not None else current_date()


class ValidDate(Rule):
    """Value must be interpretable as a calendar date."""

    default_message = "validation.invalid_date"

    def evaluate(self, value, payload, context):
        if is_empty(value):
            return None
        if to_date(value) is None:
            return self.fail()
        return None


class DateNotInFuture(Rule):
    """Date must be today or earlier (day granularity)."""

    default_message = "validation.date_in_future"

    def __init__(self, message: Optional[str] = None, invalid_message: Optional[str] = None):
        super().__init__(message)
        self.invalid_message = invalid_message or "validation.invalid_date"

    def evaluate(self, value, payload, context):
        if is_empty(value):
            return None
        day = to_date(value)
        if day is None:
            return self.fail(self.invalid_message)
        if day > _today(context):
            return self.fail()
        return None


class DateNotInPast(Rule):
    """Date must be today or later (day granularity)."""

    default_message = "validation.date_in_past"

    def __init__(self, message: Optional[str] = None, invalid_message: Optional[str] = None):
        super().__init__(message)
        self.invalid_message = invalid_message or "validation.invalid_date"

    def evaluate(self, value, payload, context):
        if is_empty(value):
            return None
        day = to_date(value)
        if day is None:
            return self.fail(self.invalid_message)
        if day < _today(context):
            return self.fail()
        return None


class DateAfter(Rule):
    """Date must be strictly after the date held in ``other_field``."""

    default_message = "validation.date_not_after"

    def __init__(self, other_field: str, message: Optional[str] = None, invalid_message: Optional[str] = None):
        super().__init__(message)
        self.other_field = other_field
        self.invalid_message = invalid_message or "validation.invalid_date"

    def evaluate(self, value, payload, context):
        if is_empty(value):
            return None
        day = to_date(value)
        if day is None:
            return self.fail(self.invalid_message)
        other = to_date(payload.get(self.other_field))
        if other is not None and day <= other:
            return self.fail()
        return None


# ==================== Cross-field ====================

class MatchesField(Rule):
    """Value must equal the value of ``other_field``."""

    default_message = "validation.fields_mismatch"

    def __init__(self, other_field: str, message: Optional[str] = None):
        super().__init__(message)
        self.other_field = other_field

    def evaluate(self, value, payload, context):
        if is_empty(value):
            return None
        if value != payload.get(self.other_field):
            return self.fail()
        return None


class Satisfies(Rule):
    """Custom check: ``predicate(value, payload, context)`` must be true."""

    def __init__(self, predicate: Callable[[Any, Mapping[str, Any], Any], bool], message: Optional[str] = None):
        super().__init__(message)
        self.predicate = predicate

    def evaluate(self, value, payload, context):
        if is_empty(value):
            return None
        try:
            ok = self.predicate(value, payload, context)
        except Exception as e:
            logger.error(f"Custom rule {self.message!r} raised: {e}")
            ok = False
        return None if ok else self.fail()


# ==================== Files ====================

class FileReference(Rule):
    """Value must be an attached file or a stored file reference (URL/path)."""

    default_message = "validation.file_required"

    def evaluate(self, value, payload, context):
        if is_empty(value):
            return None
        if isinstance(value, AttachmentFile) or isinstance(value, str):
            return None
        return self.fail()


class RequiredFile(Rule):
    """A file must be attached."""

    default_message = "validation.file_required"

    def evaluate(self, value, payload, context):
        if value is None:
            return self.fail()
        return None


class FileType(Rule):
    """Attached file must have an allowed MIME type."""

    default_message = "validation.invalid_file_type"

    def __init__(self, allowed_types: Sequence[str], message: Optional[str] = None):
        super().__init__(message)
        self.allowed_types = tuple(t.lower() for t in allowed_types)

    def evaluate(self, value, payload, context):
        if value is None:
            return None
        if (getattr(value, "content_type", "") or "").lower() not in self.allowed_types:
            return self.fail()
        return None


class FileSize(Rule):
    """Attached file must not exceed ``max_bytes``."""

    default_message = "validation.file_too_large"

    def __init__(self, max_bytes: int, message: Optional[str] = None):
        super().__init__(message)
        self.max_bytes = max_bytes

    def evaluate(self, value, payload, context):
        if value is None:
            return None
        if (getattr(value, "size", 0) or 0) > self.max_bytes:
            return self.fail(max_size=format_file_size(self.max_bytes))
        return None


# ==================== Builders ====================

def required(message: Optional[str] = None) -> Rule:
    return Required(message)


def required_when(predicate: Predicate, message: Optional[str] = None) -> Rule:
    return RequiredWhen(predicate, message)


def min_length(length: int, message: Optional[str] = None) -> Rule:
    return MinLength(length, message)


def max_length(length: int, message: Optional[str] = None) -> Rule:
    return MaxLength(length, message)


def pattern(regex, message: Optional[str] = None) -> Rule:
    return Pattern(regex, message)


def email(message: Optional[str] = None) -> Rule:
    return Email(message)


def phone(message: Optional[str] = None) -> Rule:
    return Phone(message)


def one_of(allowed: Iterable[Any], message: Optional[str] = None) -> Rule:
    return OneOf(allowed, message)


def number_range(min_value=None, max_value=None, **messages) -> Rule:
    return NumberRange(min_value, max_value, **messages)


def positive(message: Optional[str] = None, number_message: Optional[str] = None) -> Rule:
    return NumberRange(0, exclusive_min=True, min_message=message, number_message=number_message)


def min_value(limit: float, message: Optional[str] = None, number_message: Optional[str] = None) -> Rule:
    return NumberRange(limit, min_message=message, number_message=number_message)


def max_value(limit: float, message: Optional[str] = None, number_message: Optional[str] = None) -> Rule:
    return NumberRange(None, limit, max_message=message, number_message=number_message)


def integer(message: Optional[str] = None, number_message: Optional[str] = None) -> Rule:
    return Integer(message, number_message)


def valid_date(message: Optional[str] = None) -> Rule:
    return ValidDate(message)


def date_not_in_future(message: Optional[str] = None, invalid_message: Optional[str] = None) -> Rule:
    return DateNotInFuture(message, invalid_message)


def date_not_in_past(message: Optional[str] = None, invalid_message: Optional[str] = None) -> Rule:
    return DateNotInPast(message, invalid_message)


def date_after(other_field: str, message: Optional[str] = None, invalid_message: Optional[str] = None) -> Rule:
    return DateAfter(other_field, message, invalid_message)


def matches_field(other_field: str, message: Optional[str] = None) -> Rule:
    return MatchesField(other_field, message)


def satisfies(predicate, message: Optional[str] = None) -> Rule:
    return Satisfies(predicate, message)


def file_reference(message: Optional[str] = None) -> Rule:
    return FileReference(message)


def required_file(message: Optional[str] = None) -> Rule:
    return RequiredFile(message)


def file_type(allowed_types: Sequence[str], message: Optional[str] = None) -> Rule:
    return FileType(allowed_types, message)


def file_size(max_bytes: int, message: Optional[str] = None) -> Rule:
    return FileSize(max_bytes, message)


def attachment_validator(*checks: Rule) -> Callable[[Optional[AttachmentFile]], Optional[str]]:
    """
    Combine file checks into a single ``(file) -> message | None`` validator.

    Checks run in order and the first failure wins.
    """
    def validator(file: Optional[AttachmentFile]) -> Optional[str]:
        for check in checks:
            message = check.evaluate(file, {}, None)
            if message:
                return message
        return None

    return validator


# ==================== Predicates ====================

def field_equals(name: str, expected: Any) -> Predicate:
    """Predicate: ``payload[name] == expected``."""
    return lambda payload, context: payload.get(name) == expected


def field_in(name: str, expected: Iterable[Any]) -> Predicate:
    """Predicate: ``payload[name]`` is one of ``expected``."""
    values = tuple(expected)
    return lambda payload, context: payload.get(name) in values


def field_truthy(name: str) -> Predicate:
    """Predicate: ``payload[name]`` is set and truthy."""
    return lambda payload, context: bool(payload.get(name))


def field_empty(name: str) -> Predicate:
    """Predicate: ``payload[name]`` is not provided."""
    return lambda payload, context: is_empty(payload.get(name))


def context_flag(name: str) -> Predicate:
    """Predicate: context flag ``name`` is true."""
    return lambda payload, context: bool(context.get(name)) if context is not None else False


def negate(predicate: Predicate) -> Predicate:
    return lambda payload, context: not predicate(payload, context)
