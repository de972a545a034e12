# -*- coding: utf-8 -*-
"""
Schema Definition - declarative field -> rules maps per entity.

A Schema is built once at import time and never mutated afterwards.
"""

from dataclasses import dataclass, field as dataclass_field, replace
from datetime import date
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from services.validation.rules import Predicate, Required, Rule


@dataclass(frozen=True)
class ValidationContext:
    """
    Out-of-band flags for one validation pass (e.g. create vs. edit).

    ``today`` pins the reference day for date rules; the evaluator fills it
    from the wall clock once per pass when it is not set.
    """

    is_creating: bool = False
    flags: Mapping[str, Any] = dataclass_field(default_factory=dict)
    today: Optional[date] = None

    def __post_init__(self):
        object.__setattr__(self, "flags", MappingProxyType(dict(self.flags)))

    def get(self, key: str, default: Any = None) -> Any:
        if key == "is_creating":
            return self.is_creating
        return self.flags.get(key, default)

    def with_today(self, day: date) -> "ValidationContext":
        return replace(self, flags=dict(self.flags), today=day)

    @classmethod
    def coerce(cls, context: Any) -> "ValidationContext":
        """Build a context from None, a mapping, or an existing context."""
        if context is None:
            return cls()
        if isinstance(context, cls):
            return context
        if isinstance(context, Mapping):
            flags = {k: v for k, v in context.items() if k not in ("is_creating", "today")}
            return cls(
                is_creating=bool(context.get("is_creating", False)),
                flags=flags,
                today=context.get("today"),
            )
        raise TypeError(f"Unsupported validation context: {type(context).__name__}")


@dataclass(frozen=True)
class FieldSpec:
    """Rules for one field, evaluated top to bottom."""

    name: str
    rules: Tuple[Rule, ...] = ()
    applies_when: Optional[Predicate] = None
    label: str = ""

    @property
    def is_required(self) -> bool:
        """True if the field is unconditionally required."""
        return any(type(rule) is Required for rule in self.rules)


def field(name: str, *rules: Rule, when: Optional[Predicate] = None, label: str = "") -> FieldSpec:
    """
    Declare a field.

    Args:
        name: Payload key
        *rules: Rules in priority order (first failure wins)
        when: Optional applicability predicate ``(payload, context) -> bool``;
              when false the field is skipped entirely
        label: Human readable label (translation key)
    """
    return FieldSpec(name=name, rules=tuple(rules), applies_when=when, label=label)


Cleaner = Callable[[Dict[str, Any]], Dict[str, Any]]


class Schema:
    """
    Ordered mapping of field name -> FieldSpec for one entity.

    Field order does not affect the outcome of validation; it only drives
    the order of error summaries.
    """

    def __init__(self, entity: str, fields: Sequence[FieldSpec], cleaners: Iterable[Cleaner] = ()):
        specs: Dict[str, FieldSpec] = {}
        for spec in fields:
            if spec.name in specs:
                raise ValueError(f"Duplicate field '{spec.name}' in schema '{entity}'")
            specs[spec.name] = spec

        self._entity = entity
        self._fields = MappingProxyType(specs)
        self._cleaners: Tuple[Cleaner, ...] = tuple(cleaners)

    @property
    def entity(self) -> str:
        return self._entity

    @property
    def fields(self) -> Mapping[str, FieldSpec]:
        return self._fields

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(self._fields.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._fields

    def __iter__(self):
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def get(self, name: str) -> Optional[FieldSpec]:
        return self._fields.get(name)

    def required_fields(self) -> List[str]:
        """Names of unconditionally required fields."""
        return [spec.name for spec in self._fields.values() if spec.is_required]

    def clean(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``payload`` with the schema's cleaners applied."""
        cleaned = dict(payload)
        for cleaner in self._cleaners:
            cleaned = cleaner(cleaned)
        return cleaned

    def validate(self, payload: Mapping[str, Any], context: Any = None, fields: Optional[Iterable[str]] = None):
        """Shortcut for ``evaluator.validate(self, payload, context)``."""
        from services.validation.evaluator import validate
        return validate(self, payload, context, fields=fields)

    def __repr__(self) -> str:
        return f"Schema({self._entity!r}, fields={list(self._fields)})"
