# -*- coding: utf-8 -*-
"""
Submission response model.
What an injected submit delegate reports back to a form controller.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class SubmitResponse:
    """Outcome reported by a submit delegate."""

    success: bool
    message: Optional[str] = None
    data: Any = None

    @classmethod
    def from_value(cls, value: Any) -> "SubmitResponse":
        """
        Normalize whatever a delegate returned.

        Accepts a SubmitResponse, a mapping with ``success``/``message``/
        ``data`` keys, or any other object. A mapping without a ``success``
        key and any other object count as success; a bare None or False
        counts as a failure without message.
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, dict):
            return cls(
                success=value.get("success", True) is not False,
                message=value.get("message"),
                data=value.get("data", value),
            )

        if value is None or value is False:
            return cls(success=False)

        success = getattr(value, "success", True) is not False
        return cls(
            success=success,
            message=getattr(value, "message", None),
            data=getattr(value, "data", value),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
        }
