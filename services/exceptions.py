# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""

from typing import Dict, List, Optional


class ApiException(Exception):
    """Exception raised for API errors."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context


class FieldValidationError(Exception):
    """A single field failed one rule. Carried as data, never raised by rules."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message

    def __eq__(self, other):
        if not isinstance(other, FieldValidationError):
            return NotImplemented
        return self.field == other.field and self.message == other.message

    def __hash__(self):
        return hash((self.field, self.message))


class FormValidationFailure(Exception):
    """One or more fields failed validation; submission was not attempted."""

    def __init__(self, errors: Dict[str, str], message: str = ""):
        super().__init__(message or "; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.message = message
        self.errors = dict(errors)

    @property
    def field_errors(self) -> List[FieldValidationError]:
        return [FieldValidationError(field, msg) for field, msg in self.errors.items()]


class SubmissionBusinessFailure(Exception):
    """The submit delegate resolved with ``success=False``."""

    def __init__(self, message: str, response=None):
        super().__init__(message)
        self.message = message
        self.response = response


class SubmissionTransportFailure(Exception):
    """The submit delegate raised."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
