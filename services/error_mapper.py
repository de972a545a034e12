# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from typing import Optional

from services.translation_manager import tr
from services.exceptions import (
    ApiException,
    NetworkException,
    SubmissionBusinessFailure,
    SubmissionTransportFailure,
)
from utils.logger import get_logger

logger = get_logger(__name__)


def map_api_error(error: ApiException) -> str:
    """Map API exception to a user-facing message.

    Prefers the server-provided message from the response body; technical
    details (status code, validation dump) are logged only.
    """
    status = error.status_code

    if status == 400:
        details = _extract_validation_details(error.response_data)
        if details:
            logger.warning(f"API validation error (400): {details}")
    elif status:
        logger.warning(f"API error ({status}): {error}")

    server_message = error.response_data.get("message") if error.response_data else None
    if isinstance(server_message, str) and server_message.strip():
        return server_message
    if error.message:
        return error.message
    return tr("error.api.connection")


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-friendly translated message."""
    msg = str(error.original_error) if error.original_error else error.message or ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return tr("error.api.timeout")
    return tr("error.api.connection")


def extract_error_message(error: BaseException, fallback: Optional[str] = None) -> str:
    """Best-effort user message for any exception raised by a submit delegate.

    Never raises; falls back to ``fallback`` (or the generic submit error)
    when nothing readable can be extracted.
    """
    fallback = fallback or tr("form.submit_transport_error")

    if isinstance(error, ApiException):
        return map_api_error(error)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    if isinstance(error, (SubmissionBusinessFailure, SubmissionTransportFailure)):
        return error.message or fallback

    if isinstance(error, TimeoutError):
        return tr("error.api.timeout")

    message = getattr(error, "message", None)
    if isinstance(message, str) and message.strip():
        return message

    try:
        text = str(error)
    except Exception:
        text = ""
    if text.strip():
        return text

    logger.warning(f"Unexpected error without message: {error!r}")
    return fallback


def _extract_validation_details(response_data: dict) -> str:
    """Extract validation error details from API response."""
    if not response_data:
        return ""

    errors = response_data.get("errors", {})
    if isinstance(errors, dict):
        lines = []
        for field, messages in errors.items():
            if isinstance(messages, list):
                for msg in messages:
                    lines.append(f"• {field}: {msg}")
            else:
                lines.append(f"• {field}: {messages}")
        return "\n".join(lines)

    if isinstance(errors, list):
        return "\n".join(f"• {e}" for e in errors)

    title = response_data.get("title", "")
    if title:
        return title

    return ""
