# -*- coding: utf-8 -*-
"""
Form Controller
===============
Entity-agnostic state container for one form: current values, the latest
error map, dirty/submitting flags, and the validate-then-submit lifecycle.

Submission is delegated to a caller-supplied function that receives the
validated payload and returns (or resolves to) a ``SubmitResponse``-like
value. The controller never raises out of ``submit()``.

Usage:
    form = create_form(payment_schema, {"payment_method": "cash"},
                       on_success=lambda response: ...)
    form.update_field("amount", 2500.5)
    result = await form.submit(api.create_payment)
"""

import inspect
from dataclasses import dataclass, fields as dataclass_fields
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

from PyQt5.QtCore import pyqtSignal

from controllers.attachment_controller import AttachmentController, FileValidator
from controllers.base_controller import BaseController, OperationResult
from models.submission import SubmitResponse
from services.error_mapper import extract_error_message
from services.exceptions import SubmissionBusinessFailure, SubmissionTransportFailure
from services.translation_manager import tr
from services.validation.evaluator import ValidationResult, validate, validate_async
from services.validation.schema import Schema, ValidationContext
from utils.logger import get_logger

logger = get_logger(__name__)

SubmitFn = Callable[[Dict[str, Any]], Union[Any, Awaitable[Any]]]
AttachmentValidators = Union[
    Mapping[str, FileValidator],
    Callable[[Mapping[str, Any]], Mapping[str, FileValidator]],
]


class FormPhase(Enum):
    """Submission state machine."""
    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class FormOptions:
    """
    Form behaviour.

    Attributes:
        validate_on_change: Re-validate a field as soon as it is updated
        show_success_notification: Request a success notification on submit
        show_error_notification: Request an error notification on failure
        on_success: Called with the SubmitResponse after a successful submit
        on_error: Called with the error message after a failed submit
        success_message: Notification text (or key) when the delegate gives none
        attachment_validators: Validators per attachment field, or a function
            of the current values returning them
        remote_checks: Async per-field checks run after the local rules
    """
    validate_on_change: bool = False
    show_success_notification: bool = True
    show_error_notification: bool = True
    on_success: Optional[Callable[[SubmitResponse], Any]] = None
    on_error: Optional[Callable[[str], Any]] = None
    success_message: str = "form.saved"
    attachment_validators: Optional[AttachmentValidators] = None
    remote_checks: Optional[Dict[str, Callable]] = None

    @classmethod
    def coerce(cls, options: Any = None, **overrides) -> "FormOptions":
        """Build options from None, a mapping, or an existing FormOptions."""
        if options is None:
            values = {}
        elif isinstance(options, cls):
            values = {f.name: getattr(options, f.name) for f in dataclass_fields(cls)}
        elif isinstance(options, Mapping):
            values = dict(options)
        else:
            raise TypeError(f"Unsupported form options: {type(options).__name__}")
        values.update(overrides)
        return cls(**values)


class FormController(BaseController):
    """
    Controller for a single form lifecycle.

    Signals:
        values_changed(values): current values after an update
        errors_changed(errors): current field -> message map
        submitting_changed(bool): submission window opened/closed
        phase_changed(str): FormPhase value
        notification_requested(level, message): "success" or "error" toast request
        submit_succeeded(response): delegate reported success
        submit_failed(message): delegate reported failure or raised
    """

    values_changed = pyqtSignal(object)
    errors_changed = pyqtSignal(object)
    submitting_changed = pyqtSignal(bool)
    phase_changed = pyqtSignal(str)
    notification_requested = pyqtSignal(str, str)
    submit_succeeded = pyqtSignal(object)
    submit_failed = pyqtSignal(str)

    def __init__(
        self,
        schema: Schema,
        initial_values: Optional[Mapping[str, Any]] = None,
        options: Optional[FormOptions] = None,
        context: Any = None,
        attachments: Optional[AttachmentController] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._schema = schema
        self._options = options or FormOptions()
        self._context = ValidationContext.coerce(context)
        self._attachments = attachments

        self._initial_values: Dict[str, Any] = dict(initial_values or {})
        self._values: Dict[str, Any] = dict(self._initial_values)
        self._errors: Dict[str, str] = {}
        self._is_dirty = False
        self._is_submitting = False
        self._in_flight = False
        self._phase = FormPhase.IDLE

    # ==================== State ====================

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def options(self) -> FormOptions:
        return self._options

    @property
    def context(self) -> ValidationContext:
        return self._context

    @property
    def attachments(self) -> Optional[AttachmentController]:
        return self._attachments

    @property
    def values(self) -> Dict[str, Any]:
        return dict(self._values)

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self._errors)

    @property
    def is_submitting(self) -> bool:
        return self._is_submitting

    @property
    def is_dirty(self) -> bool:
        return self._is_dirty

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    @property
    def phase(self) -> FormPhase:
        return self._phase

    def get_value(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def set_context(self, context: Any):
        """Replace the validation context (e.g. switching create/edit mode)."""
        self._context = ValidationContext.coerce(context)

    # ==================== Field updates ====================

    def update_field(self, name: str, value: Any):
        """
        Set one value, clear its error and mark the form dirty.

        With ``validate_on_change`` the field is re-validated right away.
        """
        self.update_fields({name: value})

    def update_fields(self, partial: Mapping[str, Any]):
        """
        Merge several values at once.

        Used when one change implies resets of dependent fields, e.g.
        ``update_fields(service_type_change("financial"))``.
        """
        if self._disposed or not partial:
            return

        self._values.update(partial)
        self._is_dirty = True

        errors = {k: v for k, v in self._errors.items() if k not in partial}
        if self._options.validate_on_change:
            result = self._run_validation(fields=partial.keys())
            errors.update(result)
        self._set_errors(errors)
        self._emit(self.values_changed, dict(self._values))

    def set_values(self, values: Mapping[str, Any]):
        """
        Replace all values (e.g. after loading a record) and clear errors.

        The form is dirty only if the new values differ from the initial ones.
        """
        if self._disposed:
            return
        self._values = dict(values)
        self._is_dirty = self._values != self._initial_values
        self._set_errors({})
        self._emit(self.values_changed, dict(self._values))

    def reset_form(self):
        """Restore initial values and clear errors, dirty and submitting flags."""
        if self._disposed:
            return
        self._log_operation("reset_form", entity=self._schema.entity)
        self._values = dict(self._initial_values)
        self._is_dirty = False
        self._set_errors({})
        self._set_submitting(False)
        self._set_phase(FormPhase.IDLE)
        if self._attachments is not None:
            self._attachments.reset()
        self._emit(self.values_changed, dict(self._values))

    # ==================== Errors ====================

    def clear_errors(self):
        self._set_errors({})

    def clear_field_error(self, name: str):
        if name in self._errors:
            self._set_errors({k: v for k, v in self._errors.items() if k != name})

    # ==================== Validation ====================

    def validate_field(self, name: str) -> Optional[str]:
        """Validate one field, store and return its message (None if valid)."""
        self.validate_fields([name])
        return self._errors.get(name)

    def validate_fields(self, names: Iterable[str]) -> bool:
        """
        Validate a subset of fields.

        Errors of the other fields are left untouched.
        """
        names = list(names)
        result = self._run_validation(fields=names)
        errors = {k: v for k, v in self._errors.items() if k not in names}
        errors.update(result)
        self._set_errors(errors)
        if result:
            logger.warning(f"Form '{self._schema.entity}' rejected fields: {list(result)}")
        return result.is_valid

    def validate_all(self) -> bool:
        """Validate every field; store and return whether the form is valid."""
        result = self._run_validation()
        self._set_errors(dict(result))
        if result:
            logger.warning(f"Form '{self._schema.entity}' rejected fields: {list(result)}")
        return result.is_valid

    def snapshot(self) -> Dict[str, Any]:
        """Current values merged with attached files."""
        payload = dict(self._values)
        if self._attachments is not None:
            payload.update(self._attachments.payload())
        return payload

    def _run_validation(self, fields: Optional[Iterable[str]] = None) -> ValidationResult:
        return validate(self._schema, self.snapshot(), self._context, fields=fields)

    def _attachment_validators(self) -> Mapping[str, FileValidator]:
        validators = self._options.attachment_validators
        if validators is None:
            return {}
        if callable(validators):
            return validators(dict(self._values))
        return validators

    # ==================== Submission ====================

    async def submit(self, submit_fn: SubmitFn) -> OperationResult:
        """
        Validate, then hand the payload to ``submit_fn``.

        ``submit_fn`` may be a coroutine function or a plain function. A
        second call while one submission is in flight is ignored.

        Returns:
            OperationResult; ``skipped`` is set when the call was ignored,
            ``errors`` holds the field errors when validation failed
        """
        if self._disposed:
            return OperationResult.skip()
        if self._in_flight:
            logger.debug(f"Submit of '{self._schema.entity}' ignored: already in flight")
            return OperationResult.skip()

        self._in_flight = True
        try:
            return await self._submit(submit_fn)
        finally:
            self._in_flight = False
            self._set_submitting(False)

    async def _submit(self, submit_fn: SubmitFn) -> OperationResult:
        self._log_operation("submit", entity=self._schema.entity)
        self._set_errors({})
        self._set_phase(FormPhase.VALIDATING)

        payload = self.snapshot()
        try:
            result, files_valid = await self._validate_submission(payload)
            if result.is_valid and files_valid:
                payload = self._schema.clean(payload)
        except Exception as e:
            logger.error(f"Validation of '{self._schema.entity}' raised: {e}", exc_info=True)
            message = extract_error_message(e)
            return self._fail(message, SubmissionTransportFailure(message, e))

        if not result.is_valid or not files_valid:
            return self._reject(result)

        self._set_phase(FormPhase.SUBMITTING)
        self._set_submitting(True)
        self._emit_started("submit")
        try:
            outcome = submit_fn(payload)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            response = SubmitResponse.from_value(outcome)
        except Exception as e:
            self._set_submitting(False)
            logger.error(f"Submit of '{self._schema.entity}' raised: {e}", exc_info=True)
            message = extract_error_message(e)
            return self._fail(message, SubmissionTransportFailure(message, e))

        self._set_submitting(False)
        if not response.success:
            message = response.message or tr("form.submit_failed")
            logger.warning(f"Submit of '{self._schema.entity}' refused: {message}")
            return self._fail(message, SubmissionBusinessFailure(message, response), response.data)

        return self._succeed(response)

    async def _validate_submission(self, payload: Dict[str, Any]) -> Tuple[ValidationResult, bool]:
        """Field validation (with remote checks) plus attachment validation."""
        if self._options.remote_checks:
            result = await validate_async(
                self._schema, payload, self._context, remote_checks=self._options.remote_checks
            )
        else:
            result = validate(self._schema, payload, self._context)

        files_valid = True
        if self._attachments is not None:
            validators = self._attachment_validators()
            if validators:
                files_valid = self._attachments.validate_files(validators)
        return result, files_valid

    def _reject(self, result: ValidationResult) -> OperationResult:
        message = tr("form.fix_errors")
        if result:
            logger.warning(f"Form '{self._schema.entity}' rejected fields: {list(result)}")
        self._set_errors(dict(result))
        self._set_phase(FormPhase.INVALID)
        if self._options.show_error_notification:
            self._emit(self.notification_requested, "error", message)
        self._set_phase(FormPhase.IDLE)
        return OperationResult.fail(message, errors=dict(result), error=result.to_failure(message))

    def _succeed(self, response: SubmitResponse) -> OperationResult:
        message = response.message or tr(self._options.success_message)
        if self._disposed:
            return OperationResult.ok(data=response, message=message)

        self._set_phase(FormPhase.SUCCESS)
        self._emit(self.submit_succeeded, response)
        if self._options.show_success_notification:
            self._emit(self.notification_requested, "success", message)
        self._safe_call("on_success", self._options.on_success, response)
        self._trigger_callbacks("submit_succeeded", response)
        self._emit_completed("submit", True)
        self._set_phase(FormPhase.IDLE)
        return OperationResult.ok(data=response, message=message)

    def _fail(self, message: str, error: Exception, data: Any = None) -> OperationResult:
        if self._disposed:
            return OperationResult.fail(message, error=error, data=data)

        self._set_phase(FormPhase.FAILED)
        self._emit(self.submit_failed, message)
        if self._options.show_error_notification:
            self._emit(self.notification_requested, "error", message)
        self._safe_call("on_error", self._options.on_error, message)
        self._trigger_callbacks("submit_failed", message)
        self._emit_error("submit", message)
        self._set_phase(FormPhase.IDLE)
        return OperationResult.fail(message, error=error, data=data)

    # ==================== Internal ====================

    def _set_errors(self, errors: Dict[str, str]):
        if self._disposed:
            return
        changed = errors != self._errors
        self._errors = errors
        if changed:
            self._emit(self.errors_changed, dict(errors))

    def _set_submitting(self, submitting: bool):
        if self._disposed or self._is_submitting == submitting:
            return
        self._is_submitting = submitting
        self._emit(self.submitting_changed, submitting)

    def _set_phase(self, phase: FormPhase):
        if self._disposed or self._phase == phase:
            return
        logger.debug(f"Form '{self._schema.entity}': {self._phase.value} -> {phase.value}")
        self._phase = phase
        self._emit(self.phase_changed, phase.value)

    def dispose(self):
        """Tear down the form; an in-flight submission completes silently."""
        if self._attachments is not None:
            self._attachments.dispose()
        super().dispose()


def create_form(
    schema: Schema,
    initial_values: Optional[Mapping[str, Any]] = None,
    options: Any = None,
    context: Any = None,
    attachments: Optional[AttachmentController] = None,
    **option_overrides,
) -> FormController:
    """
    Create a form controller.

    Args:
        schema: Entity schema
        initial_values: Values the form starts from (and resets to)
        options: FormOptions, a mapping of option names, or None
        context: ValidationContext or a mapping such as ``{"is_creating": True}``
        attachments: Attachment controller whose files join the payload
        **option_overrides: Individual options, e.g. ``on_success=...``
    """
    return FormController(
        schema,
        initial_values,
        options=FormOptions.coerce(options, **option_overrides),
        context=context,
        attachments=attachments,
    )
