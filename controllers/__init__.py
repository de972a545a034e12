# -*- coding: utf-8 -*-
"""
Aqarat Controllers
==================
Form controllers sitting between the pages and the validation layer.

Controllers provide:
- Form state (values, errors, dirty/submitting flags)
- Standardized results via OperationResult
- Qt signals for UI updates
- Validation before submission

Usage:
    from controllers import create_form

    form = create_form(payment_schema, initial_values)
    form.update_field("amount", 2500)
    result = await form.submit(api.create_payment)
    if not result.success:
        print(result.errors or result.message)
"""

# Base controller and result types
from controllers.base_controller import (
    BaseController,
    OperationResult,
)

# Form controllers
from controllers.attachment_controller import AttachmentController
from controllers.form_controller import (
    FormController,
    FormOptions,
    FormPhase,
    create_form,
)
from controllers.step_controller import StepController

# All public exports
__all__ = [
    # Base
    "BaseController",
    "OperationResult",

    # Forms
    "AttachmentController",
    "FormController",
    "FormOptions",
    "FormPhase",
    "StepController",
    "create_form",
]
