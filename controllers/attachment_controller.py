# -*- coding: utf-8 -*-
"""
Attachment Controller
=====================
Holds the files picked for a form, one per attachment field, with their
own error map.

Files are not part of the scalar form values; the form controller merges
``payload()`` into the outbound snapshot at submit time.
"""

from typing import Callable, Dict, Iterable, Mapping, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController
from models.attachment import AttachmentFile
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)

FileValidator = Callable[[Optional[AttachmentFile]], Optional[str]]


class AttachmentController(BaseController):
    """
    Controller for form attachments.

    Signals:
        file_changed(field, file): a file was set or cleared (file may be None)
        file_errors_changed(errors): the per-field error map changed
    """

    file_changed = pyqtSignal(str, object)
    file_errors_changed = pyqtSignal(object)

    def __init__(self, fields: Iterable[str] = (), parent=None):
        super().__init__(parent)
        self._files: Dict[str, Optional[AttachmentFile]] = {name: None for name in fields}
        self._errors: Dict[str, str] = {}

    # ==================== State ====================

    @property
    def files(self) -> Dict[str, Optional[AttachmentFile]]:
        return dict(self._files)

    @property
    def file_errors(self) -> Dict[str, str]:
        return dict(self._errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def get_file(self, name: str) -> Optional[AttachmentFile]:
        return self._files.get(name)

    def has_file(self, name: str) -> bool:
        return self._files.get(name) is not None

    def preview_source(self, name: str) -> Optional[str]:
        """Location of the file for a preview widget, if any."""
        file = self._files.get(name)
        return file.preview_source if file is not None else None

    def payload(self) -> Dict[str, AttachmentFile]:
        """Attached files keyed by field, for merging into a submission."""
        return {name: file for name, file in self._files.items() if file is not None}

    # ==================== Operations ====================

    def set_file(self, name: str, file: Optional[AttachmentFile]):
        """
        Attach a file to a field (replacing any previous one).

        Clears the field's error; the file is kept as-is for preview and
        only checked by ``validate_files``.
        """
        if self._disposed:
            return
        self._files[name] = file
        if file is not None:
            logger.debug(f"Attached '{file.name}' ({file.size} bytes) to {name}")
        self._clear_error(name)
        self._emit(self.file_changed, name, file)

    def clear_file(self, name: str):
        self.set_file(name, None)

    def validate_files(self, validators: Mapping[str, FileValidator]) -> bool:
        """
        Run ``(file) -> message | None`` validators over the attached files.

        Fields without a validator are not checked. Returns True when every
        validator passes; the failures are available through ``file_errors``.
        """
        if self._disposed:
            return False

        errors: Dict[str, str] = {}
        for name, validator in validators.items():
            try:
                message = validator(self._files.get(name))
            except Exception as e:
                logger.error(f"Attachment validator for {name} raised: {e}")
                message = tr("validation.invalid_value")
            if message:
                errors[name] = message

        if errors:
            logger.warning(f"Attachment validation failed: {list(errors)}")
        self._set_errors(errors)
        return not errors

    def clear_errors(self):
        self._set_errors({})

    def reset(self):
        """Drop every attached file and error."""
        if self._disposed:
            return
        for name in list(self._files):
            self._files[name] = None
            self._emit(self.file_changed, name, None)
        self._set_errors({})

    # ==================== Internal ====================

    def _clear_error(self, name: str):
        if name in self._errors:
            errors = dict(self._errors)
            errors.pop(name)
            self._set_errors(errors)

    def _set_errors(self, errors: Dict[str, str]):
        if self._disposed:
            return
        changed = errors != self._errors
        self._errors = errors
        if changed:
            self._emit(self.file_errors_changed, dict(errors))
