# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for all form controllers.

Provides common signals, logging, callback handling and the teardown
guard shared by the form, attachment and step controllers.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Result of a controller operation."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: Dict[str, str] = field(default_factory=dict)
    error: Optional[Exception] = None
    skipped: bool = False

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(
        cls,
        message: str,
        errors: Dict[str, str] = None,
        error: Exception = None,
        data: T = None,
    ) -> 'OperationResult[T]':
        """Create a failed result."""
        return cls(success=False, data=data, message=message, errors=dict(errors or {}), error=error)

    @classmethod
    def skip(cls, message: str = "") -> 'OperationResult[T]':
        """Create a result for an operation that was ignored."""
        return cls(success=False, message=message, skipped=True)


class BaseController(QObject):
    """
    Base controller class.

    Provides:
    - Common signal patterns
    - Error handling
    - Logging
    - Teardown guard (no state updates after dispose)
    """

    # Common signals
    operation_started = pyqtSignal(str)  # operation name
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, str)  # operation name, error message
    data_changed = pyqtSignal()
    loading_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._is_loading = False
        self._last_error = ""
        self._disposed = False
        self._callbacks: Dict[str, List[Callable]] = {}

    @property
    def is_loading(self) -> bool:
        """Check if controller is performing an operation."""
        return self._is_loading

    @property
    def last_error(self) -> str:
        """Get last error message."""
        return self._last_error

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self):
        """
        Detach the controller from its form.

        Any later state update, signal or callback becomes a no-op, so an
        operation that completes after teardown cannot touch a dead view.
        """
        if self._disposed:
            return
        self._log_operation("dispose")
        self._disposed = True
        self._callbacks.clear()

    def _emit(self, signal, *args):
        """Emit a signal unless the controller was disposed."""
        if not self._disposed:
            signal.emit(*args)

    def _set_loading(self, loading: bool):
        """Set loading state and emit signal."""
        if self._disposed:
            return
        self._is_loading = loading
        self.loading_changed.emit(loading)

    def _set_error(self, error: str):
        """Set error message."""
        self._last_error = error
        if error:
            logger.error(f"{self.__class__.__name__}: {error}")

    def _log_operation(self, operation: str, **kwargs):
        """Log an operation."""
        logger.info(f"{self.__class__.__name__}.{operation}: {kwargs}")

    def _emit_started(self, operation: str):
        """Emit operation started signal."""
        self._emit(self.operation_started, operation)
        self._set_loading(True)

    def _emit_completed(self, operation: str, success: bool):
        """Emit operation completed signal."""
        self._emit(self.operation_completed, operation, success)
        self._set_loading(False)
        if success:
            self._emit(self.data_changed)

    def _emit_error(self, operation: str, error: str):
        """Emit operation error signal."""
        self._set_error(error)
        self._emit(self.operation_error, operation, error)
        self._set_loading(False)

    def register_callback(self, event: str, callback: Callable):
        """Register a callback for an event."""
        if event not in self._callbacks:
            self._callbacks[event] = []
        self._callbacks[event].append(callback)

    def unregister_callback(self, event: str, callback: Callable):
        """Unregister a callback."""
        if event in self._callbacks and callback in self._callbacks[event]:
            self._callbacks[event].remove(callback)

    def _trigger_callbacks(self, event: str, *args, **kwargs):
        """Trigger callbacks for an event."""
        if self._disposed:
            return
        for callback in list(self._callbacks.get(event, [])):
            self._safe_call(event, callback, *args, **kwargs)

    def _safe_call(self, event: str, callback: Optional[Callable], *args, **kwargs) -> Any:
        """Call a caller-supplied callback; its exceptions are logged, never raised."""
        if callback is None or self._disposed:
            return None
        try:
            return callback(*args, **kwargs)
        except Exception as e:
            logger.error(f"Error in callback for {event}: {e}")
            return None
