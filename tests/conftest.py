# -*- coding: utf-8 -*-
"""
Shared fixtures.

Controllers are QObjects, so a QCoreApplication must exist for the whole
session; no widgets are created, so no display is needed.
"""
import os
import sys
import tempfile
from datetime import date, timedelta
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Keep test runs out of the application log directory
os.environ.setdefault("LOGS_DIR", str(Path(tempfile.gettempdir()) / "aqarat-test-logs"))

from PyQt5.QtCore import QCoreApplication  # noqa: E402

from services.translation_manager import get_language, set_language  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Create QCoreApplication for tests."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def english():
    """Run every test with the English catalogue."""
    previous = get_language()
    set_language("en")
    yield
    set_language(previous)


@pytest.fixture
def today():
    return date.today()


@pytest.fixture
def tomorrow():
    return date.today() + timedelta(days=1)


@pytest.fixture
def yesterday():
    return date.today() - timedelta(days=1)


@pytest.fixture
def valid_payment(today):
    """A cash payment that passes every rule."""
    return {
        "reservation_id": 12,
        "amount": 2500.50,
        "payment_date": today.isoformat(),
        "payment_method": "cash",
        "status": "paid",
    }


@pytest.fixture
def valid_company():
    """A company payload without manager fields."""
    return {
        "name": "Acme Properties",
        "company_type": "agency",
        "email": "info@acme.example",
        "phone": "+971 50 123 4567",
        "address": "12 Corniche Road, Abu Dhabi",
    }


class SignalSpy:
    """Records every emission of a Qt signal."""

    def __init__(self, signal):
        self.calls = []
        signal.connect(self._record)

    def _record(self, *args):
        self.calls.append(args[0] if len(args) == 1 else args)

    @property
    def count(self) -> int:
        return len(self.calls)

    @property
    def last(self):
        return self.calls[-1] if self.calls else None


@pytest.fixture
def spy():
    """Factory: ``spy(controller.some_signal)`` -> SignalSpy."""
    return SignalSpy
