# -*- coding: utf-8 -*-
"""
Aqarat Utility Module
"""

from .logger import get_logger, setup_logger
from .datetime_utils import to_date, to_date_isoformat, today

__all__ = [
    "get_logger",
    "setup_logger",
    "to_date",
    "to_date_isoformat",
    "today",
]
