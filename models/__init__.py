# -*- coding: utf-8 -*-
"""
Aqarat Data Models
"""

from .attachment import AttachmentFile
from .submission import SubmitResponse

__all__ = [
    "AttachmentFile",
    "SubmitResponse",
]
