# -*- coding: utf-8 -*-
"""
Aqarat Application Core Module
"""

from .config import Config, Vocabularies

__all__ = ["Config", "Vocabularies"]
