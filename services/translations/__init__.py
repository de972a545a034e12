# -*- coding: utf-8 -*-
"""Message catalogues."""
