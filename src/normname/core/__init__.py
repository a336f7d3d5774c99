# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/normname/core/__init__.py

from .forms import NormalizationForm, default_form, normalize, parse_form
from .normalizer import PathNormalizer, RenameRecord, TraversalContext, normalize_paths

__all__ = [
    'NormalizationForm', 'default_form', 'normalize', 'parse_form',
    'PathNormalizer', 'RenameRecord', 'TraversalContext', 'normalize_paths',
]
