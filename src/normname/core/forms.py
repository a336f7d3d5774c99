# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/normname/core/forms.py

"""
Unicode normalization forms.

Some characters can be written with different code point sequences: the
e-acute 'é' is either '\\u00e9' (composed) or 'e\\u0301' (decomposed).
macOS filesystems typically hand out decomposed (NFD) names, Windows
composed (NFC) ones, so the same file name looks different across hosts.
"""

import sys
import unicodedata
from enum import Enum
from typing import Final, Optional

from normname.system.exceptions import ConfigError


class NormalizationForm(Enum):
    """The four standard Unicode normalization forms."""
    NFC = "NFC"    # canonical equivalence, composed
    NFD = "NFD"    # canonical equivalence, decomposed
    NFKC = "NFKC"  # compatibility equivalence, composed
    NFKD = "NFKD"  # compatibility equivalence, decomposed

    def normalize(self, text: str) -> str:
        return unicodedata.normalize(self.value, text)

    @property
    def is_compatibility(self) -> bool:
        """NFKC/NFKD fold compatibility characters and are not reversible."""
        return self in (NormalizationForm.NFKC, NormalizationForm.NFKD)


FORM_ALIASES: Final[dict[str, NormalizationForm]] = {
    "NFC": NormalizationForm.NFC,
    "NFD": NormalizationForm.NFD,
    "NFKC": NormalizationForm.NFKC,
    "NFKD": NormalizationForm.NFKD,
    "WIN": NormalizationForm.NFC,
    "MAC": NormalizationForm.NFD,
}


def parse_form(name: str) -> NormalizationForm:
    """Parse a form name (case-insensitive), accepting WIN and MAC aliases.

    Raises:
        ConfigError: If the name is not a known form or alias
    """
    key = (name or "").strip().upper()
    try:
        return FORM_ALIASES[key]
    except KeyError:
        valid = ", ".join(FORM_ALIASES)
        raise ConfigError(f"invalid normalization form '{name}' (expected one of {valid})")


def default_form(platform: Optional[str] = None) -> NormalizationForm:
    """Host default: composed on Windows, decomposed on macOS, composed elsewhere."""
    platform = platform or sys.platform
    if platform.startswith(("win32", "cygwin")):
        return NormalizationForm.NFC
    if platform.startswith("darwin"):
        return NormalizationForm.NFD
    return NormalizationForm.NFC


def normalize(text: str, form: NormalizationForm) -> str:
    return form.normalize(text)
