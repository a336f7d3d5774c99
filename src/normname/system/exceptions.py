# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/normname/system/exceptions.py

"""
normname-specific exception classes.

Every error is terminal for a run: the CLI reports the first one raised
and exits non-zero. Renames completed before the failure are kept.
"""


class NormNameError(Exception):
    """Base exception for all normname errors."""
    pass


class ConfigError(NormNameError):
    """Raised for an invalid normalization form or invalid config values."""
    pass


# === FILESYSTEM OPERATION ERRORS ===

class FilesystemError(NormNameError):
    """Base class for filesystem operation errors."""

    def __init__(self, message: str, path: str = None):
        self.path = path
        super().__init__(message)


class NotFoundError(FilesystemError):
    """Path does not exist or cannot be stat-ed."""
    pass


class ListError(FilesystemError):
    """Directory contents could not be enumerated."""
    pass


class RenameError(FilesystemError):
    """Filesystem rename failed (permissions, target exists, cross-device)."""

    def __init__(self, message: str, path: str = None, target: str = None):
        self.target = target
        super().__init__(message, path=path)
