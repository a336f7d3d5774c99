# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/normname/__init__.py

"""normname - rename files and directories to a Unicode normalization form."""
