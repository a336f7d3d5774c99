# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/normname/cli/__init__.py

"""Command Line Interface package for normname."""

from .main import cli_main as main, app

__all__ = ['main', 'app']
