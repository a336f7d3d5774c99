# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/conftest.py

"""
Shared test fixtures for the normname test suite.
"""

import pytest
from loguru import logger

from tests.fixtures.unicode_tree import build_nfd_tree


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path_factory, monkeypatch):
    """Point every config search path away from the real user's files."""
    sandbox = tmp_path_factory.mktemp("user-config")
    config_home = sandbox / "config-home"
    config_home.mkdir()
    monkeypatch.setenv("HOME", str(sandbox / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(sandbox / "xdg"))
    monkeypatch.setenv("NORMNAME_CONFIG_HOME", str(config_home))
    yield config_home
    logger.remove()


@pytest.fixture
def nfd_tree(tmp_path):
    """Decomposed-name tree under tmp_path/work (see build_nfd_tree)."""
    return build_nfd_tree(tmp_path / "work")
