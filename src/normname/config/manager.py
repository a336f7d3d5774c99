# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/normname/config/manager.py

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Final

import yaml
from loguru import logger
from pydantic import BaseModel, ValidationError, field_validator

from normname.core.forms import NormalizationForm, default_form, parse_form
from normname.system.exceptions import ConfigError


# ---- Constants ----

USER_CFG: Final = "normname.yml"


def _get_user_config_search_paths() -> tuple[Path, ...]:
    """Get config file search paths (ordered by priority: lowest to highest).

    Dynamic function to ensure environment variables are evaluated at runtime,
    not at module import time (important for test isolation).
    """
    candidates = [
        Path("/etc/normname") / USER_CFG,  # System defaults
        Path.home() / ".config" / "normname" / USER_CFG,  # User config
    ]
    if os.getenv("XDG_CONFIG_HOME"):
        candidates.append(Path(os.environ["XDG_CONFIG_HOME"]) / "normname" / USER_CFG)
    if os.getenv("NORMNAME_CONFIG_HOME"):
        # Explicit override (highest priority)
        candidates.append(Path(os.environ["NORMNAME_CONFIG_HOME"]) / USER_CFG)
    return tuple(candidates)


def _load_merged_config_data(candidates: tuple[Path, ...]) -> dict:
    """Load and merge config data from candidate paths.

    Files that cannot be read or parsed are skipped with a warning.

    Returns:
        Merged configuration data (empty if no config file exists)
    """
    merged_data = {}
    found_configs = []

    for candidate in candidates:
        if not candidate.is_file():
            continue
        try:
            with candidate.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError("top level is not a mapping")
            merged_data.update(data)  # Later configs override earlier ones
            found_configs.append(str(candidate))
            logger.debug(f"Loaded config from {candidate}")
        except (OSError, yaml.YAMLError, ValueError) as e:
            logger.warning(f"Failed to load config from {candidate}: {e}")

    if found_configs:
        logger.debug(f"Merged config from: {', '.join(found_configs)}")
    else:
        logger.debug("No user config found, using defaults")
    return merged_data


class UserConfig(BaseModel):
    """Optional per-user settings."""

    # Form used when --form is not given; falls back to the host default
    default_form: Optional[str] = None

    # Directory for the debug log file
    local_log: Optional[Path] = None

    @field_validator("default_form")
    @classmethod
    def _check_form(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            try:
                parse_form(value)
            except ConfigError as e:
                raise ValueError(str(e))
        return value


def load_merged_user_config() -> UserConfig:
    """Load and merge user config from all locations (system defaults + user overrides).

    Raises:
        ConfigError: If the merged values do not validate
    """
    merged_data = _load_merged_config_data(_get_user_config_search_paths())
    try:
        return UserConfig.model_validate(merged_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid user config: {e}")


def resolve_form(form_name: Optional[str], user_config: Optional[UserConfig] = None) -> NormalizationForm:
    """Pick the form for this run: explicit name, then user config, then host default.

    Raises:
        ConfigError: If the chosen name is not a valid form
    """
    if form_name is not None:
        return parse_form(form_name)
    if user_config is not None and user_config.default_form:
        return parse_form(user_config.default_form)
    return default_form()
