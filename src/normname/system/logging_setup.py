# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/normname/system/logging_setup.py

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from normname.config.manager import UserConfig

LOG_FILE_NAME = "normname.log"


def setup_logging(debug: bool = False, user_config: Optional[UserConfig] = None) -> None:
    """Setup loguru logging for the entire application.

    Configures:
    - Console output: WARNING+ only (DEBUG+ with debug=True)
    - File output: DEBUG+ if local_log is configured in user config
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "WARNING",
        format="<level>{level}</level>: {message}",
        colorize=True
    )

    if user_config is None or not user_config.local_log:
        return

    try:
        log_dir = Path(user_config.local_log)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME

        logger.add(
            log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="10 MB",
            retention="30 days",
            compression="gz"
        )
        logger.debug(f"File logging enabled: {log_file}")

    except Exception as e:
        # Don't fail the run if the log file can't be set up
        logger.warning(f"Failed to setup file logging: {e}")
