#===============================================================================
#  Desktop_Launcher | logs.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Logging setup: rotating launcher.log in the logs folder plus stderr.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

from .constants import LOG_FILE_NAME

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
PACKAGE_LOGGER = "desklaunch"

# Marks the handlers we installed, so configure_logging can be called again.
_HANDLER_TAG = "_desklaunch_handler"


def configure_logging(log_dir: Optional[Path] = None, level: Union[int, str] = "INFO") -> logging.Logger:
    """Attach file and stderr handlers to the package logger.

    Calling it again replaces the previous handlers instead of stacking them.
    If the log folder cannot be created only stderr is used.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG, False):
            root.removeHandler(h)
            h.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]

    if log_dir is not None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.handlers.RotatingFileHandler(
                log_dir / LOG_FILE_NAME, maxBytes=512 * 1024, backupCount=3, encoding="utf-8",
            ))
        except OSError as e:
            root.warning("File logging disabled (%s): %s", log_dir, e)

    for h in handlers:
        setattr(h, _HANDLER_TAG, True)
        h.setFormatter(formatter)
        root.addHandler(h)

    return root
