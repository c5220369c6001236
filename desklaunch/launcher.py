#===============================================================================
#  Desktop_Launcher | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Launches programs and their desktop actions as detached processes.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

from .commands import split_command
from .errors import SpawnError

if TYPE_CHECKING:
    from .models import Action, ProgramResult

logger = logging.getLogger(__name__)


def launch_command(command: str) -> None:
    """Spawn *command* detached, with all standard streams discarded.

    Does not wait for the child and never reports its exit status.

    Raises:
      - CommandSyntaxError: empty command or unbalanced quotes
      - SpawnError: executable not found, not executable, permission denied
    """
    argv = split_command(command)
    logger.info("Executing '%s'", command)
    try:
        subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
            close_fds=True,
        )
    except (OSError, ValueError) as e:
        logger.warning("Failed to spawn '%s': %s", argv[0], e)
        raise SpawnError(command, getattr(e, "strerror", None) or str(e)) from e


def activate(result: "ProgramResult") -> None:
    launch_command(result.exec)


def activate_action(result: "ProgramResult", action: "Action") -> None:
    """Launch one of *result*'s own desktop actions."""
    if action not in (result.actions or ()):
        raise ValueError(f"Action '{action.name}' does not belong to '{result.name}'")
    launch_command(action.exec)
