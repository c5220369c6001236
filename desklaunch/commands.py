#===============================================================================
#  Desktop_Launcher | commands.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Launch command helpers: placeholder removal and shell-style splitting.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import shlex
from typing import List

from .constants import FIELD_CODES
from .errors import CommandSyntaxError


def format_exec(raw: str) -> str:
    """Remove launcher placeholders (%f %F %D %u %U) from an Exec value.

    Only the placeholder characters are removed; surrounding spaces and every
    other part of the command stay exactly as they were.
    """
    command = raw
    for code in FIELD_CODES:
        command = command.replace(code, "")
    return command


def split_command(command: str) -> List[str]:
    """Split *command* into argv, honoring shell quoting."""
    if "\x00" in command:
        raise CommandSyntaxError(command, "embedded null byte")
    try:
        argv = shlex.split(command)
    except ValueError as e:
        raise CommandSyntaxError(command, str(e)) from e
    if not argv:
        raise CommandSyntaxError(command, "empty command")
    return argv
