#===============================================================================
#  Desktop_Launcher | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Exception types raised by discovery and activation.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class DesklaunchError(Exception):
    """Base class for every error raised by the launcher core."""


class EntrySourceError(DesklaunchError):
    """An entry file could not be read or parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ActionDefinitionError(DesklaunchError):
    """A declared desktop action has no usable Exec key."""

    def __init__(self, action_id: str, reason: str = "missing Exec"):
        super().__init__(f"Action '{action_id}': {reason}")
        self.action_id = action_id


class LaunchError(DesklaunchError, RuntimeError):
    """Activation failed. The result collection is left untouched."""

    def __init__(self, command: str, reason: str):
        super().__init__(f"Could not launch '{command}': {reason}")
        self.command = command
        self.reason = reason


class CommandSyntaxError(LaunchError):
    """The command line is empty or cannot be split into shell words."""


class SpawnError(LaunchError):
    """The executable was not found, not executable, or not permitted."""
