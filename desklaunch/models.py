#===============================================================================
#  Desktop_Launcher | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Immutable search result records shared by discovery, search and the UI.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from . import launcher
from .ranking import get_ranking


@dataclass(frozen=True)
class Action:
    """A named alternate launch command declared by a program."""
    name: str
    exec: str   # sanitized command line

    def activate(self) -> None:
        launcher.launch_command(self.exec)


@dataclass(frozen=True)
class ProgramResult:
    """A program search result, created from a desktop entry."""
    name: str
    category: str                          # chosen label, uppercase
    description: str
    exec: str                              # sanitized, never empty
    icon: Optional[str] = None             # icon identifier, not image data
    version: Optional[str] = None
    actions: Optional[Tuple[Action, ...]] = None
    source: Optional[str] = field(default=None, compare=False)  # entry file path

    def __post_init__(self):
        if not self.exec.strip():
            raise ValueError(f"Program '{self.name}' has an empty launch command")
        if self.actions is not None:
            actions = tuple(self.actions)
            # An empty list means "no actions".
            object.__setattr__(self, "actions", actions or None)

    def get_ranking(self, query: str) -> int:
        return get_ranking(self.name, query)

    def activate(self) -> None:
        launcher.activate(self)

    def activate_action(self, action: Action) -> None:
        launcher.activate_action(self, action)
