#===============================================================================
#  Desktop_Launcher | fs_discovery.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Filesystem discovery of desktop entries under a list of root folders.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .categories import choose_category
from .commands import format_exec
from .constants import (
    ACTION_SECTION_PREFIX,
    DEFAULT_ACTION_NAME,
    DEFAULT_APP_NAME,
    ENTRY_EXTENSION,
    PRIMARY_SECTION,
)
from .entry_source import EntrySource
from .errors import ActionDefinitionError, EntrySourceError
from .models import Action, ProgramResult

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class DiscoveryError:
    """An entry file that was skipped because it is unreadable or malformed."""
    path: str
    message: str


@dataclass
class DiscoveryReport:
    results: List[ProgramResult] = field(default_factory=list)
    errors: List[DiscoveryError] = field(default_factory=list)


def safe_key(p: Path) -> str:
    """Stable key for a folder, derived from its absolute resolved path."""
    try:
        return str(p.resolve())
    except (OSError, RuntimeError):
        return str(p.absolute())


def _is_false(value: str) -> bool:
    # Exact match: "False" or "0" still hide the entry.
    return value == "false"


def _split_list(raw: Optional[str]) -> List[str]:
    return [token.strip() for token in (raw or "").split(";") if token.strip()]


def read_actions(source: EntrySource, raw_ids: Optional[str]) -> Optional[Tuple[Action, ...]]:
    """Build the actions listed in the Actions key.

    Each id must have a "Desktop Action <id>" section with an Exec key.
    A missing or empty Exec raises ActionDefinitionError: a declared action is
    never dropped silently and its command is never made up.
    """
    ids = _split_list(raw_ids)
    if not ids:
        return None

    actions: List[Action] = []
    for action_id in ids:
        section = source.section(f"{ACTION_SECTION_PREFIX} {action_id}")
        raw_exec = section.get("Exec")
        if raw_exec is None:
            raise ActionDefinitionError(action_id)
        command = format_exec(raw_exec)
        if not command.strip():
            raise ActionDefinitionError(action_id, "empty Exec")
        actions.append(Action(name=section.get("Name", DEFAULT_ACTION_NAME), exec=command))
    return tuple(actions)


def program_from_source(source: EntrySource) -> Optional[ProgramResult]:
    """Turn a parsed entry into a ProgramResult, or None when it is filtered out.

    Filtered out: Hidden or NoDisplay set, no Exec key, or an Exec made only of
    placeholders. Declared actions are built first, so a broken action raises
    ActionDefinitionError even for an entry that would be filtered out.
    """
    entry = source.section(PRIMARY_SECTION)
    actions = read_actions(source, entry.get("Actions"))

    show = _is_false(entry.get("NoDisplay", "false")) and _is_false(entry.get("Hidden", "false"))
    if not show:
        logger.debug("Skipping hidden entry %s", source.path)
        return None

    raw_exec = entry.get("Exec")
    if raw_exec is None:
        logger.debug("Skipping entry without Exec %s", source.path)
        return None

    command = format_exec(raw_exec)
    if not command.strip():
        logger.debug("Skipping entry with empty Exec %s", source.path)
        return None

    return ProgramResult(
        name=entry.get("Name", DEFAULT_APP_NAME),
        category=choose_category(entry.get("Categories")),
        description=entry.get("Comment", ""),
        exec=command,
        icon=entry.get("Icon") or None,
        version=entry.get("Version") or None,
        actions=actions,
        source=source.path,
    )


def parse_entry_file(path: Path) -> Optional[ProgramResult]:
    """Parse one entry file.

    Raises EntrySourceError / ActionDefinitionError; scan() turns those into
    skipped files.
    """
    return program_from_source(EntrySource.from_path(path))


def _list_children(folder: Path) -> List[Path]:
    try:
        return list(folder.iterdir())
    except OSError as e:
        logger.debug("Cannot list %s: %s", folder, e)
        return []


def _is_dir(p: Path) -> bool:
    try:
        return p.is_dir()
    except OSError:
        return False


def scan(roots: Iterable[PathLike]) -> DiscoveryReport:
    """Walk *roots* recursively and collect every displayable program.

    Folders are visited once per pass (by resolved path), so overlapping roots
    and symlink loops are harmless. A bad folder or file only skips itself.
    """
    report = DiscoveryReport()
    pending: List[Path] = [Path(r) for r in roots]
    visited = set()

    while pending:
        folder = pending.pop()
        key = safe_key(folder)
        if key in visited:
            continue
        visited.add(key)

        for child in _list_children(folder):
            if _is_dir(child):
                pending.append(child)
                continue

            if child.suffix != ENTRY_EXTENSION:
                continue

            try:
                program = parse_entry_file(child)
            except EntrySourceError as e:
                logger.warning("Skipping unreadable entry: %s", e)
                report.errors.append(DiscoveryError(str(child), str(e)))
                continue
            except ActionDefinitionError as e:
                logger.error("Skipping %s: %s", child, e)
                report.errors.append(DiscoveryError(str(child), str(e)))
                continue

            if program is not None:
                report.results.append(program)

    logger.info(
        "Discovered %d programs (%d entries skipped with errors)",
        len(report.results), len(report.errors),
    )
    return report


def find_all(roots: Iterable[PathLike]) -> List[ProgramResult]:
    """Find all desktop programs under *roots*."""
    return scan(roots).results
