#===============================================================================
#  Desktop_Launcher | entry_source.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Reads one desktop entry file and exposes its named key/value sections.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import configparser
from pathlib import Path
from typing import Dict, List, Optional

from .errors import EntrySourceError


def _new_parser() -> configparser.ConfigParser:
    # No interpolation: Exec lines are full of '%' field codes.
    # strict=False: duplicated keys/sections merge, last write wins.
    # default_section="" can never match a "[...]" header, so no DEFAULT leaks.
    parser = configparser.ConfigParser(
        interpolation=None,
        strict=False,
        delimiters=("=",),
        comment_prefixes=("#",),
        inline_comment_prefixes=None,
        empty_lines_in_values=False,
        default_section="",
    )
    parser.optionxform = str  # keys are case sensitive (Name vs name)
    return parser


class EntrySource:
    """Parsed sections of a single entry file.

    Missing sections behave like empty ones, so callers can always ask for an
    attribute and fall back to a default.
    """

    def __init__(self, sections: Dict[str, Dict[str, str]], path: str = "<memory>"):
        self.path = path
        self._sections = sections

    @classmethod
    def from_string(cls, text: str, path: str = "<memory>") -> "EntrySource":
        parser = _new_parser()
        try:
            parser.read_string(text, source=path)
        except configparser.Error as e:
            raise EntrySourceError(path, f"malformed entry: {e}") from e

        sections = {name: dict(parser.items(name, raw=True)) for name in parser.sections()}
        return cls(sections, path)

    @classmethod
    def from_path(cls, path: Path) -> "EntrySource":
        """Read and parse *path*. Any read, decode or syntax problem raises EntrySourceError."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise EntrySourceError(str(path), f"unreadable: {e}") from e
        return cls.from_string(text, str(path))

    def sections(self) -> List[str]:
        return list(self._sections)

    def has_section(self, name: str) -> bool:
        return name in self._sections

    def section(self, name: str) -> Dict[str, str]:
        return dict(self._sections.get(name, {}))

    def attr(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._sections.get(section, {}).get(key, default)
