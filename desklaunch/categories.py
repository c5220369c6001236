#===============================================================================
#  Desktop_Launcher | categories.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Picks the single category label shown for a program.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import re
from typing import List, Optional

from .constants import DEFAULT_CATEGORY, EXCLUDED_CATEGORIES

# Words inside one category token: acronyms ("KDE", "HTTP" in "HTTPServer"),
# capitalized or lowercase runs ("Audio", "video"), digit runs, and letters
# outside ASCII. Separators such as '-', '_' and spaces are never part of a word.
WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+|[^\W\d_]+")


def split_words(token: str) -> List[str]:
    return WORD_RE.findall(token)


def title_case(token: str) -> str:
    """'AudioVideo' -> 'Audio Video', 'X-KDE-Utility' -> 'X Kde Utility'."""
    words = split_words(token)
    if not words:
        return token
    return " ".join(w[:1].upper() + w[1:].lower() for w in words)


def choose_category(raw: Optional[str]) -> str:
    """Choose the best category to display, uppercased for the result row.

    The exclusion table and the title-case-then-uppercase casing are fixed.
    """
    candidates = [
        token.strip() for token in (raw or "").split(";")
        if token.strip() and token.strip().upper() not in EXCLUDED_CATEGORIES
    ]
    chosen = candidates[0] if candidates else DEFAULT_CATEGORY
    return title_case(chosen).upper()
