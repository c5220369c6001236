#===============================================================================
#  Desktop_Launcher | ranking.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Fuzzy subsequence scoring used for type-to-filter search.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from .constants import MAX_LETTER_SCORE


def normalize_name(name: str) -> str:
    """Lowercase and drop every whitespace character."""
    return "".join(name.lower().split())


def get_ranking(candidate_name: str, query: str) -> int:
    """Score *query* against *candidate_name*; higher is better, never negative.

    Each query character is looked up in order, starting just past the
    previous match. A hit at offset p from that cursor is worth
    max(10 - p, 0); a miss is worth nothing and leaves the cursor in place.
    Only the candidate is normalized, the query is matched as given.
    """
    haystack = normalize_name(candidate_name)
    score = 0
    cursor = 0

    for letter in query:
        index = haystack.find(letter, cursor)
        if index < 0:
            continue
        score += max(MAX_LETTER_SCORE - (index - cursor), 0)
        cursor = index + 1

    return score
