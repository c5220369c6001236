#===============================================================================
#  Desktop_Launcher | search.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Orders the discovered programs for the current query (caller-side filter).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .models import ProgramResult

Ranked = Tuple[int, ProgramResult]


def rank_results(
    results: Iterable[ProgramResult],
    query: str,
    limit: Optional[int] = None,
) -> List[Ranked]:
    """Score every result against *query*, best first.

    - empty query: everything, alphabetical, score 0
    - otherwise: zero scores are dropped, ties broken by name
    """
    if not query:
        ranked = [(0, r) for r in results]
    else:
        ranked = [(r.get_ranking(query), r) for r in results]
        ranked = [item for item in ranked if item[0] > 0]

    ranked.sort(key=lambda item: (-item[0], item[1].name.lower(), item[1].name))
    if limit is not None and limit >= 0:
        ranked = ranked[:limit]
    return ranked
