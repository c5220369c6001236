#===============================================================================
#  Desktop_Launcher | ui_widgets.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Reusable UI widgets (result list). Keeps the main window/controller smaller.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import List, Optional

from PySide6.QtWidgets import QListWidget, QListWidgetItem

from .models import ProgramResult
from .result_widget import ROW_SIZE, ResultWidget


class ResultList(QListWidget):
    """A vertical list of result rows, in ranking order."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setViewMode(QListWidget.ListMode)
        self.setUniformItemSizes(True)
        self.setSelectionMode(QListWidget.SingleSelection)
        self.setSpacing(2)
        self._results: List[ProgramResult] = []

    def set_results(self, results: List[ProgramResult]) -> None:
        self.clear()
        self._results = list(results)
        for result in self._results:
            item = QListWidgetItem(self)
            item.setSizeHint(ROW_SIZE)
            self.setItemWidget(item, ResultWidget(result))
        if self._results:
            self.setCurrentRow(0)

    def result_at(self, row: int) -> Optional[ProgramResult]:
        if 0 <= row < len(self._results):
            return self._results[row]
        return None

    def current_result(self) -> Optional[ProgramResult]:
        return self.result_at(self.currentRow())
