#===============================================================================
#  Desktop_Launcher | result_widget.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Result row and preview panel widgets, built on demand from a ProgramResult.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QSize, Signal
from PySide6.QtGui import QFont, QIcon
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout

from .constants import THEME_PANEL, THEME_SECONDARY_TEXT
from .models import Action, ProgramResult

ROW_SIZE = QSize(420, 56)
ROW_ICON_PX = 32
PREVIEW_ICON_PX = 64
FALLBACK_ICON = "application-x-executable"
ACTION_ICON = "start-here-symbolic"


def theme_icon(name: Optional[str]) -> QIcon:
    icon = QIcon.fromTheme(name or FALLBACK_ICON)
    if icon.isNull():
        icon = QIcon.fromTheme(FALLBACK_ICON)
    return icon


def category_label(text: str) -> QLabel:
    label = QLabel(text)
    font = QFont("Segoe UI", 8)
    font.setBold(True)
    label.setFont(font)
    label.setObjectName("CategoryLabel")
    label.setStyleSheet(f"color: {THEME_SECONDARY_TEXT};")
    return label


class ResultWidget(QFrame):
    """One row of the result list: icon, category and name."""

    def __init__(self, result: ProgramResult, parent=None):
        super().__init__(parent)
        self.result = result
        self.setObjectName("ResultRow")
        self.setFixedHeight(ROW_SIZE.height())

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)
        layout.setSpacing(8)

        self.icon_label = QLabel()
        self.icon_label.setFixedSize(ROW_ICON_PX, ROW_ICON_PX)
        self.icon_label.setPixmap(theme_icon(result.icon).pixmap(ROW_ICON_PX, ROW_ICON_PX))
        layout.addWidget(self.icon_label)

        text_box = QVBoxLayout()
        text_box.setSpacing(1)
        self.category_label = category_label(result.category)
        text_box.addWidget(self.category_label)

        self.name_label = QLabel(result.name)
        self.name_label.setStyleSheet("color: white;")
        text_box.addWidget(self.name_label)
        layout.addLayout(text_box, 1)


class PreviewWidget(QFrame):
    """Details of the selected program with launch and action buttons.

    The widget never launches anything itself; it only emits signals.
    """

    launch_requested = Signal()
    action_requested = Signal(object)  # Action

    def __init__(self, result: ProgramResult, parent=None):
        super().__init__(parent)
        self.result = result
        self.setObjectName("PreviewPanel")
        self.setStyleSheet(f"QFrame#PreviewPanel {{ background: {THEME_PANEL}; }}")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(6)

        icon_label = QLabel()
        icon_label.setAlignment(Qt.AlignHCenter)
        icon_label.setPixmap(theme_icon(result.icon).pixmap(PREVIEW_ICON_PX, PREVIEW_ICON_PX))
        layout.addWidget(icon_label)

        self.category_label = category_label(result.category)
        self.category_label.setAlignment(Qt.AlignHCenter)
        layout.addWidget(self.category_label)

        self.name_label = QLabel(result.name)
        self.name_label.setAlignment(Qt.AlignHCenter)
        name_font = QFont("Segoe UI", 12)
        name_font.setBold(True)
        self.name_label.setFont(name_font)
        self.name_label.setStyleSheet("color: white;")
        layout.addWidget(self.name_label)

        self.description_label = QLabel(result.description)
        self.description_label.setAlignment(Qt.AlignHCenter)
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(f"color: {THEME_SECONDARY_TEXT};")
        self.description_label.setVisible(bool(result.description.strip()))
        layout.addWidget(self.description_label)

        layout.addStretch(1)

        self.version_label: Optional[QLabel] = None
        if result.version:
            self.version_label = category_label(f"VERSION {result.version}")
            self.version_label.setAlignment(Qt.AlignHCenter)
            layout.addWidget(self.version_label)

        self.launch_button = QPushButton("Launch")
        self.launch_button.setIcon(QIcon.fromTheme("media-playback-start-symbolic"))
        self.launch_button.clicked.connect(lambda _checked=False: self.launch_requested.emit())
        layout.addWidget(self.launch_button)

        self.action_buttons = []
        for action in result.actions or ():
            btn = QPushButton(action.name)
            btn.setIcon(QIcon.fromTheme(ACTION_ICON))
            btn.setFlat(True)
            btn.clicked.connect(lambda _checked=False, a=action: self._request_action(a))
            layout.addWidget(btn)
            self.action_buttons.append(btn)

    def _request_action(self, action: Action) -> None:
        self.action_requested.emit(action)
