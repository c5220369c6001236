#===============================================================================
#  Desktop_Launcher | desklaunch/main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Type-to-filter search window over the discovered desktop programs:
#    - Query field: every edit re-ranks the full program list
#    - Result list (best match first) + preview panel for the selected row
#    - Enter launches the selected (or top) result
#    - Preview buttons launch the program or one of its desktop actions
#    - Refresh re-runs discovery over the configured search roots
#===============================================================================

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from .config import (
    config_dir,
    load_settings,
    log_dir,
    max_results_setting,
    resolve_search_roots,
    settings_path,
)
from .constants import APP_TITLE, DEFAULT_MAX_RESULTS, THEME_BG, THEME_BORDER, THEME_PANEL
from .errors import LaunchError
from .fs_discovery import scan
from .logs import configure_logging
from .models import Action, ProgramResult
from .result_widget import PreviewWidget
from .search import rank_results
from .ui_widgets import ResultList

logger = logging.getLogger(__name__)


class SearchWindow(QMainWindow):
    def __init__(self, roots: Sequence[Path], max_results: int = DEFAULT_MAX_RESULTS,
                 settings_dir: Optional[Path] = None, discover: bool = True):
        super().__init__()
        self.setWindowTitle(APP_TITLE)

        self.roots = list(roots)
        self.max_results = max_results
        self.settings_dir = settings_dir
        self.programs: Tuple[ProgramResult, ...] = ()
        self.preview: Optional[PreviewWidget] = None

        self.setStyleSheet(f"""
        QMainWindow {{ background: {THEME_BG}; }}
        QLabel {{ color: white; font-family: "Segoe UI"; }}
        QLineEdit {{
            color: white;
            background: {THEME_PANEL};
            border: 1px solid {THEME_BORDER};
            padding: 8px;
            font-size: 14px;
        }}
        QListWidget {{ background: {THEME_BG}; border: none; }}
        QListWidget::item:selected {{ background: #222; }}
        QPushButton {{
            font-family: "Segoe UI";
            color: white;
            background: {THEME_PANEL};
            border: 1px solid {THEME_BORDER};
            padding: 6px 10px;
        }}
        QPushButton:hover {{ background: #222; }}
        QPushButton:pressed {{ background: {THEME_BORDER}; }}
        """)

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(10)

        header = QHBoxLayout()
        self.query_edit = QLineEdit()
        self.query_edit.setPlaceholderText("Type to search applications…")
        self.query_edit.textChanged.connect(self.update_results)
        self.query_edit.returnPressed.connect(self.launch_current)
        header.addWidget(self.query_edit, 1)

        self.btn_open_settings = QPushButton("Open settings folder")
        self.btn_open_settings.clicked.connect(self.open_settings_folder)
        self.btn_open_settings.setVisible(settings_dir is not None)
        header.addWidget(self.btn_open_settings)

        self.btn_refresh = QPushButton("Refresh")
        self.btn_refresh.clicked.connect(self.refresh)
        header.addWidget(self.btn_refresh)
        layout.addLayout(header)

        self.result_list = ResultList()
        self.result_list.currentRowChanged.connect(self.show_preview)
        self.result_list.itemActivated.connect(lambda *_: self.launch_current())

        self.preview_box = QWidget()
        self.preview_layout = QVBoxLayout(self.preview_box)
        self.preview_layout.setContentsMargins(0, 0, 0, 0)

        splitter = QSplitter(Qt.Horizontal)
        splitter.addWidget(self.result_list)
        splitter.addWidget(self.preview_box)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)
        layout.addWidget(splitter, 1)

        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

        if discover:
            self.refresh()

    # ----------------------------
    # Discovery / ranking
    # ----------------------------
    def refresh(self):
        report = scan(self.roots)
        self.set_programs(report.results)
        msg = f"{len(report.results)} applications"
        if report.errors:
            msg += f" • {len(report.errors)} entries skipped (see log)"
        self.status_label.setText(msg)

    def set_programs(self, programs: Sequence[ProgramResult]):
        self.programs = tuple(programs)
        self.update_results(self.query_edit.text())

    def update_results(self, query: str = ""):
        ranked = rank_results(self.programs, query, self.max_results)
        self.result_list.set_results([r for _score, r in ranked])
        if not ranked:
            self.show_preview(-1)

    def visible_results(self) -> List[ProgramResult]:
        return [self.result_list.result_at(i) for i in range(self.result_list.count())]

    def show_preview(self, row: int):
        if self.preview is not None:
            self.preview_layout.removeWidget(self.preview)
            self.preview.deleteLater()
            self.preview = None

        result = self.result_list.result_at(row)
        if result is None:
            return

        self.preview = PreviewWidget(result)
        self.preview.launch_requested.connect(lambda r=result: self.launch(r))
        self.preview.action_requested.connect(lambda a, r=result: self.launch_action(r, a))
        self.preview_layout.addWidget(self.preview)

    # ----------------------------
    # Activation
    # ----------------------------
    def launch_current(self):
        result = self.result_list.current_result() or self.result_list.result_at(0)
        if result is not None:
            self.launch(result)

    def launch(self, result: ProgramResult) -> bool:
        try:
            result.activate()
        except LaunchError as e:
            logger.warning("Launch failed for %s: %s", result.name, e)
            QMessageBox.critical(self, "Launch failed", str(e))
            return False
        return True

    def launch_action(self, result: ProgramResult, action: Action) -> bool:
        try:
            result.activate_action(action)
        except LaunchError as e:
            logger.warning("Launch failed for %s / %s: %s", result.name, action.name, e)
            QMessageBox.critical(self, "Launch failed", str(e))
            return False
        return True

    def open_settings_folder(self):
        if self.settings_dir is None:
            return
        self.settings_dir.mkdir(parents=True, exist_ok=True)
        try:
            if sys.platform.startswith("win"):
                subprocess.Popen(["explorer", str(self.settings_dir)])
            elif sys.platform == "darwin":
                subprocess.Popen(["open", str(self.settings_dir)])
            else:
                subprocess.Popen(["xdg-open", str(self.settings_dir)])
        except OSError as e:
            QMessageBox.warning(self, "Open failed", str(e))


def run() -> int:
    settings = load_settings(settings_path())
    configure_logging(log_dir(), settings.get("log_level", "INFO"))

    app = QApplication.instance() or QApplication(sys.argv)
    w = SearchWindow(
        resolve_search_roots(settings),
        max_results_setting(settings),
        settings_dir=config_dir(),
    )
    w.resize(900, 600)
    w.show()
    return app.exec()
