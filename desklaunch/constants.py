#===============================================================================
#  Desktop_Launcher | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for entry-file naming conventions, defaults and UI theme.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "Desktop Launcher"
APP_CONFIG_DIR_NAME = "desklaunch"
SETTINGS_FILE_NAME = "settings.json"
LOG_DIR_NAME = "logs"
LOG_FILE_NAME = "launcher.log"

# --- Entry files ---
ENTRY_EXTENSION = ".desktop"
PRIMARY_SECTION = "Desktop Entry"
ACTION_SECTION_PREFIX = "Desktop Action"

DEFAULT_APP_NAME = "Unnamed Application"
DEFAULT_ACTION_NAME = "Unnamed Action"
DEFAULT_CATEGORY = "Application"

# Launcher placeholders: single file, multiple files, directory list,
# single URL, multiple URLs.
FIELD_CODES = ("%f", "%F", "%D", "%u", "%U")

# Categories skipped when choosing the displayed one. They are either too
# general, for development purposes, or toolkit names of no use to regular users.
EXCLUDED_CATEGORIES = frozenset({
    "APPLICATION",
    "CONSOLEONLY",
    "NETWORK",
    "FILETRANSFER",
    "TEXTEDITOR",
    "X-XFCE",
    "GNOME",
    "XFCE",
    "GTK",
    "KDE",
})

# --- Ranking ---
MAX_LETTER_SCORE = 10

# --- Fallback search roots (per-user first, then system) ---
FALLBACK_SEARCH_ROOTS = (
    "~/.local/share/applications",
    "/usr/share/applications",
    "/usr/local/share/applications",
)
DEFAULT_MAX_RESULTS = 50

# --- Dark theme ---
THEME_BG = "#101010"
THEME_PANEL = "#1a1a1a"
THEME_BORDER = "#2a2a2a"
THEME_ACCENT = "#0078D7"
THEME_SECONDARY_TEXT = "rgba(255,255,255,0.65)"
