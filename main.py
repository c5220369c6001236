#===============================================================================
#  Desktop_Launcher  |  Type-to-filter Application Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  A launcher that discovers installed desktop applications from their
#  *.desktop entry files and ranks them against the typed query.
#  Supports:
#    - Recursive discovery under configurable search roots
#    - Hidden / NoDisplay filtering, category and placeholder clean-up
#    - Fuzzy subsequence ranking on every keystroke
#    - Launching programs and their desktop actions as detached processes
#
#  Folder Conventions
#  ------------------
#    ~/.config/desklaunch/
#      - settings.json                     -> search roots, max results, log level
#      - logs/launcher.log                 -> discovery and launch log
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (e.g., PySide6) which are licensed
#  separately by their respective authors. Ensure compliance with their
#  license terms when distributing this software.
#===============================================================================

import sys

from desklaunch.main_window import run


if __name__ == "__main__":
    sys.exit(run())
