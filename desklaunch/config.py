#===============================================================================
#  Desktop_Launcher | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Load/save of launcher settings (search roots, result limit, log level).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .constants import (
    APP_CONFIG_DIR_NAME,
    DEFAULT_MAX_RESULTS,
    FALLBACK_SEARCH_ROOTS,
    LOG_DIR_NAME,
    SETTINGS_FILE_NAME,
)

logger = logging.getLogger(__name__)


def _env_dirs(env: Mapping[str, str], name: str) -> List[str]:
    return [d for d in env.get(name, "").split(os.pathsep) if d.strip()]


def default_search_roots(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Per-user application folder first, then the system ones.

    Follows XDG_DATA_HOME / XDG_DATA_DIRS when set, otherwise the usual
    ~/.local/share, /usr/share and /usr/local/share locations.
    """
    env = os.environ if env is None else env

    data_home = env.get("XDG_DATA_HOME", "").strip()
    data_dirs = _env_dirs(env, "XDG_DATA_DIRS")
    if not data_home and not data_dirs:
        return list(FALLBACK_SEARCH_ROOTS)

    roots = [str(Path(data_home or "~/.local/share") / "applications")]
    for d in data_dirs or ["/usr/local/share", "/usr/share"]:
        root = str(Path(d) / "applications")
        if root not in roots:
            roots.append(root)
    return roots


def default_settings() -> Dict[str, Any]:
    return {
        "search_roots": default_search_roots(),  # ordered list of folders
        "max_results": DEFAULT_MAX_RESULTS,      # rows shown in the result list
        "log_level": "INFO",
    }


def config_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    base = env.get("XDG_CONFIG_HOME", "").strip() or "~/.config"
    return Path(base).expanduser() / APP_CONFIG_DIR_NAME


def settings_path(env: Optional[Mapping[str, str]] = None) -> Path:
    return config_dir(env) / SETTINGS_FILE_NAME


def log_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    return config_dir(env) / LOG_DIR_NAME


def load_settings(path: Path) -> Dict[str, Any]:
    """Load settings from disk (or defaults). Missing keys are filled in."""
    d = default_settings()
    if not path.exists():
        return d
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return d
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", path)
        return d

    for k in d:
        if k not in data:
            data[k] = d[k]
    return data


def save_settings(path: Path, settings: Dict[str, Any]) -> None:
    """Persist settings to disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings, indent=2), encoding="utf-8")


def resolve_search_roots(settings: Mapping[str, Any]) -> List[Path]:
    """Expand '~' and $VARS in the configured roots, keeping their order.

    Only a missing or null value falls back to the defaults; [] means no roots.
    """
    roots = settings.get("search_roots")
    if roots is None:
        roots = default_search_roots()
    if isinstance(roots, str):
        roots = [roots]
    return [Path(os.path.expandvars(str(r))).expanduser() for r in roots]


def max_results_setting(settings: Mapping[str, Any]) -> int:
    """The configured row limit, or the default when it is not a usable number."""
    value = settings.get("max_results", DEFAULT_MAX_RESULTS)
    try:
        limit = -1 if isinstance(value, bool) else int(value)
    except (TypeError, ValueError):
        limit = -1
    if limit < 0:
        logger.warning("Ignoring invalid max_results %r", value)
        return DEFAULT_MAX_RESULTS
    return limit
