# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Check-in Paths: where the CLI finds exported check-ins and writes reports.

Resolution order:
  1. configure(path) / --data-dir
  2. CHECKIN_DATA_DIR environment variable
  3. Default: ~/.checkin-insights/

Usage:
    from core.paths import get_paths
    p = get_paths()
    p.checkins_file     # ~/.checkin-insights/checkins.json
    p.latest_report     # ~/.checkin-insights/reports/latest.json

For tests:
    from core.paths import configure
    configure(tmp_path)  # all paths now rooted under tmp_path
"""

import os
from pathlib import Path
from typing import Optional


class InsightPaths:
    """Registry of every file and directory the CLI touches."""

    def __init__(self, data_dir: Optional[Path] = None):
        if data_dir is not None:
            self._root = Path(data_dir)
        else:
            env = os.environ.get("CHECKIN_DATA_DIR")
            if env:
                self._root = Path(env).expanduser()
            else:
                self._root = Path.home() / ".checkin-insights"

    # ------------------------------------------------------------------
    # Root
    # ------------------------------------------------------------------
    @property
    def data_dir(self) -> Path:
        return self._root

    # ------------------------------------------------------------------
    # Input: snapshot exported from the check-in store
    # ------------------------------------------------------------------
    @property
    def checkins_file(self) -> Path:
        return self._root / "checkins.json"

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    @property
    def reports_dir(self) -> Path:
        return self._root / "reports"

    @property
    def latest_report(self) -> Path:
        return self.reports_dir / "latest.json"

    def ensure_dirs(self) -> None:
        """Create all required directories."""
        for d in (self._root, self.reports_dir):
            d.mkdir(parents=True, exist_ok=True)


# ===========================================================================
# Singleton
# ===========================================================================

_instance: Optional[InsightPaths] = None


def get_paths() -> InsightPaths:
    """Return the global InsightPaths singleton (lazy-init)."""
    global _instance
    if _instance is None:
        _instance = InsightPaths()
    return _instance


def configure(data_dir: Path) -> InsightPaths:
    """
    Override the global paths singleton. Used by tests and CLI --data-dir.

    Returns the new instance for convenience.
    """
    global _instance
    _instance = InsightPaths(data_dir=data_dir)
    return _instance


def reset() -> None:
    """Reset singleton so next get_paths() re-reads env."""
    global _instance
    _instance = None
