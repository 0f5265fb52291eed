# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Check-in Insights
Emotional analytics for a journaling app: frequencies, weekly patterns,
triggers, progress, insights and strategy suggestions.
"""

try:
    from importlib.metadata import version
    __version__ = version("checkin-insights")
except Exception:
    __version__ = "0.1.0"

try:
    from .analytics.engine import analyze
except ImportError:
    pass  # Direct import (e.g., pytest); submodules still work via analytics.*
