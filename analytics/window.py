# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Check-in Window: restrict a check-in collection to a trailing window.

The cutoff is computed at day granularity: start of day of (now - N days).
A check-in is kept when created strictly after that midnight, so anything
logged on the cutoff day itself (after 00:00:00) is in, anything the day
before is out. The time of day of "now" never moves the cutoff.

"now" is always passed in. No wall clock here.
"""

import logging
from datetime import datetime, timedelta
from typing import List, Sequence

from analytics.catalog import window_days
from analytics.schemas import CheckIn

logger = logging.getLogger("checkin.window")


def start_of_day(ts: datetime) -> datetime:
    return ts.replace(hour=0, minute=0, second=0, microsecond=0)


def window_cutoff(window: str, now: datetime) -> datetime:
    """Exclusive lower bound for a window: start_of_day(now - days)."""
    return start_of_day(now - timedelta(days=window_days(window)))


def align_to(ts: datetime, reference: datetime) -> datetime:
    """Make `ts` comparable with `reference` when only one of them is tz-aware.

    Naive ts → read in the reference's timezone.
    Aware ts vs naive reference → keep its own wall-clock time.
    """
    if reference.tzinfo is not None and ts.tzinfo is None:
        return ts.replace(tzinfo=reference.tzinfo)
    if reference.tzinfo is None and ts.tzinfo is not None:
        return ts.replace(tzinfo=None)
    return ts


def filter_by_window(check_ins: Sequence[CheckIn], window: str, now: datetime) -> List[CheckIn]:
    """Check-ins created strictly after the window cutoff, in input order."""
    cutoff = window_cutoff(window, now)
    kept = [c for c in check_ins if align_to(c.created_at, cutoff) > cutoff]
    logger.debug("Window %s (cutoff %s): kept %d of %d", window, cutoff.isoformat(), len(kept), len(check_ins))
    return kept
