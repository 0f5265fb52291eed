# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Weekly pattern: check-ins and mean intensity per weekday, Sunday first."""

import logging
from datetime import tzinfo
from typing import Dict, List, Optional, Sequence

from analytics.catalog import WEEKDAYS
from analytics.numbers import round_half_up
from analytics.schemas import CheckIn, WeeklyBucket

logger = logging.getLogger("checkin.temporal")


def weekday_name(check_in: CheckIn, tz: Optional[tzinfo] = None) -> str:
    """Weekday of a check-in, read in `tz` when both sides carry a timezone."""
    ts = check_in.created_at
    if tz is not None and ts.tzinfo is not None:
        ts = ts.astimezone(tz)
    # Monday=0 in Python; WEEKDAYS is Sunday-first
    return WEEKDAYS[(ts.weekday() + 1) % 7]


def check_in_intensity(check_in: CheckIn) -> Optional[float]:
    """Unweighted mean intensity of one check-in. None when it has no emotions."""
    if not check_in.emotions:
        return None
    return sum(e.intensity for e in check_in.emotions) / len(check_in.emotions)


def weekly_pattern(check_ins: Sequence[CheckIn], tz: Optional[tzinfo] = None) -> List[WeeklyBucket]:
    """Seven buckets, always, in Sunday..Saturday order.

    `tz` is the user's timezone (the reference "now"). Naive timestamps
    are already local and are bucketed as stored.
    """
    counts: Dict[str, int] = {day: 0 for day in WEEKDAYS}
    intensity_sum: Dict[str, float] = {day: 0.0 for day in WEEKDAYS}
    intensity_n: Dict[str, int] = {day: 0 for day in WEEKDAYS}

    skipped = 0
    for check_in in check_ins:
        day = weekday_name(check_in, tz)
        counts[day] += 1
        mean = check_in_intensity(check_in)
        if mean is None:
            skipped += 1
            continue
        intensity_sum[day] += mean
        intensity_n[day] += 1

    if skipped:
        logger.warning("Weekly pattern: %d check-in(s) without emotions left out of intensity", skipped)

    return [
        WeeklyBucket(
            day=day,
            count=counts[day],
            avg_intensity=round_half_up(intensity_sum[day] / intensity_n[day], 1) if intensity_n[day] else 0,
        )
        for day in WEEKDAYS
    ]


def busiest_day(buckets: Sequence[WeeklyBucket]) -> Optional[WeeklyBucket]:
    """Bucket with the strictly greatest count; first in order on ties. None if all zero."""
    best = None
    for bucket in buckets:
        if best is None or bucket.count > best.count:
            best = bucket
    if best is None or best.count <= 0:
        return None
    return best
