# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Progress scoring: engagement, vocabulary and regularity for a window.

Metrics:
  - enhanced check-ins:  enhancedVersion AND reflection data present
  - unique emotions:     distinct names, case-sensitive
  - emotion categories:  distinct non-empty categories
  - total reflections:   responses answered, enhanced check-ins only
  - granularity:         unique emotions / check-ins (can exceed 1)
  - consistency:         check-ins / span in days, capped at 1
  - enhanced usage:      % of check-ins that were enhanced

Returns None for an empty window. Zero-valued metrics mean "data, but
nothing happened". Callers must not conflate the two.
"""

import logging
from datetime import datetime
from typing import Optional, Sequence

from analytics.numbers import percent, round_half_up
from analytics.schemas import CheckIn, ProgressMetrics
from analytics.window import align_to

logger = logging.getLogger("checkin.progress")

SECONDS_PER_DAY = 60 * 60 * 24


def time_span_days(check_ins: Sequence[CheckIn]) -> float:
    """Days between the oldest and newest check-in. 0 for fewer than two."""
    if len(check_ins) <= 1:
        return 0.0
    anchor = check_ins[0].created_at
    stamps = [align_to(c.created_at, anchor) for c in check_ins]
    newest: datetime = max(stamps)
    oldest: datetime = min(stamps)
    return (newest - oldest).total_seconds() / SECONDS_PER_DAY


def progress_metrics(check_ins: Sequence[CheckIn]) -> Optional[ProgressMetrics]:
    """Score a window of check-ins. None when the window is empty."""
    if not check_ins:
        return None

    total = len(check_ins)
    enhanced = [c for c in check_ins if c.is_enhanced]

    unique_emotions = set()
    categories = set()
    for check_in in check_ins:
        for emotion in check_in.emotions:
            unique_emotions.add(emotion.name)
            if emotion.category:
                categories.add(emotion.category)

    total_reflections = sum(
        len(c.metadata.reflection_data.responses or []) for c in enhanced
    )

    granularity = len(unique_emotions) / max(total, 1)

    span = time_span_days(check_ins)
    consistency = min(total / span, 1) if span > 0 else 0

    metrics = ProgressMetrics(
        total_check_ins=total,
        enhanced_check_ins=len(enhanced),
        unique_emotions=len(unique_emotions),
        emotion_categories=len(categories),
        total_reflections=total_reflections,
        granularity_score=round_half_up(granularity, 2),
        consistency_score=round_half_up(consistency, 2),
        enhanced_usage_percent=percent(len(enhanced), total),
    )
    logger.debug(
        "Progress: %d check-ins, %d enhanced, span %.2f days",
        total, len(enhanced), span,
    )
    return metrics
