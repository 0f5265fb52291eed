# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Insight generation: turn aggregates into short, ranked observations.

Rules run in a fixed order, each adding at most one insight:
  1. top emotion            (frequency)
  2. vocabulary >= 10       (growth)
  3. enhanced usage >= 50%  (growth)
  4. granularity >= 2       (growth)
  5. top trigger >= 2       (trigger)
  6. busiest weekday        (pattern)
  7. avg intensity >= 8     (intensity)

Rules 2-7 need progress metrics; without them (empty window) only rule 1
can fire, and it won't, because frequencies are empty too.
"""

import logging
from typing import Dict, List, Optional, Sequence

from analytics.numbers import format_number
from analytics.schemas import EmotionFrequency, Insight, ProgressMetrics, WeeklyBucket
from analytics.temporal import busiest_day
from analytics.triggers import top_triggers

logger = logging.getLogger("checkin.insights")

VOCABULARY_THRESHOLD = 10
ENHANCED_USAGE_THRESHOLD = 50
GRANULARITY_THRESHOLD = 2
TRIGGER_REPEAT_THRESHOLD = 2
HIGH_INTENSITY_THRESHOLD = 8


def generate_insights(
    frequencies: Sequence[EmotionFrequency],
    weekly: Sequence[WeeklyBucket],
    progress: Optional[ProgressMetrics],
    triggers: Optional[Dict[str, int]] = None,
) -> List[Insight]:
    insights: List[Insight] = []

    if frequencies:
        top = frequencies[0]
        insights.append(Insight(
            type="frequency",
            text=(
                f'Your most frequent emotion is "{top.name}" '
                f"({top.count} times, avg intensity {format_number(top.avg_intensity)}/10)"
            ),
        ))

    if progress is None:
        return insights

    if progress.unique_emotions >= VOCABULARY_THRESHOLD:
        insights.append(Insight(
            type="growth",
            text=(
                f"Great emotional vocabulary! You've identified "
                f"{progress.unique_emotions} different emotions."
            ),
        ))

    if progress.enhanced_usage_percent >= ENHANCED_USAGE_THRESHOLD:
        insights.append(Insight(
            type="growth",
            text=(
                f"Excellent self-reflection practice! You're using the enhanced system "
                f"{progress.enhanced_usage_percent}% of the time."
            ),
        ))

    if progress.granularity_score >= GRANULARITY_THRESHOLD:
        insights.append(Insight(
            type="growth",
            text="You're developing emotional granularity - identifying multiple emotions per check-in.",
        ))

    if triggers:
        keyword, count = top_triggers(triggers, limit=1)[0]
        if count >= TRIGGER_REPEAT_THRESHOLD:
            insights.append(Insight(
                type="trigger",
                text=(
                    f'Pattern detected: "{keyword}" appears frequently in your '
                    f"emotional triggers ({count} times)."
                ),
            ))

    busiest = busiest_day(weekly)
    if busiest is not None:
        insights.append(Insight(
            type="pattern",
            text=f"You check in most often on {busiest.day}s ({busiest.count} times)",
        ))

    intense = [f.name for f in frequencies if f.avg_intensity >= HIGH_INTENSITY_THRESHOLD]
    if intense:
        insights.append(Insight(
            type="intensity",
            text=f"High-intensity emotions: {', '.join(intense)}",
        ))

    logger.debug("Insights: %d generated", len(insights))
    return insights
