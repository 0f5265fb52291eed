# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Check-in Analytics Engine: one call from raw records to a full report.

Flow:
  records → coerce (validate) → window filter
          → frequency / weekly pattern / triggers / progress
          → insights + strategy suggestions
          → AnalyticsReport

Pure: no I/O, no clock. The caller supplies "now".

Usage:
    from analytics.engine import analyze
    report = analyze(rows, window="30d", now=datetime(2026, 3, 1, 12, 0))
    for insight in report.insights:
        print(insight.text)
"""

import logging
from datetime import datetime
from typing import Any, Iterable, Union

from analytics.catalog import DEFAULT_WINDOW, StrategyCatalog, window_days
from analytics.frequency import emotion_frequency
from analytics.insights import generate_insights
from analytics.progress import progress_metrics
from analytics.schemas import AnalyticsReport, coerce_check_ins
from analytics.strategies import recommend_strategies, resolve_catalog
from analytics.temporal import weekly_pattern
from analytics.triggers import trigger_patterns
from analytics.window import filter_by_window

logger = logging.getLogger("checkin.engine")


def analyze(
    records: Iterable[Any],
    *,
    now: datetime,
    window: str = DEFAULT_WINDOW,
    catalog: Union[str, StrategyCatalog, None] = None,
) -> AnalyticsReport:
    """Run every aggregator over one window of check-ins.

    Args:
        records: check-in rows (dicts) or CheckIn models, any order
        now: reference instant for the window cutoff
        window: "7d", "30d" or "90d"
        catalog: strategy catalog name or instance (default: soothing)

    Raises:
        MalformedRecordError: a record failed validation
        UnknownWindowError / UnknownCatalogError: bad selector
    """
    # Validate selectors before touching the data
    window_days(window)
    strategies = resolve_catalog(catalog)

    check_ins = coerce_check_ins(records)
    filtered = filter_by_window(check_ins, window, now)

    frequencies = emotion_frequency(filtered)
    weekly = weekly_pattern(filtered, tz=now.tzinfo)
    triggers = trigger_patterns(filtered)
    progress = progress_metrics(filtered)

    insights = generate_insights(frequencies, weekly, progress, triggers) if filtered else []
    suggestions = recommend_strategies(frequencies, triggers, strategies)

    logger.info(
        "Analyzed %d/%d check-ins (%s): %d insights, %d suggestions",
        len(filtered), len(check_ins), window, len(insights), len(suggestions),
    )
    return AnalyticsReport(
        window=window,
        now=now,
        total_check_ins=len(check_ins),
        filtered_check_ins=len(filtered),
        emotion_frequency=frequencies,
        weekly_pattern=weekly,
        trigger_patterns=triggers,
        progress=progress,
        insights=insights,
        suggestions=suggestions,
    )
