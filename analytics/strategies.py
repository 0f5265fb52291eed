# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Strategy recommendation: match top emotions and triggers to a catalog.

Emotion blocks first (top 3 emotions, rank order), then trigger blocks
(top 3 triggers, rank order). Two top emotions in the same family give two
blocks; nothing is deduplicated. An empty result means "not enough data
yet", not an error.
"""

import logging
from typing import Dict, List, Optional, Sequence, Union

from analytics.catalog import DEFAULT_CATALOG, StrategyCatalog, emotion_family, get_catalog
from analytics.schemas import EmotionFrequency, EmotionSuggestion, Suggestion, TriggerSuggestion
from analytics.triggers import top_triggers

logger = logging.getLogger("checkin.strategies")

TOP_N = 3


def resolve_catalog(catalog: Union[str, StrategyCatalog, None]) -> StrategyCatalog:
    if catalog is None:
        return get_catalog(DEFAULT_CATALOG)
    if isinstance(catalog, StrategyCatalog):
        return catalog
    return get_catalog(catalog)


def recommend_strategies(
    frequencies: Sequence[EmotionFrequency],
    triggers: Optional[Dict[str, int]] = None,
    catalog: Union[str, StrategyCatalog, None] = None,
) -> List[Suggestion]:
    """Suggestion blocks for the top emotions and triggers of a window."""
    strategies = resolve_catalog(catalog)
    suggestions: List[Suggestion] = []

    for freq in list(frequencies)[:TOP_N]:
        family = emotion_family(freq.name)
        if family is None or family not in strategies.families:
            continue
        entry = strategies.families[family]
        suggestions.append(EmotionSuggestion(
            emotion=freq.name,
            category=family,
            immediate=list(entry.immediate),
            long_term=list(entry.long_term),
            frequency=freq.count,
        ))

    for keyword, count in top_triggers(triggers or {}, limit=TOP_N):
        if keyword not in strategies.triggers:
            continue
        suggestions.append(TriggerSuggestion(
            trigger=keyword,
            strategies=list(strategies.triggers[keyword]),
            frequency=count,
        ))

    if not suggestions:
        logger.debug("Strategies: no family or trigger match")
    return suggestions
