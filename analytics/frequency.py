# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Emotion frequency: how often each emotion shows up, and how strongly.

Counts are per emotion instance. Percentage is relative to the number of
check-ins, not instances. Ranking is count descending; equal counts keep
the order in which the names were first seen.
"""

import logging
from typing import Dict, List, Sequence

from analytics.numbers import percent, round_half_up
from analytics.schemas import CheckIn, EmotionFrequency

logger = logging.getLogger("checkin.frequency")

TOP_EMOTIONS = 10


def emotion_frequency(check_ins: Sequence[CheckIn], limit: int = TOP_EMOTIONS) -> List[EmotionFrequency]:
    """Top emotions across a window of check-ins. Empty input → []."""
    if not check_ins:
        return []

    totals: Dict[str, List[int]] = {}  # name -> [count, sum_intensity]
    for check_in in check_ins:
        for emotion in check_in.emotions:
            entry = totals.setdefault(emotion.name, [0, 0])
            entry[0] += 1
            entry[1] += emotion.intensity

    total = len(check_ins)
    frequencies = [
        EmotionFrequency(
            name=name,
            count=count,
            avg_intensity=round_half_up(intensity / count, 1),
            # Never 0 for a seen emotion, never over 100 when a name repeats in one check-in
            percentage=max(1, min(100, percent(count, total))),
        )
        for name, (count, intensity) in totals.items()
    ]
    # sorted() is stable: ties stay in first-seen order
    ranked = sorted(frequencies, key=lambda f: f.count, reverse=True)[:limit]

    logger.debug("Frequency: %d distinct emotions over %d check-ins", len(totals), total)
    return ranked
