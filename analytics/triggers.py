# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""
Trigger extraction: keyword tallies from trigger-tagged reflection answers.

Plain case-insensitive substring match, no word boundaries: "overworked"
counts for "work", "sometimes" counts for "time". One response can bump
several keywords, each by at most 1.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from analytics.catalog import TRIGGER_KEYWORDS
from analytics.schemas import CheckIn

logger = logging.getLogger("checkin.triggers")


def trigger_patterns(
    check_ins: Sequence[CheckIn], keywords: Sequence[str] = TRIGGER_KEYWORDS,
) -> Dict[str, int]:
    """Keyword → number of trigger responses mentioning it.

    Only keywords with at least one match appear. Keys follow keyword order.
    """
    counts = {keyword: 0 for keyword in keywords}
    scanned = 0

    for check_in in check_ins:
        for response in check_in.trigger_responses:
            text = (response.response or "").lower()
            scanned += 1
            for keyword in keywords:
                if keyword.lower() in text:
                    counts[keyword] += 1

    tally = {keyword: n for keyword, n in counts.items() if n > 0}
    logger.debug("Triggers: %d responses scanned, %d keywords matched", scanned, len(tally))
    return tally


def top_triggers(tally: Dict[str, int], limit: int = 3) -> List[Tuple[str, int]]:
    """Rank a tally by count descending. Ties keep the tally's key order."""
    return sorted(tally.items(), key=lambda item: item[1], reverse=True)[:limit]
