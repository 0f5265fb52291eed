# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Test configuration: paths isolation and check-in factories."""

import itertools
from datetime import datetime, timedelta

import pytest

from core.paths import configure, reset
from analytics.schemas import CheckIn

# A Wednesday, mid-afternoon
NOW = datetime(2026, 3, 4, 15, 30)

_ids = itertools.count(1)


def make_check_in(
    emotions=(("Happy", 6),),
    created_at=None,
    days_ago=0,
    enhanced=False,
    responses=None,
    categories=None,
    as_dict=False,
):
    """Build one check-in. `emotions` is a list of (name, intensity) pairs."""
    if created_at is None:
        created_at = NOW - timedelta(days=days_ago)
    entries = []
    for i, (name, intensity) in enumerate(emotions):
        entry = {"name": name, "intensity": intensity}
        if categories:
            entry["category"] = categories[i]
        entries.append(entry)

    row = {"id": f"c{next(_ids)}", "created_at": created_at.isoformat(), "emotions": entries}
    if enhanced or responses is not None:
        metadata = {"enhancedVersion": enhanced}
        if responses is not None:
            metadata["reflectionData"] = {
                "responses": [
                    {"category": cat, "prompt": "What happened?", "response": text}
                    for cat, text in responses
                ],
            }
        row["metadata"] = metadata
    return row if as_dict else CheckIn.model_validate(row)


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path):
    """Route all CLI data to a temp directory for test isolation."""
    paths = configure(tmp_path)
    paths.ensure_dirs()
    yield paths
    reset()


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def check_in():
    """Factory fixture: check_in(emotions=[("Sad", 4)], days_ago=2, ...)."""
    return make_check_in
