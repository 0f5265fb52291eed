# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Insight rules: order, thresholds and wording."""

import pytest

from analytics.insights import generate_insights
from analytics.schemas import EmotionFrequency, ProgressMetrics, WeeklyBucket
from analytics.temporal import weekly_pattern


def _progress(**overrides):
    values = dict(
        total_check_ins=4, enhanced_check_ins=0, unique_emotions=3, emotion_categories=1,
        total_reflections=0, granularity_score=0.75, consistency_score=0.5,
        enhanced_usage_percent=0,
    )
    values.update(overrides)
    return ProgressMetrics(**values)


def _freq(name, count=1, avg=5.0):
    return EmotionFrequency(name=name, count=count, avg_intensity=avg, percentage=100)


def _weekly(**counts):
    return [WeeklyBucket(day=b.day, count=counts.get(b.day, 0), avg_intensity=5 if counts.get(b.day) else 0)
            for b in weekly_pattern([])]


@pytest.fixture
def quiet_week():
    return _weekly()


class TestEmpty:

    def test_nothing_for_empty_window(self):
        assert generate_insights([], weekly_pattern([]), None, {}) == []

    def test_only_frequency_without_progress(self):
        insights = generate_insights([_freq("Happy", avg=9)], _weekly(Monday=3), None, {"work": 5})
        assert [i.type for i in insights] == ["frequency"]


class TestRules:

    def test_top_frequency_text(self, quiet_week):
        insights = generate_insights([_freq("Happy", 1, 6.0)], quiet_week, _progress(), {})
        assert insights[0].type == "frequency"
        assert insights[0].text == 'Your most frequent emotion is "Happy" (1 times, avg intensity 6/10)'

    def test_top_frequency_keeps_decimal(self, quiet_week):
        insights = generate_insights([_freq("Sad", 3, 4.5)], quiet_week, _progress(), {})
        assert "avg intensity 4.5/10" in insights[0].text

    def test_vocabulary_threshold(self, quiet_week):
        assert generate_insights([], quiet_week, _progress(unique_emotions=9), {}) == []
        insights = generate_insights([], quiet_week, _progress(unique_emotions=10), {})
        assert [i.type for i in insights] == ["growth"]
        assert "10 different emotions" in insights[0].text

    def test_enhanced_usage_threshold(self, quiet_week):
        assert generate_insights([], quiet_week, _progress(enhanced_usage_percent=49), {}) == []
        insights = generate_insights([], quiet_week, _progress(enhanced_usage_percent=50), {})
        assert insights[0].type == "growth"
        assert "50% of the time" in insights[0].text

    def test_granularity_threshold(self, quiet_week):
        assert generate_insights([], quiet_week, _progress(granularity_score=1.99), {}) == []
        insights = generate_insights([], quiet_week, _progress(granularity_score=2), {})
        assert insights[0].type == "growth"
        assert "granularity" in insights[0].text

    def test_trigger_needs_two(self, quiet_week):
        assert generate_insights([], quiet_week, _progress(), {"work": 1}) == []
        insights = generate_insights([], quiet_week, _progress(), {"work": 2})
        assert insights[0].type == "trigger"
        assert insights[0].text == (
            'Pattern detected: "work" appears frequently in your emotional triggers (2 times).'
        )

    def test_trigger_tie_uses_keyword_order(self, quiet_week):
        insights = generate_insights([], quiet_week, _progress(), {"family": 3, "stress": 3})
        assert '"family"' in insights[0].text

    def test_busiest_day(self):
        insights = generate_insights([], _weekly(Tuesday=2, Friday=2), _progress(), {})
        assert len(insights) == 1
        assert insights[0].type == "pattern"
        assert insights[0].text == "You check in most often on Tuesdays (2 times)"

    def test_high_intensity(self, quiet_week):
        freqs = [_freq("Calm", 3, 4.0), _freq("Furious", 2, 9.5), _freq("Elated", 1, 8.0), _freq("Tense", 1, 7.9)]
        insights = generate_insights(freqs, quiet_week, _progress(), {})
        assert insights[-1].type == "intensity"
        assert insights[-1].text == "High-intensity emotions: Furious, Elated"


class TestOrder:

    def test_full_rule_order(self):
        freqs = [_freq("Anxious", 4, 8.5)]
        progress = _progress(unique_emotions=12, enhanced_usage_percent=80, granularity_score=3)
        insights = generate_insights(freqs, _weekly(Sunday=4), progress, {"work": 3, "sleep": 2})
        assert [i.type for i in insights] == [
            "frequency", "growth", "growth", "growth", "trigger", "pattern", "intensity",
        ]

    def test_deterministic(self):
        freqs = [_freq("Anxious", 4, 8.5)]
        args = (freqs, _weekly(Sunday=4), _progress(unique_emotions=12), {"work": 3})
        assert generate_insights(*args) == generate_insights(*args)
