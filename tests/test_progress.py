# Copyright (c) 2026 Nenad Vasic. All rights reserved.
# Licensed under the Business Source License 1.1 (BSL-1.1)
# See LICENSE file in the project root for full license text.

"""Progress scoring tests."""

from datetime import timedelta

from analytics.progress import progress_metrics, time_span_days


class TestEmpty:

    def test_empty_is_none(self):
        assert progress_metrics([]) is None


class TestConsistency:

    def test_five_over_ten_days(self, check_in, now):
        items = [check_in(created_at=now - timedelta(hours=60 * i)) for i in range(5)]
        assert time_span_days(items) == 10
        assert progress_metrics(items).consistency_score == 0.5

    def test_single_check_in_is_zero(self, check_in):
        assert progress_metrics([check_in()]).consistency_score == 0

    def test_same_instant_is_zero(self, check_in, now):
        items = [check_in(created_at=now), check_in(created_at=now)]
        assert progress_metrics(items).consistency_score == 0

    def test_capped_at_one(self, check_in):
        items = [check_in(days_ago=0), check_in(days_ago=0), check_in(days_ago=1)]
        assert progress_metrics(items).consistency_score == 1

    def test_input_order_does_not_matter(self, check_in):
        items = [check_in(days_ago=d) for d in (0, 4, 8)]
        forward = progress_metrics(items)
        backward = progress_metrics(list(reversed(items)))
        assert forward == backward
        assert forward.consistency_score == 0.38  # 3 / 8 = 0.375 → half-up


class TestEnhanced:

    def test_requires_flag_and_reflection_data(self, check_in):
        items = [
            check_in(enhanced=True, responses=[("trigger", "work"), ("needs", "rest")]),
            check_in(enhanced=True),                                   # no reflection data
            check_in(enhanced=False, responses=[("trigger", "money")]),  # not enhanced
        ]
        metrics = progress_metrics(items)
        assert metrics.enhanced_check_ins == 1
        assert metrics.total_reflections == 2
        assert metrics.enhanced_usage_percent == 33

    def test_usage_percent_rounds_half_up(self, check_in):
        items = [
            check_in(enhanced=True, responses=[("trigger", "x")]),
            check_in(enhanced=True, responses=[("growth", "y")]),
            check_in(),
        ]
        assert progress_metrics(items).enhanced_usage_percent == 67

    def test_no_enhanced(self, check_in):
        metrics = progress_metrics([check_in(), check_in()])
        assert metrics.enhanced_check_ins == 0
        assert metrics.total_reflections == 0
        assert metrics.enhanced_usage_percent == 0


class TestVocabulary:

    def test_unique_emotions_case_sensitive(self, check_in):
        items = [check_in(emotions=[("Happy", 5), ("happy", 5)]), check_in(emotions=[("Happy", 2)])]
        assert progress_metrics(items).unique_emotions == 2

    def test_categories_skip_empty(self, check_in):
        items = [
            check_in(emotions=[("Happy", 5), ("Calm", 4)], categories=["joy", ""]),
            check_in(emotions=[("Sad", 3)], categories=["sadness"]),
            check_in(emotions=[("Tired", 3)]),
        ]
        assert progress_metrics(items).emotion_categories == 2

    def test_granularity(self, check_in):
        items = [
            check_in(emotions=[("A", 5), ("B", 5), ("C", 5)]),
            check_in(emotions=[("D", 5), ("E", 5)]),
        ]
        assert progress_metrics(items).granularity_score == 2.5

    def test_granularity_rounded_to_two_places(self, check_in):
        items = [check_in(emotions=[("A", 5), ("B", 5)]) for _ in range(3)]
        assert progress_metrics(items).granularity_score == 0.67

    def test_totals(self, check_in):
        metrics = progress_metrics([check_in(), check_in(), check_in()])
        assert metrics.total_check_ins == 3
