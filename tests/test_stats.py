"""Tests for histogram statistics."""

import pytest

from wafreport.accumulator import accumulate
from wafreport.models import MAX_SCORE, ScoreHistogram
from wafreport.stats import (
    cumulative_rows,
    histogram_mean,
    histogram_median,
    percentage,
    summarize,
    summarize_side,
)


def make_histogram(buckets: dict[int, int], invalid: int = 0) -> ScoreHistogram:
    hist = ScoreHistogram(invalid=invalid)
    for score, count in buckets.items():
        hist.counts[score] = count
    return hist


class TestPercentage:
    def test_basic(self):
        assert percentage(1, 4) == 25.0

    def test_zero_total(self):
        assert percentage(0, 0) == 0.0


class TestMean:
    def test_two_values(self):
        hist = make_histogram({5: 1, 10: 1})
        assert histogram_mean(hist.counts, 2) == 7.5

    def test_scenario(self):
        hist = make_histogram({0: 2, 10: 3})
        assert histogram_mean(hist.counts, 5) == 6.0

    def test_invalid_records_dilute_mean(self):
        hist = make_histogram({10: 1}, invalid=1)
        assert histogram_mean(hist.counts, 2) == 5.0

    def test_zero_total(self):
        assert histogram_mean(ScoreHistogram().counts, 0) == 0.0


class TestMedian:
    def test_odd_total(self):
        hist = make_histogram({0: 2, 5: 1, 10: 2})
        assert histogram_median(hist.counts, 5) == 5.0

    def test_even_total(self):
        hist = make_histogram({0: 2, 5: 1, 10: 1})
        assert histogram_median(hist.counts, 4) == 2.5

    def test_scenario(self):
        hist = make_histogram({0: 2, 10: 3})
        assert histogram_median(hist.counts, 5) == 10.0

    def test_single_value(self):
        hist = make_histogram({42: 1})
        assert histogram_median(hist.counts, 1) == 42.0

    def test_top_bucket(self):
        hist = make_histogram({MAX_SCORE: 2})
        assert histogram_median(hist.counts, 2) == float(MAX_SCORE)

    def test_zero_total(self):
        assert histogram_median(ScoreHistogram().counts, 0) == 0.0

    def test_target_beyond_buckets_uses_top_score(self):
        # One valid score, two invalid records: rank 2 is never reached
        hist = make_histogram({7: 1}, invalid=2)
        assert histogram_median(hist.counts, 3) == 7.0

    def test_all_invalid(self):
        hist = make_histogram({}, invalid=3)
        assert histogram_median(hist.counts, 3) == 0.0


class TestCumulativeRows:
    def test_invalid_row_first(self):
        hist = make_histogram({1: 1, 3: 2}, invalid=1)
        invalid_row, rows = cumulative_rows(hist, 4)
        assert invalid_row.score is None
        assert invalid_row.count == 1
        assert invalid_row.percent == 25.0
        assert invalid_row.cumulative == 25.0
        assert invalid_row.outstanding == 75.0
        assert [r.score for r in rows] == [1, 3]

    def test_cumulative_non_decreasing_and_reaches_100(self):
        agg = accumulate(["3 1", "0 -", "- 2", "9 9", "3 3", "70000 0", "1 1"])
        for side in (agg.inbound, agg.outbound):
            invalid_row, rows = cumulative_rows(side, agg.total)
            cumulative = [invalid_row.cumulative] + [r.cumulative for r in rows]
            assert cumulative == sorted(cumulative)
            assert cumulative[-1] == pytest.approx(100.0)

    def test_outstanding_complements_cumulative(self):
        hist = make_histogram({2: 3, 4: 1, 8: 2}, invalid=1)
        invalid_row, rows = cumulative_rows(hist, 7)
        for row in [invalid_row, *rows]:
            assert row.outstanding == pytest.approx(100 - row.cumulative)

    def test_zero_total(self):
        invalid_row, rows = cumulative_rows(ScoreHistogram(), 0)
        assert invalid_row.percent == 0.0
        assert invalid_row.cumulative == 0.0
        assert invalid_row.outstanding == 100.0
        assert rows == []

    def test_does_not_mutate_histogram(self):
        hist = make_histogram({1: 2}, invalid=1)
        cumulative_rows(hist, 3)
        assert hist.counts[1] == 2
        assert hist.invalid == 1


class TestSummarize:
    def test_both_sides(self):
        agg = accumulate(["0 0"] * 2 + ["10 0"] * 3)
        summaries = summarize(agg)
        assert set(summaries) == {"inbound", "outbound"}
        inbound = summaries["inbound"]
        assert inbound.total == 5
        assert inbound.mean == 6.0
        assert inbound.median == 10.0
        assert inbound.top_score == 10
        assert [(r.score, r.count) for r in inbound.rows] == [(0, 2), (10, 3)]
        outbound = summaries["outbound"]
        assert outbound.mean == 0.0
        assert outbound.top_score == 0

    def test_empty_histogram(self):
        summary = summarize_side(ScoreHistogram(), 0)
        assert summary.rows == []
        assert summary.mean == 0.0
        assert summary.median == 0.0
        assert summary.top_score == 0
