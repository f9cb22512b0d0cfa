"""Summary statistics computed from score histograms."""

from typing import Sequence

from .models import ReportAggregate, ScoreHistogram, ScoreRow, SideSummary

SIDES = ("inbound", "outbound")


def percentage(count: int, total: int) -> float:
    """Share of ``total`` as a percentage; 0.0 when there is nothing to divide by."""
    if total == 0:
        return 0.0
    return 100 * (count / total)


def histogram_mean(counts: Sequence[int], total: int) -> float:
    """Weighted mean of the bucket scores, divided by the total record count."""
    if total == 0:
        return 0.0
    weighted = sum(score * count for score, count in enumerate(counts))
    return weighted / total


def _score_at_rank(counts: Sequence[int], rank: int) -> int:
    """First score at which the running bucket sum reaches ``rank``.

    Invalid records take part in the total but not in the buckets, so the
    running sum can fall short; the highest filled bucket is used then.
    """
    running = 0
    top = 0
    for score, count in enumerate(counts):
        running += count
        if running >= rank:
            return score
        if count:
            top = score
    return top


def histogram_median(counts: Sequence[int], total: int) -> float:
    """Median derived from bucket counts, without expanding the observations."""
    if total == 0:
        return 0.0
    if total % 2:
        return float(_score_at_rank(counts, (total + 1) // 2))

    lower = _score_at_rank(counts, total // 2)
    upper = _score_at_rank(counts, total // 2 + 1)
    return (lower + upper) / 2


def cumulative_rows(histogram: ScoreHistogram, total: int) -> tuple[ScoreRow, list[ScoreRow]]:
    """Build the invalid row and the ascending score rows with running percentages.

    The running sum starts at the invalid count and grows with every filled
    bucket, so cumulative percentages never decrease and end at 100.
    """
    running = histogram.invalid
    cumulative = percentage(running, total)
    invalid_row = ScoreRow(
        score=None,
        count=histogram.invalid,
        percent=percentage(histogram.invalid, total),
        cumulative=cumulative,
        outstanding=100 - cumulative,
    )

    rows = []
    for score, count in histogram.nonzero():
        running += count
        cumulative = percentage(running, total)
        rows.append(ScoreRow(
            score=score,
            count=count,
            percent=percentage(count, total),
            cumulative=cumulative,
            outstanding=100 - cumulative,
        ))
    return invalid_row, rows


def summarize_side(histogram: ScoreHistogram, total: int) -> SideSummary:
    """Compute every statistic shown for one side."""
    invalid_row, rows = cumulative_rows(histogram, total)
    return SideSummary(
        total=total,
        invalid_row=invalid_row,
        rows=rows,
        mean=histogram_mean(histogram.counts, total),
        median=histogram_median(histogram.counts, total),
        top_score=histogram.top_score(),
    )


def summarize(aggregate: ReportAggregate) -> dict[str, SideSummary]:
    """Summarize both sides of an aggregate, keyed by side name."""
    return {side: summarize_side(aggregate.side(side), aggregate.total) for side in SIDES}
