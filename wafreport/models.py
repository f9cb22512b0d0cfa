"""Data models for wafreport."""

from dataclasses import dataclass, field
from typing import Iterator

MAX_SCORE = 65536


def _empty_buckets() -> list[int]:
    return [0] * (MAX_SCORE + 1)


@dataclass
class ScoreHistogram:
    """Bucket counts for one side (inbound or outbound), one bucket per exact score.

    The bucket list is fixed at MAX_SCORE + 1 entries. Scores above MAX_SCORE
    land in the top bucket; missing or negative scores go to ``invalid``.
    """

    counts: list[int] = field(default_factory=_empty_buckets)
    invalid: int = 0

    def record(self, score: int | None) -> None:
        """Count one observation for this side."""
        if score is None or score < 0:
            self.invalid += 1
        elif score > MAX_SCORE:
            self.counts[MAX_SCORE] += 1
        else:
            self.counts[score] += 1

    def top_score(self) -> int:
        """Highest score with a non-zero count, or 0 when no bucket is filled."""
        for score in range(MAX_SCORE, 0, -1):
            if self.counts[score]:
                return score
        return 0

    def nonzero(self) -> Iterator[tuple[int, int]]:
        """Yield ``(score, count)`` for every filled bucket, ascending."""
        for score, count in enumerate(self.counts):
            if count:
                yield score, count

    @property
    def observed(self) -> int:
        """Number of records seen on this side, invalid ones included."""
        return sum(self.counts) + self.invalid


@dataclass
class ReportAggregate:
    """Everything the report needs, accumulated from a stream of score lines."""

    inbound: ScoreHistogram = field(default_factory=ScoreHistogram)
    outbound: ScoreHistogram = field(default_factory=ScoreHistogram)
    total: int = 0

    @property
    def invalid_inbound(self) -> int:
        return self.inbound.invalid

    @property
    def invalid_outbound(self) -> int:
        return self.outbound.invalid

    def side(self, name: str) -> ScoreHistogram:
        """Return the histogram for ``"inbound"`` or ``"outbound"``."""
        if name == "inbound":
            return self.inbound
        if name == "outbound":
            return self.outbound
        raise ValueError(f"Unknown side {name!r}")


@dataclass(frozen=True)
class ScoreRow:
    """One line of a side's table. ``score`` is None for the invalid row."""

    score: int | None
    count: int
    percent: float
    cumulative: float
    outstanding: float


@dataclass
class SideSummary:
    """Computed statistics for one side of the report."""

    total: int
    invalid_row: ScoreRow
    rows: list[ScoreRow] = field(default_factory=list)
    mean: float = 0.0
    median: float = 0.0
    top_score: int = 0
