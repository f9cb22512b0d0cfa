"""wafreport: Summary statistics for ModSecurity inbound and outbound anomaly scores."""

__version__ = "1.0.0"

from .accumulator import accumulate, classify_line
from .models import MAX_SCORE, ReportAggregate, ScoreHistogram, ScoreRow, SideSummary
from .report import format_report
from .stats import histogram_mean, histogram_median, summarize

__all__ = [
    "MAX_SCORE",
    "ReportAggregate",
    "ScoreHistogram",
    "ScoreRow",
    "SideSummary",
    "accumulate",
    "classify_line",
    "format_report",
    "histogram_mean",
    "histogram_median",
    "summarize",
]
