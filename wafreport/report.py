"""Plain-text report formatting."""

from .config import ReportProfile, SideLabels, load_default_profile
from .models import ReportAggregate, ScoreRow, SideSummary
from .stats import SIDES, summarize


def digit_width(n: int) -> int:
    """Number of characters needed to print ``abs(n)``."""
    return len(str(abs(n)))


def format_report(aggregate: ReportAggregate, profile: ReportProfile | None = None) -> str:
    """Render the inbound and outbound blocks of the report as one string."""
    profile = profile or load_default_profile()
    summaries = summarize(aggregate)
    blocks = [
        "\n".join(format_side(summaries[side], profile.labels(side)))
        for side in SIDES
    ]
    return "\n\n\n\n".join(blocks) + "\n"


def format_side(summary: SideSummary, labels: SideLabels) -> list[str]:
    """Render one side's table, followed by its mean and median."""
    score_width = digit_width(summary.top_score)
    count_width = digit_width(summary.total)
    total_label = f"Total number of {labels.noun}"

    # Width of the label column, up to the first "|"
    label_width = max(
        len(labels.row_label) + 1 + score_width,
        len(labels.invalid_label) + 1 + score_width,
        len(total_label),
    )

    count_header = f"# of {labels.abbrev}"
    dashes = "-" * len(labels.title)
    pad = max(1, label_width + 3 + count_width - len(count_header) - len(dashes))

    lines = [
        labels.title,
        f"{dashes}{' ' * pad}{count_header} | % of {labels.abbrev} | Cumulative | Outstanding",
        f"{total_label:>{label_width}} | {summary.total} | 100.0000% | 100.0000%  |   0.0000%",
        "",
        _format_row(labels.invalid_label.ljust(label_width), summary.invalid_row, count_width),
    ]

    for row in summary.rows:
        label = f"{labels.row_label.ljust(label_width - score_width - 1)} {row.score:>{score_width}}"
        lines.append(_format_row(label, row, count_width))

    lines.append("")
    lines.append(f"Mean: {summary.mean:.2f}    Median: {summary.median:.2f}")
    return lines


def _format_row(label: str, row: ScoreRow, count_width: int) -> str:
    return (
        f"{label} | {row.count:>{count_width}} | {row.percent:8.4f}% "
        f"| {row.cumulative:8.4f}%  | {row.outstanding:8.4f}%"
    )
