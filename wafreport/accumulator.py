"""Line classification and histogram accumulation."""

import logging
import re
from typing import Iterable

from .models import ReportAggregate

logger = logging.getLogger(__name__)

# Optional sign followed by ASCII digits, nothing else
INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Stands in for a missing inbound score, as in "- 7"
PLACEHOLDER = "-"


def _to_int(token: str | None) -> int | None:
    if token is not None and INTEGER_RE.fullmatch(token):
        return int(token)
    return None


def classify_line(line: str) -> tuple[int | None, int | None] | None:
    """Classify one input line into an ``(inbound, outbound)`` pair.

    A side is None when no score was supplied for it. Returns None for a
    malformed line, which must not be counted at all.

    Patterns are tried in order, first match wins:
    1. "<int> <int>"  - both scores
    2. "<int>" or "<int> <non-numeric>"  - inbound only
    3. "- <int>"  - outbound only
    """
    tokens = line.split()
    if not tokens:
        return None

    first = _to_int(tokens[0])
    second = _to_int(tokens[1]) if len(tokens) > 1 else None

    if first is not None and second is not None:
        return first, second
    if first is not None:
        return first, None
    if tokens[0] == PLACEHOLDER and second is not None:
        return None, second
    return None


def accumulate(lines: Iterable[str]) -> ReportAggregate:
    """Fold a stream of score lines into a ReportAggregate.

    Malformed lines are skipped. Each classified line increments the total
    once, even when both of its sides are invalid.
    """
    aggregate = ReportAggregate()
    skipped = 0

    for line in lines:
        pair = classify_line(line)
        if pair is None:
            skipped += 1
            logger.debug("Skipping malformed line: %r", line.rstrip("\r\n"))
            continue

        score_in, score_out = pair
        aggregate.inbound.record(score_in)
        aggregate.outbound.record(score_out)
        aggregate.total += 1

    logger.debug(
        "Read %d score lines (%d malformed, %d invalid inbound, %d invalid outbound)",
        aggregate.total, skipped, aggregate.invalid_inbound, aggregate.invalid_outbound,
    )
    return aggregate
