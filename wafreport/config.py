"""YAML report profile loading and validation."""

import importlib.resources
from dataclasses import dataclass
from pathlib import Path

import yaml

VALID_SIDES = ("inbound", "outbound")
SIDE_FIELDS = ("title", "noun", "abbrev", "row_label", "invalid_label")


@dataclass(frozen=True)
class SideLabels:
    """Wording used for one side's block of the report."""

    title: str  # e.g. "Inbound (Requests)"
    noun: str  # "requests"
    abbrev: str  # "req."
    row_label: str  # "Requests with inbound score of"
    invalid_label: str  # "Empty or invalid inbound score"


@dataclass(frozen=True)
class ReportProfile:
    """Labels for both sides of the report, loaded from YAML."""

    inbound: SideLabels
    outbound: SideLabels

    def labels(self, side: str) -> SideLabels:
        return getattr(self, side)


def load_profile(path: str | Path) -> ReportProfile:
    """Load a report profile from a YAML file."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return _build_profile(data)


def load_default_profile() -> ReportProfile:
    """Load the bundled default report profile."""
    pkg = importlib.resources.files("wafreport") / "report_profiles" / "default.yaml"
    text = pkg.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    return _build_profile(data)


def _build_profile(data) -> ReportProfile:
    """Build a ReportProfile from parsed YAML data."""
    if not isinstance(data, dict):
        raise ValueError("Report profile must be a mapping")

    sides = data.get("sides")
    if not isinstance(sides, dict):
        raise ValueError("Report profile missing 'sides' mapping")

    _validate_sides(sides)
    return ReportProfile(
        inbound=_parse_side("inbound", sides["inbound"]),
        outbound=_parse_side("outbound", sides["outbound"]),
    )


def _validate_sides(sides: dict) -> None:
    unknown = set(sides) - set(VALID_SIDES)
    if unknown:
        raise ValueError(
            f"Unknown side(s) {sorted(unknown)}. Must be one of: {VALID_SIDES}"
        )
    missing = set(VALID_SIDES) - set(sides)
    if missing:
        raise ValueError(f"Report profile missing side(s): {sorted(missing)}")


def _parse_side(name: str, data) -> SideLabels:
    """Parse and validate the labels of a single side."""
    if not isinstance(data, dict):
        raise ValueError(f"Side {name!r} must be a mapping")

    missing = [f for f in SIDE_FIELDS if f not in data]
    if missing:
        raise ValueError(f"Side {name!r} missing required fields: {missing}")

    for f in SIDE_FIELDS:
        value = data[f]
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"Side {name!r}: field {f!r} must be a non-empty string")

    return SideLabels(**{f: data[f] for f in SIDE_FIELDS})
