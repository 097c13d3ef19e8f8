"""
Sample demographic datasets and the aggregate statistics shown next to them.

The record arrays are fixed sample data; every statistic is a single pass
over a handful of rows. Ties in any "largest"/"fastest" selection go to the
first record in the list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Sequence

import pandas as pd


@dataclass(frozen=True)
class Slice:
    name: str
    value: float


@dataclass(frozen=True)
class AgeBucket:
    bucket: str
    total: float
    full_time: float = 0.0
    part_time: float = 0.0


@dataclass(frozen=True)
class EthnicityGroup:
    name: str
    value: float
    ratio: float
    growth: float
    subgroups: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class AgeStats:
    total_respondents: float
    largest_group: Optional[str]
    largest_group_share: float  # 0..1
    full_time_total: float
    part_time_total: float
    full_time_ratio: float  # full-time / (full-time + part-time)
    average_age: float


@dataclass(frozen=True)
class EthnicityStats:
    largest_group: Optional[str]
    fastest_growing: Optional[str]
    average_growth: float
    representation_total: float
    largest_subgroup: Optional[str]
    largest_subgroup_parent: Optional[str]


# --- WorkNight (application demographics) ---
WORKNIGHT_GENDER = [
    Slice("Male", 400),
    Slice("Female", 300),
    Slice("Other", 100),
]

WORKNIGHT_AGE = [
    Slice("18-24", 400),
    Slice("25-34", 300),
    Slice("35-44", 200),
    Slice("45+", 100),
]

WORKNIGHT_COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042"]


# --- TrustedLoans (anonymous demographic insights) ---
TRUSTEDLOANS_AGE = [
    AgeBucket("18-24", total=30, full_time=20, part_time=10),
    AgeBucket("25-34", total=45, full_time=35, part_time=10),
    AgeBucket("35-44", total=15, full_time=12, part_time=3),
    AgeBucket("45-54", total=7, full_time=5, part_time=2),
    AgeBucket("55+", total=3, full_time=2, part_time=1),
]

TRUSTEDLOANS_GENDER = [
    Slice("Male", 55),
    Slice("Female", 40),
    Slice("Non-binary", 3),
    Slice("Other", 2),
]

TRUSTEDLOANS_MARITAL_STATUS = [
    Slice("Single", 45),
    Slice("Married", 35),
    Slice("Divorced", 15),
    Slice("Other", 5),
]

TRUSTEDLOANS_ETHNICITY = [
    EthnicityGroup(
        "Asian", value=25, ratio=25, growth=15,
        subgroups={"East Asian": 12, "South Asian": 8, "Southeast Asian": 5},
    ),
    EthnicityGroup(
        "Black", value=20, ratio=20, growth=12,
        subgroups={"African": 10, "Caribbean": 7, "Other": 3},
    ),
    EthnicityGroup(
        "Hispanic", value=15, ratio=15, growth=18,
        subgroups={"Central": 6, "South": 5, "Caribbean": 4},
    ),
    EthnicityGroup(
        "White", value=35, ratio=35, growth=8,
        subgroups={"European": 20, "North American": 12, "Other": 3},
    ),
    EthnicityGroup(
        "Other", value=5, ratio=5, growth=10,
        subgroups={"Mixed": 3, "Other": 2},
    ),
]

TRUSTEDLOANS_COLORS = {
    "age": ["#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEEAD"],
    "gender": ["#6C5B7B", "#C06C84", "#F67280", "#F8B195"],
    "marital_status": ["#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4"],
    "ethnicity": ["#355C7D", "#6C5B7B", "#C06C84", "#F67280", "#F8B195"],
}

# Radar series: (label, AgeBucket attribute, colour)
AGE_RADAR_SERIES = [
    ("Total", "total", "#8884d8"),
    ("Full-time", "full_time", "#82ca9d"),
    ("Part-time", "part_time", "#ffc658"),
]

_RANGE_RE = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")
_OPEN_RE = re.compile(r"^\s*(\d+)\s*\+\s*$")
OPEN_BUCKET_SPAN = 5.0


def subgroup_frame(groups: Sequence[EthnicityGroup]) -> pd.DataFrame:
    rows = [
        {"group": g.name, "subgroup": sub, "value": v}
        for g in groups
        for sub, v in g.subgroups.items()
    ]
    return pd.DataFrame(rows, columns=["group", "subgroup", "value"])


def distribution_total(slices: Sequence[Slice]) -> float:
    return sum(s.value for s in slices)


def share_percentages(values: Sequence[float]) -> list[int]:
    """Whole-number percentage of each value, as printed on pie labels."""
    total = sum(values)
    if total == 0:
        return [0 for _ in values]
    return [int(round(v / total * 100)) for v in values]


def largest_slice(slices: Sequence[Slice]) -> Optional[Slice]:
    if not slices:
        return None
    # max() keeps the first maximal element
    return max(slices, key=lambda s: s.value)


def distribution_caption(slices: Sequence[Slice], unit: str = "responses") -> str:
    """One-line summary under a pie, e.g. 'Male leads with 50% of 800 responses'."""
    top = largest_slice(slices)
    if top is None:
        return f"No {unit} yet"
    shares = share_percentages([s.value for s in slices])
    share = shares[list(slices).index(top)]
    return f"{top.name} leads with {share}% of {distribution_total(slices):,.0f} {unit}"


def bucket_midpoint(label: str) -> float:
    m = _RANGE_RE.match(label)
    if m:
        lo, hi = float(m.group(1)), float(m.group(2))
        return (lo + hi) / 2
    m = _OPEN_RE.match(label)
    if m:
        return float(m.group(1)) + OPEN_BUCKET_SPAN
    raise ValueError(f"Unrecognised age bucket label: {label!r}")


def estimate_average_age(buckets: Sequence[AgeBucket | Slice]) -> float:
    weighted = 0.0
    weight = 0.0
    for b in buckets:
        label, count = (b.bucket, b.total) if isinstance(b, AgeBucket) else (b.name, b.value)
        weighted += bucket_midpoint(label) * count
        weight += count
    return weighted / weight if weight else 0.0


def calculate_age_stats(buckets: Sequence[AgeBucket]) -> AgeStats:
    if not buckets:
        return AgeStats(
            total_respondents=0.0,
            largest_group=None,
            largest_group_share=0.0,
            full_time_total=0.0,
            part_time_total=0.0,
            full_time_ratio=0.0,
            average_age=0.0,
        )

    total = sum(b.total for b in buckets)
    largest = max(buckets, key=lambda b: b.total)
    full_time = sum(b.full_time for b in buckets)
    part_time = sum(b.part_time for b in buckets)
    employed = full_time + part_time

    return AgeStats(
        total_respondents=total,
        largest_group=largest.bucket,
        largest_group_share=largest.total / total if total else 0.0,
        full_time_total=full_time,
        part_time_total=part_time,
        full_time_ratio=full_time / employed if employed else 0.0,
        average_age=estimate_average_age(buckets),
    )


def calculate_ethnicity_stats(groups: Sequence[EthnicityGroup]) -> EthnicityStats:
    if not groups:
        return EthnicityStats(
            largest_group=None,
            fastest_growing=None,
            average_growth=0.0,
            representation_total=0.0,
            largest_subgroup=None,
            largest_subgroup_parent=None,
        )

    largest = max(groups, key=lambda g: g.value)
    fastest = max(groups, key=lambda g: g.growth)

    best_sub: Optional[tuple[str, str, float]] = None
    for g in groups:
        for sub, v in g.subgroups.items():
            if best_sub is None or v > best_sub[2]:
                best_sub = (g.name, sub, v)

    return EthnicityStats(
        largest_group=largest.name,
        fastest_growing=fastest.name,
        average_growth=sum(g.growth for g in groups) / len(groups),
        representation_total=sum(g.ratio for g in groups),
        largest_subgroup=best_sub[1] if best_sub else None,
        largest_subgroup_parent=best_sub[0] if best_sub else None,
    )
