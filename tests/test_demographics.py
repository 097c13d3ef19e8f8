from __future__ import annotations

import pytest

from data.demographics import (
    TRUSTEDLOANS_AGE,
    TRUSTEDLOANS_ETHNICITY,
    TRUSTEDLOANS_GENDER,
    TRUSTEDLOANS_MARITAL_STATUS,
    WORKNIGHT_AGE,
    AgeBucket,
    EthnicityGroup,
    Slice,
    bucket_midpoint,
    calculate_age_stats,
    calculate_ethnicity_stats,
    distribution_caption,
    distribution_total,
    estimate_average_age,
    largest_slice,
    share_percentages,
    subgroup_frame,
)


def test_trustedloans_distributions_sum_to_100() -> None:
    assert distribution_total(TRUSTEDLOANS_GENDER) == 100
    assert distribution_total(TRUSTEDLOANS_MARITAL_STATUS) == 100
    assert sum(g.value for g in TRUSTEDLOANS_ETHNICITY) == 100


def test_age_buckets_split_into_full_and_part_time() -> None:
    for b in TRUSTEDLOANS_AGE:
        assert b.full_time + b.part_time == b.total


def test_largest_slice_ties_go_to_first_occurrence() -> None:
    slices = [Slice("A", 5), Slice("B", 7), Slice("C", 7)]
    assert largest_slice(slices) == Slice("B", 7)
    assert largest_slice([]) is None


def test_share_percentages() -> None:
    assert share_percentages([b.value for b in WORKNIGHT_AGE]) == [40, 30, 20, 10]
    assert share_percentages([55, 40, 3, 2]) == [55, 40, 3, 2]
    assert share_percentages([0, 0]) == [0, 0]


def test_age_stats_for_trustedloans_sample() -> None:
    stats = calculate_age_stats(TRUSTEDLOANS_AGE)

    assert stats.total_respondents == 100
    assert stats.largest_group == "25-34"
    assert stats.largest_group_share == pytest.approx(0.45)
    assert stats.full_time_total == 74
    assert stats.part_time_total == 26
    assert stats.full_time_ratio == pytest.approx(0.74)
    assert stats.average_age == pytest.approx(30.765)


def test_age_stats_tie_picks_first_bucket() -> None:
    stats = calculate_age_stats([AgeBucket("18-24", 10), AgeBucket("25-34", 10)])
    assert stats.largest_group == "18-24"
    assert stats.full_time_ratio == 0.0


def test_age_stats_empty() -> None:
    stats = calculate_age_stats([])
    assert stats.largest_group is None
    assert stats.total_respondents == 0
    assert stats.average_age == 0


def test_bucket_midpoints() -> None:
    assert bucket_midpoint("18-24") == 21.0
    assert bucket_midpoint("45+") == 50.0
    with pytest.raises(ValueError):
        bucket_midpoint("unknown")


def test_average_age_from_slices() -> None:
    assert estimate_average_age(WORKNIGHT_AGE) == pytest.approx(30.15)
    assert estimate_average_age([]) == 0.0


def test_ethnicity_stats_for_trustedloans_sample() -> None:
    stats = calculate_ethnicity_stats(TRUSTEDLOANS_ETHNICITY)

    assert stats.largest_group == "White"
    assert stats.fastest_growing == "Hispanic"
    assert stats.average_growth == pytest.approx(12.6)
    assert stats.representation_total == 100
    assert stats.largest_subgroup == "European"
    assert stats.largest_subgroup_parent == "White"


def test_ethnicity_stats_empty() -> None:
    stats = calculate_ethnicity_stats([])
    assert stats.largest_group is None
    assert stats.fastest_growing is None
    assert stats.average_growth == 0.0
    assert stats.largest_subgroup is None


def test_ethnicity_stats_without_subgroups() -> None:
    stats = calculate_ethnicity_stats([EthnicityGroup("Only", value=1, ratio=1, growth=2)])
    assert stats.largest_group == "Only"
    assert stats.largest_subgroup is None


def test_subgroup_frame() -> None:
    subs = subgroup_frame(TRUSTEDLOANS_ETHNICITY)
    assert list(subs.columns) == ["group", "subgroup", "value"]
    assert len(subs) == 14
    assert subs["value"].sum() == 100


def test_distribution_caption() -> None:
    assert distribution_caption(WORKNIGHT_AGE) == "18-24 leads with 40% of 1,000 responses"
    assert distribution_caption([Slice("A", 1), Slice("B", 3)], unit="loans") == "B leads with 75% of 4 loans"
    assert distribution_caption([]) == "No responses yet"
