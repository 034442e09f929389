"""Tests for shared scoring helpers."""

import pytest

from site_analysis.scoring.base import MAX_SCORE, MIN_SCORE, clamp_score


@pytest.mark.parametrize(
    "raw,expected",
    [(-40, 0), (0, 0), (55, 55), (100, 100), (145, 100)],
)
def test_clamp_score(raw: int, expected: int) -> None:
    assert clamp_score(raw) == expected


def test_bounds() -> None:
    assert (MIN_SCORE, MAX_SCORE) == (0, 100)
