"""Newcomb-Benford leading-digit analysis.

This module builds the 9-bucket leading-digit frequency table of a dataset,
compares it to the expected Benford distribution and scores the deviation.

Design notes:
- Zero values (accepted from literals like "0.00") have no leading digit.
  They are left out of the histogram but still count in N, so actual
  percentages are relative to the whole dataset.
- The deviation score is the RMS of ``actual/expected - 1`` over the nine
  digits; 0.0 is a perfect match.

Typical usage:
>>> from nbstats.benford import frequency_table, benford_result
>>> table = frequency_table([5, 10, 15])
>>> benford_result(table).conformance
"""
from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

from config import CONFORMANCE_THRESHOLDS

BENFORD_PROBS: List[float] = [math.log10(1 + 1 / d) for d in range(1, 10)]


def leading_digit(x: float) -> Optional[int]:
    """Return the first significant digit of a non-negative value, or None for zero.

    Examples:
        123.4 -> 1
        0.00456 -> 4
        5 -> 5
        0 -> None
    """
    v = float(x)
    if v <= 0 or math.isnan(v) or math.isinf(v):
        return None
    if v < 1:
        # scientific notation: d.dddddde-NN
        mant = f"{v:e}".split("e")[0]
        return int(mant[0])
    while v >= 10:
        v = v / 10
    return int(v)


def digit_counts(values: Iterable[float]) -> List[int]:
    """Return counts of leading digits 1..9 for the iterable of values."""
    counts = [0] * 9
    for x in values:
        d = leading_digit(x)
        if d is None:
            continue
        counts[d - 1] += 1
    return counts


def expected_benford_percent() -> List[float]:
    """Return Benford expected distribution as percentages 1..9."""
    return [100.0 * (math.log10(d + 1) - math.log10(d)) for d in range(1, 10)]


@dataclass(frozen=True)
class FrequencyTable:
    counts: Tuple[int, ...]
    expected: Tuple[float, ...]
    actual: Tuple[float, ...]
    size: int

    @property
    def exceed50(self) -> bool:
        """Some digit holds at least half the data; charts switch to a 0-100 scale."""
        return any(a >= 50 for a in self.actual)

    @property
    def saturated(self) -> bool:
        return any(a >= 99 for a in self.actual)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "digit": np.arange(1, 10),
                "count": list(self.counts),
                "expected_pct": list(self.expected),
                "actual_pct": list(self.actual),
            }
        )


def frequency_table(values) -> FrequencyTable:
    """Raw counts, expected and actual percentages per leading digit.

    ``values`` may be a Dataset, a numpy array or any iterable of floats.
    """
    arr = np.asarray(getattr(values, "values", values), dtype=np.float64)
    size = int(arr.size)
    counts = digit_counts(arr)
    actual = [100.0 * c / size if size > 0 else 0.0 for c in counts]
    return FrequencyTable(
        counts=tuple(counts),
        expected=tuple(expected_benford_percent()),
        actual=tuple(actual),
        size=size,
    )


class Conformance(enum.Enum):
    VERY_STRONG = "There is a very strong Benford relationship."
    STRONG = "There is a strong Benford relationship."
    MODERATE = "There is a moderate Benford relationship."
    WEAK = "There is a weak Benford relationship."
    NONE = "There is not a Benford relationship."

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", " ")


def classify(deviation: float) -> Conformance:
    """Map an NB deviation onto a conformance level (thresholds are exclusive upper bounds)."""
    if deviation < CONFORMANCE_THRESHOLDS["very_strong"]:
        return Conformance.VERY_STRONG
    if deviation < CONFORMANCE_THRESHOLDS["strong"]:
        return Conformance.STRONG
    if deviation < CONFORMANCE_THRESHOLDS["moderate"]:
        return Conformance.MODERATE
    if deviation < CONFORMANCE_THRESHOLDS["weak"]:
        return Conformance.WEAK
    return Conformance.NONE


@dataclass(frozen=True)
class BenfordResult:
    variance: float
    deviation: float
    conformance: Conformance


def benford_result(table: FrequencyTable) -> BenfordResult:
    """NB variance = mean over digits of (actual/expected - 1)^2; deviation = sqrt."""
    s = 0.0
    for a, e in zip(table.actual, table.expected):
        ratio = a / e - 1
        s += ratio * ratio
    variance = s / len(table.expected)
    deviation = math.sqrt(variance)
    return BenfordResult(variance=variance, deviation=deviation, conformance=classify(deviation))
