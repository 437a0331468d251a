"""Descriptive statistics over a sorted dataset.

All functions take a :class:`Dataset` (sorted ascending, read-only) and
return plain floats or small frozen dataclasses; :func:`summarize` threads
them into a :class:`StatisticsSummary`.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

from .errors import EmptyInputError


@dataclass(frozen=True)
class Dataset:
    """Sorted, read-only float64 values with explicit length."""

    values: np.ndarray

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "Dataset":
        arr = np.array(values, dtype=np.float64).ravel()
        if arr.size == 0:
            raise EmptyInputError()
        arr.sort(kind="stable")
        arr.flags.writeable = False
        return cls(values=arr)

    def __len__(self) -> int:
        return int(self.values.shape[0])

    @property
    def size(self) -> int:
        return len(self)


@dataclass(frozen=True)
class ModeSet:
    """Values sharing the highest occurrence count, and that count."""

    values: Tuple[float, ...]
    frequency: int
    dataset_size: int

    @property
    def has_mode(self) -> bool:
        """False when nothing stands out: no repeats, or every value is equally frequent."""
        if self.frequency <= 1 or not self.values:
            return False
        return len(self.values) * self.frequency != self.dataset_size


@dataclass(frozen=True)
class StatisticsSummary:
    count: int
    minimum: float
    maximum: float
    mean: float
    median: float
    variance: float
    std_dev: float
    modes: ModeSet


def value_range(ds: Dataset) -> Tuple[float, float]:
    return float(ds.values[0]), float(ds.values[-1])


def arithmetic_mean(ds: Dataset) -> float:
    """Sum / N, accumulated in long double to limit rounding error."""
    total = np.sum(ds.values, dtype=np.longdouble)
    return float(total / np.longdouble(len(ds)))


def median(ds: Dataset) -> float:
    """Middle value for odd N; mean of the two middle values for even N."""
    n = len(ds)
    v = ds.values
    if n % 2 == 0:
        return float((np.longdouble(v[n // 2 - 1]) + np.longdouble(v[n // 2])) / 2)
    return float(v[n // 2])


def population_variance(ds: Dataset, mean: float | None = None) -> float:
    """(1/N) * sum((x - mean)^2)."""
    if mean is None:
        mean = arithmetic_mean(ds)
    dev = ds.values.astype(np.longdouble) - np.longdouble(mean)
    return float(np.sum(dev * dev) / np.longdouble(len(ds)))


def standard_deviation(variance: float) -> float:
    return math.sqrt(variance)


def find_modes(ds: Dataset) -> ModeSet:
    """Scan runs of equal adjacent values; ties at the top frequency are all kept."""
    uniq, counts = np.unique(ds.values, return_counts=True)
    top = int(counts.max())
    winners = tuple(float(x) for x in uniq[counts == top])
    return ModeSet(values=winners, frequency=top, dataset_size=len(ds))


def summarize(ds: Dataset) -> StatisticsSummary:
    lo, hi = value_range(ds)
    mean = arithmetic_mean(ds)
    var = population_variance(ds, mean)
    return StatisticsSummary(
        count=len(ds),
        minimum=lo,
        maximum=hi,
        mean=mean,
        median=median(ds),
        variance=var,
        std_dev=standard_deviation(var),
        modes=find_modes(ds),
    )
