"""Single-pass analysis pipeline.

Each stage takes the immutable output of the previous one and returns a new
immutable value; the :class:`Report` at the end is the data contract that
renderers consume.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Optional, Tuple

from .benford import BenfordResult, FrequencyTable, benford_result, frequency_table
from .stats import Dataset, StatisticsSummary, summarize
from .tokenizer import RejectionEvent, extract_numbers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Report:
    summary: StatisticsSummary
    table: FrequencyTable
    benford: BenfordResult
    rejections: Tuple[RejectionEvent, ...] = ()

    @property
    def size(self) -> int:
        return self.summary.count


def analyze(values: Iterable[float], rejections: Tuple[RejectionEvent, ...] = ()) -> Report:
    dataset = Dataset.from_values(values)
    summary = summarize(dataset)
    table = frequency_table(dataset)
    result = benford_result(table)
    logger.debug(
        "analyzed %d values: mean=%g nb_deviation=%g (%s)",
        summary.count,
        summary.mean,
        result.deviation,
        result.conformance.label,
    )
    return Report(summary=summary, table=table, benford=result, rejections=tuple(rejections))


def analyze_stream(
    stream: BinaryIO,
    *,
    eof_marker: Optional[int] = None,
    strict: bool = False,
) -> Report:
    extracted = extract_numbers(stream, eof_marker=eof_marker, strict=strict)
    return analyze(extracted.values, extracted.rejections)
