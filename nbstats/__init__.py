# nbstats/__init__.py
# Makes this a package and re-exports the pipeline entry points.
from .benford import BenfordResult, Conformance, FrequencyTable, benford_result, frequency_table
from .errors import (
    AllocationError,
    EmptyInputError,
    MalformedTokenError,
    NBStatsError,
    RejectedTokenWarning,
    StreamIOError,
    UsageError,
)
from .pipeline import Report, analyze, analyze_stream
from .stats import Dataset, ModeSet, StatisticsSummary, summarize
from .tokenizer import ExtractionResult, RejectionEvent, RejectionReason, extract_from_text, extract_numbers

__all__ = [
    "AllocationError",
    "BenfordResult",
    "Conformance",
    "Dataset",
    "EmptyInputError",
    "ExtractionResult",
    "FrequencyTable",
    "MalformedTokenError",
    "ModeSet",
    "NBStatsError",
    "RejectedTokenWarning",
    "RejectionEvent",
    "RejectionReason",
    "Report",
    "StatisticsSummary",
    "StreamIOError",
    "UsageError",
    "analyze",
    "analyze_stream",
    "benford_result",
    "extract_from_text",
    "extract_numbers",
    "frequency_table",
    "summarize",
]
