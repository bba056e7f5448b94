"""
Text -> parsed values -> statistics, as one call.

A front end keeps the latest AnalysisResult and replaces it on every new
submission; nothing else carries state between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from complex_stats.parser import split_and_parse
from complex_stats.stats import EMPTY_STATISTICS, Statistics, compute_statistics


@dataclass(frozen=True)
class AnalysisResult:
    values: Tuple[complex, ...] = ()
    statistics: Statistics = EMPTY_STATISTICS

    @property
    def count(self) -> int:
        return len(self.values)

    @property
    def is_empty(self) -> bool:
        return len(self.values) == 0


# result of "clear": no values, zero statistics
CLEARED = AnalysisResult()


def analyze(text: str) -> AnalysisResult:
    values = tuple(split_and_parse(text))
    return AnalysisResult(values=values, statistics=compute_statistics(values))
