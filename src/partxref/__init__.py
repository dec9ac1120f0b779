"""Cross-reference matching and recommendation QC for electronic components.

This package provides rule-based replacement scoring against per-family logic
tables, and aggregation of logged recommendations into QC statistics.
"""

from .batch import BatchItem, BatchItemResult, BatchValidator, PartDataSource, run_bounded
from .matching import ScoredCandidate, evaluate, evaluate_candidate, evaluate_rule, score
from .missing import MissingAttribute, critical_missing, detect_missing
from .models import (
    FeedbackRecord,
    MatchDetail,
    Part,
    PartAttributes,
    RecommendationLogEntry,
    XrefRecommendation,
)
from .ranking import find_replacements, rank
from .registry import LogicTableRegistry, build_default_registry, build_registry
from .rules import LogicTable, LogicTableError, MatchingRule

__version__ = "0.1.0"

__all__ = [
    "BatchItem",
    "BatchItemResult",
    "BatchValidator",
    "PartDataSource",
    "run_bounded",
    "ScoredCandidate",
    "evaluate",
    "evaluate_candidate",
    "evaluate_rule",
    "score",
    "MissingAttribute",
    "critical_missing",
    "detect_missing",
    "FeedbackRecord",
    "MatchDetail",
    "Part",
    "PartAttributes",
    "RecommendationLogEntry",
    "XrefRecommendation",
    "find_replacements",
    "rank",
    "LogicTableRegistry",
    "build_default_registry",
    "build_registry",
    "LogicTable",
    "LogicTableError",
    "MatchingRule",
]
