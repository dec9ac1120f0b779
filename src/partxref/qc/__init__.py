"""Recommendation quality control: log records, corpus fetch and aggregation."""

from .aggregator import aggregate_qc_stats, bucket_label, feedback_status_priority, median
from .fetch import InMemoryQcLogSource, QcFetchError, QcFilters, QcLogSource, analyze_qc, collect_qc_corpus
from .models import FamilyAggregateStats, QcAnalysisInput, QcExample, RuleAggregateStats
from .records import build_log_record

__all__ = [
    "aggregate_qc_stats",
    "analyze_qc",
    "build_log_record",
    "bucket_label",
    "collect_qc_corpus",
    "feedback_status_priority",
    "median",
    "FamilyAggregateStats",
    "InMemoryQcLogSource",
    "QcAnalysisInput",
    "QcExample",
    "QcFetchError",
    "QcFilters",
    "QcLogSource",
    "RuleAggregateStats",
]
