"""Configuration for the cross-reference matching and QC core."""

import os
from datetime import datetime, timezone

# Batch validation
BATCH_CONCURRENCY = int(os.getenv("PARTXREF_BATCH_CONCURRENCY", "3"))  # Max items in flight at once
DEFAULT_RECOMMENDATION_LIMIT = int(os.getenv("PARTXREF_RECOMMENDATION_LIMIT", "10"))

# Scoring
REVIEW_CREDIT = 0.5  # Fraction of a rule's weight earned by a "review" result
CRITICAL_ATTRIBUTE_WEIGHT = 7  # Missing source attributes at or above this weight block a recommendation
MISSING_VALUE_PLACEHOLDERS = ("-", "—", "–")  # Dashes used by data sources for "no value"

# Recommendation logging
MAX_SNAPSHOT_RECOMMENDATIONS = 10  # Cap persisted snapshot size

# QC analysis
DEFAULT_QC_DAYS = 30
QC_ALL_TIME_START = datetime(2020, 1, 1, tzinfo=timezone.utc)  # Used when days <= 0
MAX_QC_LOG_ROWS = 5000  # Hard cap per log query
FEEDBACK_LOOKUP_BATCH_SIZE = 500  # Max ids per feedback lookup
MAX_REPRESENTATIVE_EXAMPLES = 5
TOP_RULES_LIMIT = 5
