"""Collect the QC corpus from a log store and run the aggregation.

The store itself (a database, an API) lives outside this package behind the
QcLogSource protocol. This module owns the query policy: the date window,
the row cap, and batching feedback lookups to the store's id-list limit.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, Protocol, Sequence

from ..config import DEFAULT_QC_DAYS, FEEDBACK_LOOKUP_BATCH_SIZE, MAX_QC_LOG_ROWS, QC_ALL_TIME_START
from ..models import FeedbackRecord, RecommendationLogEntry
from ..registry import LogicTableRegistry
from .aggregator import aggregate_qc_stats
from .models import DateRange, QcAnalysisInput

logger = logging.getLogger(__name__)


class QcFetchError(RuntimeError):
    """The log store could not be queried."""


@dataclass(frozen=True)
class QcFilters:
    days: int = DEFAULT_QC_DAYS  # <= 0 means all time
    request_source: str | None = None
    family_id: str | None = None
    search: str | None = None
    has_feedback: bool = False

    def since(self, now: datetime) -> datetime:
        if self.days > 0:
            return now - timedelta(days=self.days)
        return QC_ALL_TIME_START


class QcLogSource(Protocol):
    """Read access to persisted recommendation logs and feedback."""

    async def fetch_logs(self, filters: QcFilters, since: datetime, limit: int) -> list[dict[str, Any]]:
        """Log rows created at or after `since`, newest first, at most `limit`."""
        ...

    async def fetch_feedback(self, log_ids: Sequence[str]) -> list[dict[str, Any]]:
        """Feedback rows for the given log ids."""
        ...


@dataclass
class QcCorpus:
    logs: list[RecommendationLogEntry]
    feedback: list[FeedbackRecord]
    date_range: DateRange


def _parse_feedback(rows: Iterable[dict[str, Any]]) -> list[FeedbackRecord]:
    records = []
    for row in rows:
        try:
            records.append(FeedbackRecord.from_row(row))
        except ValueError as e:
            logger.warning(f"Skipping feedback row for log {row.get('log_id')}: {e}")
    return records


async def collect_qc_corpus(
    source: QcLogSource,
    filters: QcFilters | None = None,
    now: datetime | None = None,
) -> QcCorpus:
    """Fetch logs, then their feedback in sequential batches.

    Raises QcFetchError if the store fails. No matching logs is not an error.
    """
    filters = filters or QcFilters()
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        # Stored log times are UTC-aware
        now = now.replace(tzinfo=timezone.utc)
    date_range = DateRange(start=filters.since(now), end=now)

    try:
        log_rows = await source.fetch_logs(filters, date_range.start, MAX_QC_LOG_ROWS)
    except Exception as e:
        raise QcFetchError(f"Failed to query logs: {e}") from e

    if not log_rows:
        return QcCorpus(logs=[], feedback=[], date_range=date_range)

    if len(log_rows) > MAX_QC_LOG_ROWS:
        logger.warning(f"Log source returned {len(log_rows)} rows, truncating to {MAX_QC_LOG_ROWS}")
        log_rows = log_rows[:MAX_QC_LOG_ROWS]

    logs = [RecommendationLogEntry.from_row(row) for row in log_rows]
    log_ids = [log.id for log in logs]

    feedback_rows: list[dict[str, Any]] = []
    for i in range(0, len(log_ids), FEEDBACK_LOOKUP_BATCH_SIZE):
        batch = log_ids[i:i + FEEDBACK_LOOKUP_BATCH_SIZE]
        try:
            feedback_rows.extend(await source.fetch_feedback(batch))
        except Exception as e:
            raise QcFetchError(f"Failed to query feedback: {e}") from e
    feedback = _parse_feedback(feedback_rows)

    if filters.has_feedback:
        with_feedback = {fb.log_id for fb in feedback}
        logs = [log for log in logs if log.id in with_feedback]

    logger.debug(f"Collected {len(logs)} logs and {len(feedback)} feedback rows since {date_range.start}")
    return QcCorpus(logs=logs, feedback=feedback, date_range=date_range)


async def analyze_qc(
    source: QcLogSource,
    registry: LogicTableRegistry,
    filters: QcFilters | None = None,
    now: datetime | None = None,
) -> QcAnalysisInput:
    """Fetch the corpus and aggregate it."""
    corpus = await collect_qc_corpus(source, filters, now)
    return aggregate_qc_stats(corpus.logs, corpus.feedback, registry, corpus.date_range)


# =============================================================================
# IN-MEMORY SOURCE
# =============================================================================


def _row_time(row: dict[str, Any]) -> datetime | None:
    value = row.get("created_at")
    if isinstance(value, datetime):
        created = value
    elif value:
        try:
            created = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created


@dataclass
class InMemoryQcLogSource:
    """QcLogSource over lists of row dicts, applying filters like the log store does."""

    log_rows: list[dict[str, Any]] = field(default_factory=list)
    feedback_rows: list[dict[str, Any]] = field(default_factory=list)

    async def fetch_logs(self, filters: QcFilters, since: datetime, limit: int) -> list[dict[str, Any]]:
        search = filters.search.lower() if filters.search else None
        matched = []
        for row in self.log_rows:
            created = _row_time(row)
            if created is None or created < since:
                continue
            if filters.request_source and row.get("request_source") != filters.request_source:
                continue
            if filters.family_id and row.get("family_id") != filters.family_id:
                continue
            if search:
                haystacks = (row.get("source_mpn") or "", row.get("family_name") or "")
                if not any(search in h.lower() for h in haystacks):
                    continue
            matched.append((created, row))
        matched.sort(key=lambda item: item[0], reverse=True)
        return [row for _, row in matched[:limit]]

    async def fetch_feedback(self, log_ids: Sequence[str]) -> list[dict[str, Any]]:
        if len(log_ids) > FEEDBACK_LOOKUP_BATCH_SIZE:
            raise ValueError(f"Too many ids in one lookup: {len(log_ids)}")
        wanted = set(log_ids)
        return [row for row in self.feedback_rows if str(row.get("log_id")) in wanted]
