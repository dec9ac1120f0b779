"""Batch validation of uploaded part lists.

Each row is resolved to a part, its attributes are fetched, and replacements
are scored. Rows run concurrently under a semaphore so upstream data sources
see at most BATCH_CONCURRENCY requests at a time. A failing row becomes an
error result; it never stops the batch. Results come back in row order.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Literal, Protocol, Sequence, TypeVar

from .config import BATCH_CONCURRENCY, DEFAULT_RECOMMENDATION_LIMIT
from .models import Part, PartAttributes, XrefRecommendation
from .ranking import find_replacements
from .registry import LogicTableRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

BatchStatus = Literal["resolved", "not-found", "error"]


class PartDataSource(Protocol):
    """Attribute-resolution collaborator (vendor search, attribute mapping)."""

    async def search(self, query: str) -> list[Part]: ...

    async def get_attributes(self, mpn: str) -> PartAttributes | None: ...

    async def get_candidates(self, source: PartAttributes) -> list[PartAttributes]: ...


@dataclass
class BatchItem:
    """One row of an uploaded parts list."""

    row_index: int
    mpn: str
    manufacturer: str = ""
    description: str = ""


@dataclass
class BatchItemResult:
    row_index: int
    status: BatchStatus
    mpn: str = ""
    resolved_part: Part | None = None
    family_id: str | None = None
    suggested_replacement: XrefRecommendation | None = None
    all_recommendations: list[XrefRecommendation] = field(default_factory=list)
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "rowIndex": self.row_index,
            "status": self.status,
            "mpn": self.mpn,
            "resolvedPart": self.resolved_part.to_dict() if self.resolved_part else None,
            "familyId": self.family_id,
            "suggestedReplacement": (
                self.suggested_replacement.to_dict() if self.suggested_replacement else None
            ),
            "allRecommendations": [r.to_dict() for r in self.all_recommendations],
            "errorMessage": self.error_message,
        }


async def run_bounded(
    items: Sequence[T],
    worker: Callable[[T], Awaitable[R]],
    concurrency: int = BATCH_CONCURRENCY,
) -> list[R]:
    """Run worker over items with at most `concurrency` in flight.

    Output order matches input order regardless of completion order. The
    worker is expected to handle its own errors; anything it raises is
    propagated by gather.
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be >= 1, got {concurrency}")
    semaphore = asyncio.Semaphore(concurrency)

    async def _run(item: T) -> R:
        async with semaphore:
            return await worker(item)

    return list(await asyncio.gather(*(_run(item) for item in items)))


def _pick_match(parts: list[Part], item: BatchItem) -> Part:
    wanted = item.mpn.strip().upper()
    for part in parts:
        if part.mpn.strip().upper() == wanted:
            if not item.manufacturer or item.manufacturer.lower() in part.manufacturer.lower():
                return part
    return parts[0]


class BatchValidator:
    """Resolves and cross-references a list of parts."""

    def __init__(
        self,
        source: PartDataSource,
        registry: LogicTableRegistry,
        concurrency: int = BATCH_CONCURRENCY,
        limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    ):
        self._source = source
        self._registry = registry
        self._concurrency = concurrency
        self._limit = limit

    async def process_item(self, item: BatchItem) -> BatchItemResult:
        query = f"{item.manufacturer} {item.mpn}".strip() if item.manufacturer else item.mpn
        parts = await self._source.search(query)
        if not parts:
            return BatchItemResult(row_index=item.row_index, status="not-found", mpn=item.mpn)

        part = _pick_match(parts, item)
        attributes = await self._source.get_attributes(part.mpn)
        if attributes is None:
            return BatchItemResult(
                row_index=item.row_index, status="not-found", mpn=item.mpn, resolved_part=part
            )

        table = self._registry.resolve_table(attributes.part.subcategory, attributes)
        if table is None:
            # Resolved, but no rules for this family
            return BatchItemResult(
                row_index=item.row_index, status="resolved", mpn=item.mpn, resolved_part=attributes.part
            )

        candidates = await self._source.get_candidates(attributes)
        recommendations = find_replacements(attributes, candidates, table, limit=self._limit)
        return BatchItemResult(
            row_index=item.row_index,
            status="resolved",
            mpn=item.mpn,
            resolved_part=attributes.part,
            family_id=table.family_id,
            suggested_replacement=recommendations[0] if recommendations else None,
            all_recommendations=recommendations,
        )

    async def _safe_process(self, item: BatchItem) -> BatchItemResult:
        try:
            return await self.process_item(item)
        except Exception as e:
            logger.warning(f"Batch row {item.row_index} ({item.mpn}) failed: {type(e).__name__}: {e}")
            return BatchItemResult(
                row_index=item.row_index,
                status="error",
                mpn=item.mpn,
                error_message=str(e) or type(e).__name__,
            )

    async def validate(self, items: Sequence[BatchItem]) -> list[BatchItemResult]:
        """Validate every row. Never raises for row-level failures."""
        results = await run_bounded(items, self._safe_process, self._concurrency)
        results.sort(key=lambda r: r.row_index)
        resolved = sum(1 for r in results if r.status == "resolved")
        logger.info(f"Batch validated {len(results)} rows ({resolved} resolved)")
        return results
