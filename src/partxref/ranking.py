"""Candidate ranking and replacement selection."""

from typing import Iterable, Mapping

from .config import DEFAULT_RECOMMENDATION_LIMIT
from .matching import ScoredCandidate, evaluate_candidate
from .models import MatchDetail, PartAttributes, XrefRecommendation
from .rules import LogicTable

_MAX_NOTE_ATTRIBUTES = 3


def build_notes(details: Iterable[MatchDetail]) -> str | None:
    """Short summary of failing and review attributes: 'Fails: Tolerance. Review: PSRR'"""
    fails = [d.parameter_name for d in details if d.rule_result == "fail"]
    reviews = [d.parameter_name for d in details if d.rule_result == "review"]
    parts = []
    for label, names in (("Fails", fails), ("Review", reviews)):
        if not names:
            continue
        shown = ", ".join(names[:_MAX_NOTE_ATTRIBUTES])
        if len(names) > _MAX_NOTE_ATTRIBUTES:
            shown += f" (+{len(names) - _MAX_NOTE_ATTRIBUTES} more)"
        parts.append(f"{label}: {shown}")
    return ". ".join(parts) or None


def _rank_key(candidate: ScoredCandidate) -> tuple[int, int, str, str]:
    return (
        -candidate.match_percentage,
        candidate.fail_count,
        candidate.part.mpn,
        candidate.part.manufacturer,
    )


def rank(candidates: Iterable[ScoredCandidate]) -> list[XrefRecommendation]:
    """Order candidates best first.

    Ties on match percentage go to the candidate with fewer failing rules,
    then MPN, then manufacturer, so ordering never depends on input order
    except for exact duplicates.
    """
    ordered = sorted(candidates, key=_rank_key)
    return [
        XrefRecommendation(
            part=c.part,
            match_percentage=c.match_percentage,
            match_details=c.match_details,
            notes=build_notes(c.match_details),
        )
        for c in ordered
    ]


def find_replacements(
    source: PartAttributes,
    candidates: Iterable[PartAttributes],
    table: LogicTable,
    overrides: Mapping[str, str] | None = None,
    context_answers: Mapping[str, str] | None = None,
    limit: int | None = DEFAULT_RECOMMENDATION_LIMIT,
) -> list[XrefRecommendation]:
    """Score every candidate against the source and return the best ones.

    The source part itself is never recommended as its own replacement.
    """
    source_mpn = source.part.mpn.strip().upper()
    scored = [
        evaluate_candidate(source, candidate, table, overrides, context_answers)
        for candidate in candidates
        if candidate.part.mpn.strip().upper() != source_mpn
    ]
    ranked = rank(scored)
    if limit is not None:
        ranked = ranked[:limit]
    return ranked
