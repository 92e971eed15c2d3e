"""Domain models, value objects and errors."""

from broll_organizer.domain.models import (
    AssetCandidate,
    CascadeOutcome,
    Exhausted,
    Provenance,
    QualityTier,
    QueryResult,
    ResolvedSegment,
    ScriptSegment,
    Succeeded,
)

__all__ = [
    "AssetCandidate",
    "CascadeOutcome",
    "Exhausted",
    "Provenance",
    "QualityTier",
    "QueryResult",
    "ResolvedSegment",
    "ScriptSegment",
    "Succeeded",
]
