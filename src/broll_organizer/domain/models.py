"""Domain models for script segments, provider results and resolved scenes."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple, Union



class QualityTier(str, Enum):
    HD = "hd"
    SD = "sd"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "QualityTier":
        """Map a provider quality label onto a tier; anything unrecognized is UNKNOWN."""
        try:
            return cls((raw or "").strip().lower())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class ScriptSegment:
    """One scene of narration with its search terms, ranked specific -> broad."""
    text: str
    search_terms: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "search_terms", tuple(self.search_terms))
        if not self.search_terms:
            raise ValueError("ScriptSegment needs at least one search term")


@dataclass(frozen=True)
class AssetCandidate:
    """A single playable file offered for a query."""
    quality: QualityTier
    width: int
    height: int
    locator: str


@dataclass(frozen=True)
class Provenance:
    duration_seconds: Optional[float] = None
    author_name: Optional[str] = None
    author_url: Optional[str] = None


@dataclass(frozen=True)
class QueryResult:
    """Provider response for one term. No candidates means "no match"."""
    candidates: Tuple[AssetCandidate, ...] = ()
    provenance: Provenance = field(default_factory=Provenance)

    def __post_init__(self):
        object.__setattr__(self, "candidates", tuple(self.candidates))

    @classmethod
    def empty(cls) -> "QueryResult":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.candidates


@dataclass(frozen=True)
class ResolvedSegment:
    id: str
    text: str
    used_term: str
    all_terms: Tuple[str, ...]
    asset_locator: Optional[str] = None
    duration_seconds: Optional[float] = None
    author_name: Optional[str] = None
    author_url: Optional[str] = None

    @property
    def has_asset(self) -> bool:
        return self.asset_locator is not None

    def with_asset(
        self,
        used_term: str,
        asset: Optional[AssetCandidate],
        provenance: Provenance,
    ) -> "ResolvedSegment":
        """Copy with new term/asset/provenance; id and text never change."""
        return replace(
            self,
            used_term=used_term,
            asset_locator=asset.locator if asset else None,
            duration_seconds=provenance.duration_seconds,
            author_name=provenance.author_name,
            author_url=provenance.author_url,
        )


# Cascade outcomes. An auth failure is not an outcome: it propagates as AuthError.

@dataclass(frozen=True)
class Succeeded:
    used_term: str
    asset: AssetCandidate
    provenance: Provenance


@dataclass(frozen=True)
class Exhausted:
    used_term: str
    asset: None = None
    provenance: Provenance = field(default_factory=Provenance)


CascadeOutcome = Union[Succeeded, Exhausted]
