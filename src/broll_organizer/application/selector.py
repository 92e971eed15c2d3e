"""Asset selection: tier priority first, then the provider's own relevance order."""

from typing import Optional, Sequence

from broll_organizer.domain.models import AssetCandidate, QualityTier

MIN_HD_WIDTH = 1280


def select_best(candidates: Sequence[AssetCandidate]) -> Optional[AssetCandidate]:
    """
    Pick one candidate:
    1. first HD file at least MIN_HD_WIDTH wide
    2. else first SD file
    3. else the first file of any tier
    Returns None for an empty sequence.
    """
    for c in candidates:
        if c.quality is QualityTier.HD and c.width >= MIN_HD_WIDTH:
            return c
    for c in candidates:
        if c.quality is QualityTier.SD:
            return c
    return candidates[0] if candidates else None
