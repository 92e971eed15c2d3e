"""
Footage pipeline – orchestrate segment → cascade → asset for a whole script.
Depends only on port interfaces (SOLID – Dependency Inversion).
"""

import asyncio
import logging
import time
from typing import Callable, List, Optional, Sequence

from broll_organizer.application.cascade import Sleep, TermCascadeResolver
from broll_organizer.application.selector import select_best
from broll_organizer.domain.errors import AuthError, NotFound, SegmentationEmpty, SegmentationError
from broll_organizer.domain.models import Exhausted, Provenance, ResolvedSegment, ScriptSegment
from broll_organizer.ports.interfaces import IFootageSearch, IScriptSegmenter

logger = logging.getLogger(__name__)


class FootagePipeline:
    """
    Resolves script segments to stock footage.
    All dependencies are injected (ports); no concrete implementations here.
    """

    def __init__(
        self,
        *,
        search: IFootageSearch,
        segmenter: Optional[IScriptSegmenter] = None,
        pacing_seconds: float = 0.2,
        sleep: Sleep = asyncio.sleep,
    ):
        self._search = search
        self._segmenter = segmenter
        self._cascade = TermCascadeResolver(search, pacing_seconds=pacing_seconds, sleep=sleep)

    async def aclose(self) -> None:
        await self._search.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def run_script(
        self,
        script: str,
        on_segmented: Optional[Callable[[List[ScriptSegment]], None]] = None,
    ) -> List[ResolvedSegment]:
        """Segment a script, then resolve every scene. Raises SegmentationError or AuthError."""
        if self._segmenter is None:
            raise SegmentationError("No script segmenter configured")
        # The segmenter is a blocking HTTP call; keep the loop free.
        segments = await asyncio.to_thread(self._segmenter.segment, script)
        if on_segmented is not None:
            on_segmented(segments)
        return await self.resolve_all(segments)

    async def resolve_all(self, segments: Sequence[ScriptSegment]) -> List[ResolvedSegment]:
        """
        Resolve every segment concurrently; output order matches input order.

        Raises SegmentationEmpty for an empty input and AuthError if any cascade
        hit a rejected credential. Sibling cascades already running finish first.
        """
        if not segments:
            raise SegmentationEmpty("Segmentation produced no scenes")

        batch_stamp = int(time.time() * 1000)
        results: List[Optional[ResolvedSegment]] = [None] * len(segments)

        async def resolve_slot(index: int, segment: ScriptSegment) -> None:
            try:
                outcome = await self._cascade.resolve(segment.search_terms)
            except AuthError:
                raise
            except Exception:
                # One broken segment never costs the others their results.
                logger.exception("Unexpected failure resolving scene %d; recording it without footage", index)
                outcome = Exhausted(used_term=segment.search_terms[0])
            base = ResolvedSegment(
                id=f"seg-{index}-{batch_stamp}",
                text=segment.text,
                used_term=segment.search_terms[0],
                all_terms=segment.search_terms,
            )
            results[index] = base.with_asset(outcome.used_term, outcome.asset, outcome.provenance)

        logger.info("Resolving footage for %d scenes", len(segments))
        settled = await asyncio.gather(
            *(resolve_slot(i, s) for i, s in enumerate(segments)),
            return_exceptions=True,
        )

        failures = [r for r in settled if isinstance(r, BaseException)]
        for failure in failures:
            if isinstance(failure, AuthError):
                logger.error("Batch aborted: %s", failure)
                raise failure
        if failures:
            raise failures[0]

        found = sum(1 for r in results if r.has_asset)
        logger.info("Found footage for %d of %d scenes", found, len(results))
        return results

    async def resolve_one(self, existing: ResolvedSegment, new_term: str) -> ResolvedSegment:
        """
        Re-resolve one scene with an explicit term: a single query, no cascade, no pacing.

        Returns a new ResolvedSegment (id and text unchanged). Search failures other
        than NotFound propagate so the caller can keep the previous result.
        """
        term = (new_term or "").strip()
        if not term:
            raise ValueError("A search term is required")

        try:
            result = await self._search.search(term)
        except NotFound:
            return existing.with_asset(term, None, Provenance())

        asset = select_best(result.candidates)
        provenance = result.provenance if asset else Provenance()
        logger.info("Manual search for %r on %s: %s", term, existing.id, "found" if asset else "nothing")
        return existing.with_asset(term, asset, provenance)
