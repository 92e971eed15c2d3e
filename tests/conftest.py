import asyncio

import pytest

from broll_organizer.domain.models import AssetCandidate, Provenance, QualityTier, QueryResult
from broll_organizer.ports.interfaces import IFootageSearch


def hd(width=1920, locator=None):
    return AssetCandidate(QualityTier.HD, width, width * 9 // 16, locator or f"https://cdn.test/hd{width}.mp4")


def sd(width=640, locator=None):
    return AssetCandidate(QualityTier.SD, width, width * 9 // 16, locator or f"https://cdn.test/sd{width}.mp4")


def result(*candidates, duration=12, author="Jane Doe"):
    return QueryResult(
        candidates=candidates,
        provenance=Provenance(duration_seconds=duration, author_name=author,
                              author_url="https://pexels.test/@jane"),
    )


class FakeSearch(IFootageSearch):
    """Scripted provider: term -> QueryResult or exception instance. Unknown terms are empty."""

    def __init__(self, responses=None, delays=None):
        self.responses = responses or {}
        self.delays = delays or {}
        self.calls = []
        self.completed = []
        self.closed = False

    async def search(self, term):
        self.calls.append(term)
        delay = self.delays.get(term)
        if delay:
            await asyncio.sleep(delay)
        outcome = self.responses.get(term, QueryResult.empty())
        self.completed.append(term)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def aclose(self):
        self.closed = True


async def no_sleep(_seconds):
    return None


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def recording_sleep(sleeps):
    async def _sleep(seconds):
        sleeps.append(seconds)
    return _sleep
