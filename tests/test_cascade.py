import asyncio

import pytest

from broll_organizer.application.cascade import TermCascadeResolver
from broll_organizer.domain.errors import AuthError, NotFound, RateLimited, TransientError
from broll_organizer.domain.models import Exhausted, Succeeded

from conftest import FakeSearch, hd, no_sleep, result, sd

TERMS = ("sad rainy commuter street", "people walking street", "city")


def resolve(search, terms=TERMS, sleep=no_sleep, pacing=0.0):
    return asyncio.run(TermCascadeResolver(search, pacing_seconds=pacing, sleep=sleep).resolve(terms))


def test_all_empty_is_exhausted_with_first_term():
    search = FakeSearch()
    outcome = resolve(search)
    assert isinstance(outcome, Exhausted)
    assert outcome.used_term == TERMS[0]
    assert outcome.asset is None
    assert outcome.provenance.author_name is None
    assert search.calls == list(TERMS)


def test_all_failing_never_raises():
    search = FakeSearch({
        TERMS[0]: RateLimited("slow down", term=TERMS[0], status_code=429),
        TERMS[1]: TransientError("boom", term=TERMS[1], status_code=503),
        TERMS[2]: NotFound("nothing", term=TERMS[2], status_code=404),
    })
    outcome = resolve(search)
    assert isinstance(outcome, Exhausted)
    assert outcome.used_term == TERMS[0]


def test_first_hit_stops_cascade():
    clip = hd(1920)
    search = FakeSearch({TERMS[1]: result(clip), TERMS[2]: result(sd())})
    outcome = resolve(search)
    assert isinstance(outcome, Succeeded)
    assert outcome.used_term == TERMS[1]
    assert outcome.asset is clip
    assert outcome.provenance.duration_seconds == 12
    assert search.calls == list(TERMS[:2])


def test_transient_failure_falls_through_to_next_term():
    search = FakeSearch({
        TERMS[0]: TransientError("timeout", term=TERMS[0]),
        TERMS[1]: result(sd(640)),
    })
    outcome = resolve(search)
    assert outcome.used_term == TERMS[1]


def test_auth_error_aborts_without_trying_remaining_terms():
    search = FakeSearch({
        TERMS[0]: AuthError("bad key", term=TERMS[0], status_code=401),
        TERMS[2]: result(hd()),
    })
    with pytest.raises(AuthError):
        resolve(search)
    assert search.calls == [TERMS[0]]


def test_auth_error_after_fallback_still_aborts():
    search = FakeSearch({TERMS[1]: AuthError("revoked", term=TERMS[1], status_code=403)})
    with pytest.raises(AuthError):
        resolve(search)
    assert search.calls == list(TERMS[:2])


def test_pacing_before_every_query_including_first(sleeps, recording_sleep):
    search = FakeSearch({TERMS[2]: result(hd())})
    resolve(search, sleep=recording_sleep, pacing=0.2)
    assert sleeps == [0.2, 0.2, 0.2]


def test_single_term_hit():
    search = FakeSearch({"city": result(sd())})
    outcome = resolve(search, terms=("city",))
    assert isinstance(outcome, Succeeded)


def test_empty_term_list_rejected():
    with pytest.raises(ValueError):
        resolve(FakeSearch(), terms=())
