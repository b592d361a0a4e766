#!/usr/bin/env python3
"""
Test suite for MatchService: store lookups and ranking on top of them.
"""

import threading
from unittest.mock import MagicMock

import pytest

from jobmatch.config_loader import AppConfig, RankingConfig, RankOptions
from jobmatch.exceptions import MatchingError, ProfileNotFoundError
from jobmatch.matcher_service import MatchService
from jobmatch.stores import InMemoryPostingStore, InMemoryProfileStore, PostingStore


@pytest.fixture
def service(candidate, posting_pool):
    return MatchService(
        InMemoryProfileStore([candidate]),
        InMemoryPostingStore(posting_pool),
    )


def test_unknown_profile_raises(service, now):
    with pytest.raises(ProfileNotFoundError) as exc_info:
        service.find_matching_jobs("nobody", now=now)

    assert exc_info.value.profile_id == "nobody"
    assert isinstance(exc_info.value, MatchingError)
    assert "nobody" in str(exc_info.value)


def test_ranks_stored_postings(service, candidate, now):
    results = service.find_matching_jobs(candidate.id, now=now)

    assert [r.posting.id for r in results] == ["job-strong", "job-remote"]
    assert results[0].score >= results[1].score


def test_explicit_options_override_defaults(service, candidate, now):
    results = service.find_matching_jobs(
        candidate.id, RankOptions(min_score=0.0, remote_only=True), now=now
    )

    assert [r.posting.id for r in results] == ["job-remote"]


def test_filters_and_pool_size_pushed_to_store(candidate, now):
    posting_store = MagicMock(spec=PostingStore)
    posting_store.find_postings.return_value = []
    config = AppConfig(ranking=RankingConfig(candidate_pool_size=25))
    service = MatchService(InMemoryProfileStore([candidate]), posting_store, config)

    results = service.find_matching_jobs(
        candidate.id, RankOptions(location_filter="Berlin", remote_only=True), now=now
    )

    assert results == []
    posting_store.find_postings.assert_called_once_with(
        location="Berlin", remote_only=True, limit=25
    )


def test_configured_defaults_apply(candidate, posting_pool, now):
    config = AppConfig(ranking=RankingConfig(defaults=RankOptions(limit=1, min_score=0.0)))
    service = MatchService(InMemoryProfileStore([candidate]), InMemoryPostingStore(posting_pool), config)

    results = service.find_matching_jobs(candidate.id, now=now)

    assert [r.posting.id for r in results] == ["job-strong"]


def test_parallel_workers_from_config(candidate, posting_pool, now):
    sequential = MatchService(
        InMemoryProfileStore([candidate]), InMemoryPostingStore(posting_pool)
    ).find_matching_jobs(candidate.id, RankOptions(min_score=0.0), now=now)
    parallel = MatchService(
        InMemoryProfileStore([candidate]),
        InMemoryPostingStore(posting_pool),
        AppConfig(ranking=RankingConfig(max_workers=3)),
    ).find_matching_jobs(candidate.id, RankOptions(min_score=0.0), now=now)

    assert parallel == sequential


def test_cancelled_request(service, candidate, now):
    stop = threading.Event()
    stop.set()

    with pytest.raises(InterruptedError):
        service.find_matching_jobs(candidate.id, stop_event=stop, now=now)
