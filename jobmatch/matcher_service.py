#!/usr/bin/env python3
"""
Match Service - Rank the posting pool for a stored profile.

Resolves the profile through the ProfileStore, pulls the candidate pool from
the PostingStore with the location/remote filters pushed down, and hands both
to the ranker.
"""

from datetime import date
from typing import List, Optional
import logging
import threading

from jobmatch.config_loader import AppConfig, RankOptions
from jobmatch.exceptions import ProfileNotFoundError
from jobmatch.ranking import rank_matches
from jobmatch.scorer import MatchResult, MatchScorer
from jobmatch.stores import PostingStore, ProfileStore

logger = logging.getLogger(__name__)


class MatchService:
    """Finds the best postings for a profile identifier."""

    def __init__(
        self,
        profile_store: ProfileStore,
        posting_store: PostingStore,
        config: Optional[AppConfig] = None
    ):
        self.profile_store = profile_store
        self.posting_store = posting_store
        self.config = config or AppConfig()
        self.scorer = MatchScorer(self.config.scorer)

    def find_matching_jobs(
        self,
        profile_id: str,
        options: Optional[RankOptions] = None,
        stop_event: Optional[threading.Event] = None,
        now: Optional[date] = None
    ) -> List[MatchResult]:
        """
        Find and rank postings that match a stored profile.

        Args:
            profile_id: Identifier resolved through the ProfileStore
            options: RankOptions; configured defaults when omitted
            stop_event: Set by the caller to abandon the request
            now: Reference date for open-ended work periods

        Returns:
            Ranked MatchResults (possibly empty)

        Raises:
            ProfileNotFoundError: profile_id is unknown
        """
        options = options or self.config.ranking.defaults

        profile = self.profile_store.get_profile(profile_id)
        if profile is None:
            logger.warning(f"Match request for unknown profile {profile_id}")
            raise ProfileNotFoundError(profile_id)

        postings = self.posting_store.find_postings(
            location=options.location_filter,
            remote_only=options.remote_only,
            limit=self.config.ranking.candidate_pool_size
        )
        logger.info(f"Scoring {len(postings)} candidate postings for profile {profile_id}")

        return rank_matches(
            profile,
            postings,
            options=options,
            scorer=self.scorer,
            now=now,
            stop_event=stop_event,
            max_workers=self.config.ranking.max_workers
        )
