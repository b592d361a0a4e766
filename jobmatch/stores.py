"""
Store Interfaces - Profile and posting sources the match service reads from.

The engine does not care how profiles and postings are persisted. This module
defines the two collaborator interfaces plus in-memory implementations that
can be populated from JSON or YAML documents.
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple
import logging

import yaml

from jobmatch.models import Posting, Profile
from jobmatch.schema_models import PostingDocument, ProfileDocument

logger = logging.getLogger(__name__)


def posting_dedup_key(posting: Posting) -> Tuple[str, str, str]:
    """Identity used by ingestion to drop duplicate postings (title+company+source)."""
    return (
        (posting.title or '').strip().lower(),
        (posting.company or '').strip().lower(),
        (posting.source or '').strip().lower(),
    )


class ProfileStore(ABC):
    """Returns one profile by identifier."""

    @abstractmethod
    def get_profile(self, profile_id: str) -> Optional[Profile]:
        """Return the profile, or None if the identifier is unknown."""
        pass


class PostingStore(ABC):
    """Returns postings ordered by posted date, newest first."""

    @abstractmethod
    def find_postings(
        self,
        location: Optional[str] = None,
        remote_only: bool = False,
        limit: Optional[int] = 200
    ) -> List[Posting]:
        """
        Return postings, optionally pre-filtered.

        Args:
            location: Case-insensitive substring the posting location must contain
            remote_only: Keep only remote postings
            limit: Maximum number of postings to return (None for all)
        """
        pass


class InMemoryProfileStore(ProfileStore):
    def __init__(self, profiles: Optional[Iterable[Profile]] = None):
        self._profiles: Dict[str, Profile] = {}
        for profile in profiles or []:
            self.add_profile(profile)

    def add_profile(self, profile: Profile) -> None:
        self._profiles[profile.id] = profile

    def get_profile(self, profile_id: str) -> Optional[Profile]:
        return self._profiles.get(profile_id)


class InMemoryPostingStore(PostingStore):
    """
    Posting pool held in memory.

    Inserts are de-duplicated on (title, company, source); the first posting
    seen for a key is kept.
    """

    def __init__(self, postings: Optional[Iterable[Posting]] = None):
        self._postings: List[Posting] = []
        self._keys = set()
        for posting in postings or []:
            self.add_posting(posting)

    def add_posting(self, posting: Posting) -> bool:
        """Insert a posting. Returns False if it duplicates an existing one."""
        key = posting_dedup_key(posting)
        if key in self._keys:
            logger.debug(f"Skipping duplicate posting {posting.id} ({key})")
            return False
        self._keys.add(key)
        self._postings.append(posting)
        return True

    def __len__(self) -> int:
        return len(self._postings)

    def find_postings(
        self,
        location: Optional[str] = None,
        remote_only: bool = False,
        limit: Optional[int] = 200
    ) -> List[Posting]:
        postings = self._postings
        if remote_only:
            postings = [p for p in postings if p.remote]
        if location:
            needle = location.strip().lower()
            postings = [p for p in postings if needle in (p.location or '').lower()]

        # Newest first; undated postings go last. sorted() is stable so equal
        # dates keep insertion order.
        postings = sorted(postings, key=lambda p: p.posted_date or date.min, reverse=True)

        if limit is not None:
            postings = postings[:limit]
        return postings


def _read_documents(path: str) -> List[dict]:
    """Read a JSON or YAML file holding one document or a list of documents."""
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    if data is None:
        return []
    if isinstance(data, dict):
        return [data]
    return list(data)


def load_profiles(path: str) -> List[Profile]:
    """Load and validate profile documents from a JSON/YAML file."""
    profiles = [ProfileDocument(**doc).to_domain() for doc in _read_documents(path)]
    logger.info(f"Loaded {len(profiles)} profile(s) from {path}")
    return profiles


def load_postings(path: str) -> List[Posting]:
    """Load and validate posting documents from a JSON/YAML file."""
    postings = [PostingDocument(**doc).to_domain() for doc in _read_documents(path)]
    logger.info(f"Loaded {len(postings)} posting(s) from {path}")
    return postings
