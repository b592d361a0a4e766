#!/usr/bin/env python3
"""
Scoring Module - Rule-based profile/posting scoring.

Public API:
- MatchScorer: Stateless scoring engine
- MatchResult: Dataclass for scored, explained results
- score: Score one pair with the default configuration

Modules:
- models.py: Data structures (MatchResult)
- experience.py: Experience estimate and level fit
- skills.py: Required-skill coverage
- preferences.py: Location, title and industry alignment
- salary.py: Salary range compatibility
- service.py: MatchScorer orchestrator
"""

from jobmatch.scorer.models import MatchResult
from jobmatch.scorer.service import MatchScorer, score

__all__ = ['MatchScorer', 'MatchResult', 'score']
