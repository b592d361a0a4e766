#!/usr/bin/env python3
"""
Skill Coverage - What share of a posting's required skills the candidate has.

Matching is symmetric containment on lower-cased tokens, so naming variants
such as "node" / "node.js" count as a match. It also means "java" matches
"javascript"; whether token-boundary matching was intended is still open.
"""

from typing import Iterable, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


def normalize_skills(skills: Optional[Iterable[str]]) -> List[str]:
    """Lower-case, strip, drop blanks and duplicates (first occurrence wins)."""
    if not skills:
        return []
    normalized = (s.strip().lower() for s in skills if s and s.strip())
    return list(dict.fromkeys(normalized))


def skills_match(required: str, candidate: str) -> bool:
    """True if either skill name contains the other."""
    return required in candidate or candidate in required


def calculate_skill_match(
    profile_skills: Optional[Iterable[str]],
    required_skills: Optional[Iterable[str]]
) -> Tuple[float, List[str], List[str]]:
    """
    Calculate the skill sub-score.

    Score is matched / required, and 0 when the posting lists no skills.

    Returns: (score, matched_skills, missing_skills)
    """
    candidate = normalize_skills(profile_skills)
    required = normalize_skills(required_skills)

    if not required:
        return 0.0, [], []

    matched = []
    missing = []
    for req in required:
        if any(skills_match(req, have) for have in candidate):
            matched.append(req)
        else:
            missing.append(req)

    score = len(matched) / len(required)
    logger.debug(f"Skill coverage {len(matched)}/{len(required)}")

    return score, matched, missing
