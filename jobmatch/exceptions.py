#!/usr/bin/env python3
"""
Custom exceptions for the matching engine.

All failures are caller-input failures: they are raised synchronously at the
point of detection and never retried inside the engine.
"""


class MatchingError(Exception):
    """Base exception for matching engine errors."""
    pass


class ProfileNotFoundError(MatchingError, LookupError):
    """Raised when a profile identifier does not resolve to a stored profile."""

    def __init__(self, profile_id: str):
        super().__init__(f"Profile not found: {profile_id}")
        self.profile_id = profile_id


class InvalidProfileError(MatchingError, ValueError):
    """Raised when profile data violates an invariant."""
    pass


class InvalidOptionsError(MatchingError, ValueError):
    """Raised when ranking options are out of range."""
    pass


class ConfigError(MatchingError):
    """Raised when the configuration file cannot be read or validated."""
    pass
