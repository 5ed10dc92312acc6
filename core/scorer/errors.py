#!/usr/bin/env python3
"""
Scoring errors.

PreconditionFailed and StorageUnavailable abort the scoring of a match and
reach the caller. ReferenceMissing is recorded per row and skipped.
AlreadyScored is absorbed by the service.
"""


class ScoringError(Exception):
    """Base exception for scoring errors."""
    pass


class PreconditionFailed(ScoringError):
    """Raised when a match cannot be scored yet (not finished, no final score)."""
    pass


class MatchNotFound(PreconditionFailed):
    """Raised when the match to score does not exist."""
    pass


class AlreadyScored(ScoringError):
    """Raised when points are applied to a prediction that is not pending."""
    pass


class ReferenceMissing(ScoringError):
    """Raised when a prediction references a contestant or match that no longer exists."""
    pass


class StorageUnavailable(ScoringError):
    """Raised when the database fails during a scoring attempt. Safe to retry."""
    pass
