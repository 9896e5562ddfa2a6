"""
exception types raised by the engine.

unknown guesses are not errors: they come back as a result with
is_unknown=True. everything here is a real failure.
"""


class WordRankError(Exception):
    """base class for all engine errors."""


class InitializationError(WordRankError, RuntimeError):
    """game data is missing or malformed. fatal, not retried."""


class NotInitializedError(WordRankError, RuntimeError):
    """a query arrived before initialize() succeeded."""


class NoValidParametersError(WordRankError, ValueError):
    """no multiplier/increment pair gives a full-period mapping."""


class EmptyPoolError(WordRankError, LookupError):
    """a non-history day was requested but the active pool is empty."""


class DataInconsistencyError(WordRankError, RuntimeError):
    """loaded data contradicts itself (e.g. secret missing from vocabulary)."""
