"""Score domain services: storage and ranking.

Imported by the HTTP routes; nothing in here knows about Flask, so tests
can build isolated stores and services without an application.
"""

from .store import ScoreStore
from .ranking import RankingService, ValidationError, parse_submission

__all__ = ['ScoreStore', 'RankingService', 'ValidationError', 'parse_submission']
