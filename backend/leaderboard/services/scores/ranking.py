import logging
import math
from collections.abc import Mapping
from typing import Any, List

from leaderboard.models import ScoreEntry
from .store import ScoreStore


INVALID_NAME_MESSAGE = 'Invalid input. Please provide a non-empty name.'
INVALID_SCORE_MESSAGE = 'Invalid input. Please provide a numeric score.'
INVALID_PAYLOAD_MESSAGE = 'Invalid input. Please provide a name and a non-negative score.'
NEGATIVE_SCORE_MESSAGE = 'Score must be non-negative.'


class ValidationError(Exception):
    """A submission was rejected at the validation boundary."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a score
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_submission(raw: Any) -> ScoreEntry:
    """Turn an untyped payload into a ScoreEntry or raise ValidationError.

    Checks run in order and the first failure wins:
    payload shape, name, score type, score range. Values are kept exactly
    as supplied; nothing is trimmed or rounded.
    """
    if not isinstance(raw, Mapping):
        raise ValidationError(INVALID_PAYLOAD_MESSAGE)

    name = raw.get('name')
    if not isinstance(name, str) or name == '':
        raise ValidationError(INVALID_NAME_MESSAGE)

    score = raw.get('score')
    if not _is_number(score):
        raise ValidationError(INVALID_SCORE_MESSAGE)
    # Only floats can be nan/inf; huge ints would overflow isfinite()
    if isinstance(score, float) and not math.isfinite(score):
        raise ValidationError(INVALID_SCORE_MESSAGE)
    if score < 0:
        raise ValidationError(NEGATIVE_SCORE_MESSAGE)

    return ScoreEntry(name=name, score=score)


class RankingService:
    """Gatekeeper for writes to a ScoreStore and producer of the ranked view."""

    def __init__(self, store: ScoreStore, logger=None):
        self.store = store
        self.logger = logger or logging.getLogger(__name__)

    def submit(self, raw: Any) -> ScoreEntry:
        entry = parse_submission(raw)
        self.store.append(entry)
        return entry

    def list(self) -> List[ScoreEntry]:
        # sorted() is stable, and stays stable with reverse=True, so ties
        # keep insertion order
        return sorted(self.store.all(), key=lambda entry: entry.score, reverse=True)

    def reset(self) -> int:
        cleared = self.store.reset()
        self.logger.info(f"[scores-reset] cleared={cleared}")
        return cleared
