from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ScoreEntry:
    """A single accepted submission. Has no identity beyond (name, score)."""
    name: str
    score: Union[int, float]

    def to_dict(self):
        return {
            'name': self.name,
            'score': self.score,
        }
