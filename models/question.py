from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


DIFFICULTY_ORDER = {"easy": 0, "medium": 1, "hard": 2}


@dataclass
class Question:
    id: str
    question: str
    category: str = "General"
    difficulty: str = "medium"
    ideal_answer_points: List[str] = field(default_factory=list)

    @property
    def difficulty_rank(self) -> int:
        return DIFFICULTY_ORDER.get(self.difficulty.lower(), len(DIFFICULTY_ORDER))
