from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
import math
import time
import uuid

from .evaluation import Evaluation, Score


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass
class PracticeResponse:
    question_id: str
    user_answer: str
    evaluation: Evaluation
    answered_at: float = field(default_factory=time.time)


@dataclass
class PracticeSession:
    session_id: str
    responses: List[PracticeResponse] = field(default_factory=list)
    started_at: float = field(default_factory=time.time)
    completed_at: Optional[float] = None
    total_score: int = 0

    @staticmethod
    def new() -> "PracticeSession":
        return PracticeSession(session_id=uuid.uuid4().hex)

    @property
    def scores(self) -> List[Score]:
        return [r.evaluation.score for r in self.responses]

    def record_response(self, question_id: str, user_answer: str, evaluation: Evaluation) -> PracticeResponse:
        response = PracticeResponse(question_id=question_id, user_answer=user_answer, evaluation=evaluation)
        self.responses.append(response)
        scores = self.scores
        self.total_score = round_half_up(sum(scores) / len(scores))
        return response

    def finalize(self) -> None:
        self.completed_at = time.time()
