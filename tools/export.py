from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, List

from models import PracticeSession, ScoreTier, score_tier
from models.evaluation import Score
from models.session import round_half_up


@dataclass
class SessionSummary:
    session_id: str
    questions_answered: int
    average_score: int
    scores: List[Score]
    tier: ScoreTier
    title: str
    message: str
    completed: bool


def summarize(session: PracticeSession) -> SessionSummary:
    scores = session.scores
    avg = round_half_up(sum(scores) / len(scores)) if scores else 0
    tier = score_tier(avg)
    return SessionSummary(
        session_id=session.session_id,
        questions_answered=len(scores),
        average_score=avg,
        scores=scores,
        tier=tier,
        title=tier.title,
        message=tier.message,
        completed=session.completed_at is not None,
    )


def session_to_dict(session: PracticeSession) -> dict[str, Any]:
    return {
        "session_id": session.session_id,
        "started_at": session.started_at,
        "completed_at": session.completed_at,
        "total_score": session.total_score,
        "responses": [
            {
                "question_id": r.question_id,
                "user_answer": r.user_answer,
                "ai_score": r.evaluation.score,
                "ai_feedback": r.evaluation.feedback,
                "strengths": r.evaluation.strengths,
                "improvements": r.evaluation.improvements,
                "answered_at": r.answered_at,
            }
            for r in session.responses
        ],
    }


def save_session_json(session: PracticeSession, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(session_to_dict(session), f, indent=2)
