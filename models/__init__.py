from .evaluation import Evaluation, EvaluationRequest
from .errors import (
    EvaluationError,
    ValidationError,
    UpstreamUnavailable,
    InternalError,
    SessionNotFound,
    QuestionNotFound,
)
from .question import Question
from .session import PracticeSession, PracticeResponse
from .tier import ScoreTier, score_tier

__all__ = [
    "Evaluation",
    "EvaluationRequest",
    "EvaluationError",
    "ValidationError",
    "UpstreamUnavailable",
    "InternalError",
    "SessionNotFound",
    "QuestionNotFound",
    "Question",
    "PracticeSession",
    "PracticeResponse",
    "ScoreTier",
    "score_tier",
]
