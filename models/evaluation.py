from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Union


Score = Union[int, float]


@dataclass
class EvaluationRequest:
    question: str
    user_answer: str
    ideal_points: List[str] = field(default_factory=list)
    category: str = ""


@dataclass
class Evaluation:
    score: Score
    feedback: str
    strengths: List[str] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
