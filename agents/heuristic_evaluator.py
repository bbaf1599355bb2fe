from __future__ import annotations

from typing import List, Sequence

from models import Evaluation


BASE_SCORE = 5
MAX_SCORE = 10
DETAILED_WORDS = 50
THOROUGH_WORDS = 100


def has_structure(answer: str) -> bool:
    return "." in answer or "," in answer


def covered_points(answer: str, ideal_points: Sequence[str]) -> List[str]:
    """Ideal points with at least one of their words appearing in the answer, case-insensitively."""
    answer_lower = answer.lower()
    covered = []
    for point in ideal_points:
        keywords = [k for k in point.lower().split(" ") if k]
        if any(k in answer_lower for k in keywords):
            covered.append(point)
    return covered


class HeuristicEvaluator:
    """Offline scorer used whenever the AI service is not available.

    Deterministic and side-effect free: the same answer and ideal points always
    produce the same Evaluation. Scores land in [5, 10].
    """

    def evaluate(self, user_answer: str, ideal_points: Sequence[str]) -> Evaluation:
        word_count = len(user_answer.split())
        structured = has_structure(user_answer)
        points = covered_points(user_answer, ideal_points)

        score = BASE_SCORE
        if word_count > DETAILED_WORDS:
            score += 1
        if word_count > THOROUGH_WORDS:
            score += 1
        if structured:
            score += 1
        score += len(points)
        score = min(score, MAX_SCORE)

        strengths: List[str] = []
        improvements: List[str] = []

        if word_count > DETAILED_WORDS:
            strengths.append("Provided a detailed response with good depth")
        else:
            improvements.append("Consider providing more detail and specific examples")

        if points:
            strengths.append(f"Addressed key points: {', '.join(points)}")
        else:
            improvements.append("Try to address the key aspects of the question more directly")

        if structured:
            strengths.append("Answer is well-structured and easy to follow")
        else:
            improvements.append("Break your answer into clear points for better clarity")

        if not strengths:
            strengths.append("You provided a response to the question")
        if not improvements:
            improvements.append("Continue practicing to refine your delivery")

        feedback = (
            f"Your answer scored {score}/10. {'. '.join(strengths)}. "
            f"To improve further: {'. '.join(improvements)}."
        )
        return Evaluation(score=score, feedback=feedback, strengths=strengths, improvements=improvements)
