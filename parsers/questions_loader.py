from __future__ import annotations

import json
import os
from typing import List, Optional

from models import Question
from utils.logging import get_logger


logger = get_logger(__name__)


def load_questions_from_json(path: str) -> List[Question]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    questions: List[Question] = []
    for idx, item in enumerate(data):
        text = item.get("question")
        if not text:
            continue
        questions.append(
            Question(
                id=str(item.get("id") or f"q{idx + 1}"),
                question=text,
                category=item.get("category", "General"),
                difficulty=item.get("difficulty", "medium"),
                ideal_answer_points=[str(p) for p in item.get("ideal_answer_points", [])],
            )
        )
    return questions


def default_questions() -> List[Question]:
    return [
        Question(
            "behavioral-1",
            "Tell me about yourself and why you are interested in this role.",
            "Behavioral",
            "easy",
            ["background", "relevant experience", "motivation", "career goals"],
        ),
        Question(
            "behavioral-2",
            "Describe a time you had a conflict with a teammate. How did you resolve it?",
            "Behavioral",
            "medium",
            ["communication", "empathy", "resolution", "outcome"],
        ),
        Question(
            "leadership-1",
            "Tell me about a project you led from start to finish.",
            "Leadership",
            "medium",
            ["planning", "delegation", "leadership", "results"],
        ),
        Question(
            "technical-1",
            "How would you design a URL shortening service?",
            "Technical",
            "hard",
            ["hashing", "database", "scalability", "caching"],
        ),
        Question(
            "problem-solving-1",
            "Walk me through how you debug a production issue you have never seen before.",
            "Problem Solving",
            "hard",
            ["logs", "reproduce", "hypothesis", "monitoring"],
        ),
    ]


def load_questions(path: Optional[str] = None) -> List[Question]:
    """Questions ordered by difficulty, easiest first."""
    questions: List[Question] = []
    if path and os.path.isfile(path):
        try:
            questions = load_questions_from_json(path)
        except (OSError, ValueError, AttributeError) as e:
            logger.warning(f"Could not load questions from {path}: {e}. Using defaults.")
    if not questions:
        questions = default_questions()
    return sorted(questions, key=lambda q: q.difficulty_rank)
