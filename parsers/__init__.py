from .questions_loader import load_questions, load_questions_from_json, default_questions

__all__ = [
    "load_questions",
    "load_questions_from_json",
    "default_questions",
]
