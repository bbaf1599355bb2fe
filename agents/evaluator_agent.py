from __future__ import annotations

import json
from typing import Any, Dict

from models import Evaluation, EvaluationRequest, UpstreamUnavailable
from .base_agent import BaseAgent


EVALUATOR_SYSTEM = (
    "You are an expert interview coach who provides constructive, specific, and encouraging feedback."
)

EVALUATION_PROMPT = """You are an expert interview coach. Evaluate the following interview answer.

Question: {question}
Category: {category}
Ideal answer should include these points: {ideal_points}

Candidate's Answer: {answer}

Provide a detailed evaluation in the following JSON format:
{{
  "score": <number from 1-10>,
  "feedback": "<detailed constructive feedback paragraph>",
  "strengths": ["<strength 1>", "<strength 2>", "<strength 3>"],
  "improvements": ["<improvement 1>", "<improvement 2>", "<improvement 3>"]
}}

Be constructive, specific, and encouraging. Focus on both what was done well and what could be improved."""


def build_prompt(request: EvaluationRequest) -> str:
    return EVALUATION_PROMPT.format(
        question=request.question,
        category=request.category,
        ideal_points=", ".join(request.ideal_points),
        answer=request.user_answer,
    )


def parse_evaluation(raw: str) -> Evaluation:
    """Turn the model's reply into an Evaluation without touching its values.

    Raises UpstreamUnavailable when the reply is not a JSON object of the
    expected shape. The score is not clamped.
    """
    text = raw.strip()
    if text.startswith("```"):
        text = text.strip("`\n ")
        if text.startswith("json"):
            text = text[4:]
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise UpstreamUnavailable(f"malformed evaluation JSON: {e}") from e
    if not isinstance(data, dict):
        raise UpstreamUnavailable("evaluation payload is not a JSON object")
    _check_shape(data)
    return Evaluation(
        score=data["score"],
        feedback=data["feedback"],
        strengths=data["strengths"],
        improvements=data["improvements"],
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name}")


def _check_shape(data: Dict[str, Any]) -> None:
    missing = [k for k in ("score", "feedback", "strengths", "improvements") if k not in data]
    if missing:
        raise UpstreamUnavailable(f"evaluation payload missing {', '.join(missing)}")
    score = data["score"]
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise UpstreamUnavailable(f"evaluation score is not a number: {score!r}")
    if not isinstance(data["feedback"], str):
        raise UpstreamUnavailable("evaluation feedback is not a string")
    for key in ("strengths", "improvements"):
        if not isinstance(data[key], list):
            raise UpstreamUnavailable(f"evaluation {key} is not a list")


class EvaluatorAgent(BaseAgent):
    async def evaluate(self, request: EvaluationRequest) -> Evaluation:
        raw = await self.acomplete_json(
            EVALUATOR_SYSTEM,
            build_prompt(request),
            temperature=self.llm.config.temperature,
        )
        return parse_evaluation(raw)
