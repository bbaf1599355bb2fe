from __future__ import annotations

from enum import Enum
from typing import Optional

from models import (
    Evaluation,
    EvaluationError,
    EvaluationRequest,
    InternalError,
    ValidationError,
    UpstreamUnavailable,
)
from tools.llm_client import LLMClient
from utils.config import AppConfig, credential_for, load_config
from utils.logging import get_logger
from utils.telemetry import Telemetry
from .evaluator_agent import EvaluatorAgent
from .heuristic_evaluator import HeuristicEvaluator


REQUIRED_FIELDS_MESSAGE = "Question and answer are required"


class EvaluationStrategy(str, Enum):
    AI_BACKED = "ai_backed"
    HEURISTIC = "heuristic"


def resolve_strategy(config: AppConfig) -> EvaluationStrategy:
    if credential_for(config):
        return EvaluationStrategy.AI_BACKED
    return EvaluationStrategy.HEURISTIC


def validate_request(request: EvaluationRequest) -> None:
    for value in (request.question, request.user_answer):
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)


class EvaluationOrchestrator:
    """Entry point for scoring one answer.

    Tries the AI evaluator when a credential is configured and falls back to
    the heuristic evaluator on any upstream failure. Callers only ever see
    ValidationError or InternalError.
    """

    def __init__(self, config: Optional[AppConfig] = None, llm: Optional[LLMClient] = None):
        self.logger = get_logger("agent.orchestrator")
        self.config = config or (llm.config if llm else load_config())
        self.telemetry = Telemetry()
        self.heuristic = HeuristicEvaluator()
        self.evaluator = EvaluatorAgent(
            "evaluator",
            "Scores answers with the AI interview coach",
            llm=llm or LLMClient(self.config),
        )

    async def evaluate(self, request: EvaluationRequest) -> Evaluation:
        validate_request(request)
        try:
            with self.telemetry.timer("evaluation_ms"):
                return await self._evaluate(request, resolve_strategy(self.config))
        except EvaluationError:
            raise
        except Exception as e:
            self.logger.exception("Unexpected error during evaluation")
            raise InternalError(str(e)) from e

    async def _evaluate(self, request: EvaluationRequest, strategy: EvaluationStrategy) -> Evaluation:
        if strategy is EvaluationStrategy.HEURISTIC:
            self.logger.info("No AI credential configured, using heuristic evaluation")
            return self._heuristic(request)
        try:
            evaluation = await self.evaluator.evaluate(request)
        except UpstreamUnavailable as e:
            self.logger.warning(f"AI evaluation failed, falling back to heuristic: {e}")
            self.telemetry.incr("ai_fallbacks")
            return self._heuristic(request)
        self.telemetry.incr("evaluations_ai")
        return evaluation

    def _heuristic(self, request: EvaluationRequest) -> Evaluation:
        self.telemetry.incr("evaluations_heuristic")
        return self.heuristic.evaluate(request.user_answer, request.ideal_points)
