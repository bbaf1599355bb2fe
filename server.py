from __future__ import annotations

from typing import Callable, List, Optional
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ValidationError as PayloadError
from starlette.middleware.base import BaseHTTPMiddleware

from agents.orchestrator_agent import EvaluationOrchestrator, REQUIRED_FIELDS_MESSAGE, resolve_strategy
from models import (
    EvaluationRequest,
    InternalError,
    QuestionNotFound,
    SessionNotFound,
    ValidationError,
    score_tier,
)
from parsers import load_questions
from tools.export import session_to_dict, summarize
from tools.session_store import SessionStore
from utils.config import load_config
from utils.logging import setup_logging, get_logger


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Client-Info, Apikey",
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Stamps the fixed permissive CORS headers on every response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        for key, value in CORS_HEADERS.items():
            response.headers[key] = value
        return response


config = load_config()
setup_logging(config.log_level)
logger = get_logger("server")

app = FastAPI(title="Interview Practice Evaluator", version="0.1.0")
app.add_middleware(CORSHeadersMiddleware)

app.state.start_time = time.time()
app.state.config = config
app.state.orchestrator = EvaluationOrchestrator(config)
app.state.sessions = SessionStore()
app.state.questions = load_questions(config.questions_path)


class EvaluateReq(BaseModel):
    question: Optional[str] = None
    userAnswer: Optional[str] = None
    idealPoints: Optional[List[str]] = None
    category: Optional[str] = None


class QuestionResp(BaseModel):
    id: str
    question: str
    category: str
    difficulty: str
    ideal_answer_points: List[str]


class CreateSessionResp(BaseModel):
    session_id: str
    started_at: float


class AnswerReq(BaseModel):
    questionId: str
    userAnswer: str


class AnswerResp(BaseModel):
    question_id: str
    score: float
    feedback: str
    strengths: List[str]
    improvements: List[str]
    tier: str
    headline: str
    total_score: int


class SessionSummaryResp(BaseModel):
    session_id: str
    questions_answered: int
    average_score: int
    scores: List[float]
    tier: str
    title: str
    message: str
    completed: bool


class HealthResp(BaseModel):
    status: str
    uptime_seconds: float
    sessions: int
    strategy: str
    counters: dict
    timings: dict


class VersionResp(BaseModel):
    version: str
    api: str


def _error(status_code: int, message: str, details: Optional[str] = None) -> JSONResponse:
    body = {"error": message}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


@app.exception_handler(SessionNotFound)
async def _session_not_found(request: Request, exc: SessionNotFound) -> JSONResponse:
    return _error(404, "Session not found")


@app.exception_handler(QuestionNotFound)
async def _question_not_found(request: Request, exc: QuestionNotFound) -> JSONResponse:
    return _error(404, "Question not found")


@app.exception_handler(ValidationError)
async def _invalid_request(request: Request, exc: ValidationError) -> JSONResponse:
    return _error(400, str(exc))


@app.exception_handler(InternalError)
async def _internal_error(request: Request, exc: InternalError) -> JSONResponse:
    return _error(500, "Failed to evaluate answer", details=str(exc))


@app.options("/{path:path}")
async def preflight(path: str) -> Response:
    return Response(status_code=200)


@app.post("/functions/v1/evaluate-answer")
async def evaluate_answer(request: Request) -> JSONResponse:
    orchestrator: EvaluationOrchestrator = request.app.state.orchestrator
    try:
        try:
            body = EvaluateReq.model_validate(await request.json())
        except PayloadError:
            return _error(400, REQUIRED_FIELDS_MESSAGE)
        eval_req = EvaluationRequest(
            question=body.question or "",
            user_answer=body.userAnswer or "",
            ideal_points=body.idealPoints or [],
            category=body.category or "",
        )
        evaluation = await orchestrator.evaluate(eval_req)
        return JSONResponse(content=evaluation.to_dict())
    except ValidationError as e:
        return _error(400, str(e))
    except Exception as e:
        logger.exception("Error evaluating answer")
        return _error(500, "Failed to evaluate answer", details=str(e))


@app.get("/health", response_model=HealthResp)
async def health(request: Request) -> HealthResp:
    orchestrator: EvaluationOrchestrator = request.app.state.orchestrator
    return HealthResp(
        status="ok",
        uptime_seconds=round(time.time() - request.app.state.start_time, 3),
        sessions=len(request.app.state.sessions),
        strategy=resolve_strategy(orchestrator.config).value,
        counters=dict(orchestrator.telemetry.counters),
        timings=orchestrator.telemetry.summary(),
    )


@app.get("/version", response_model=VersionResp)
async def version() -> VersionResp:
    return VersionResp(version="0.1.0", api="v1")


@app.get("/api/questions", response_model=List[QuestionResp])
async def list_questions(request: Request) -> List[QuestionResp]:
    return [
        QuestionResp(
            id=q.id,
            question=q.question,
            category=q.category,
            difficulty=q.difficulty,
            ideal_answer_points=q.ideal_answer_points,
        )
        for q in request.app.state.questions
    ]


@app.post("/api/sessions", response_model=CreateSessionResp)
async def create_session(request: Request) -> CreateSessionResp:
    session = request.app.state.sessions.create()
    logger.info(f"Started practice session {session.session_id}")
    return CreateSessionResp(session_id=session.session_id, started_at=session.started_at)


@app.post("/api/sessions/{session_id}/responses", response_model=AnswerResp)
async def submit_answer(session_id: str, req: AnswerReq, request: Request) -> AnswerResp:
    store: SessionStore = request.app.state.sessions
    store.get(session_id)
    question = next((q for q in request.app.state.questions if q.id == req.questionId), None)
    if question is None:
        raise QuestionNotFound(req.questionId)

    evaluation = await request.app.state.orchestrator.evaluate(
        EvaluationRequest(
            question=question.question,
            user_answer=req.userAnswer,
            ideal_points=question.ideal_answer_points,
            category=question.category,
        )
    )
    store.record(session_id, question, req.userAnswer, evaluation)
    tier = score_tier(evaluation.score)
    return AnswerResp(
        question_id=question.id,
        score=evaluation.score,
        feedback=evaluation.feedback,
        strengths=list(evaluation.strengths),
        improvements=list(evaluation.improvements),
        tier=tier.value,
        headline=tier.headline,
        total_score=store.get(session_id).total_score,
    )


def _summary_resp(session) -> SessionSummaryResp:
    s = summarize(session)
    return SessionSummaryResp(
        session_id=s.session_id,
        questions_answered=s.questions_answered,
        average_score=s.average_score,
        scores=s.scores,
        tier=s.tier.value,
        title=s.title,
        message=s.message,
        completed=s.completed,
    )


@app.post("/api/sessions/{session_id}/complete", response_model=SessionSummaryResp)
async def complete_session(session_id: str, request: Request) -> SessionSummaryResp:
    return _summary_resp(request.app.state.sessions.complete(session_id))


@app.get("/api/sessions/{session_id}", response_model=SessionSummaryResp)
async def get_session_summary(session_id: str, request: Request) -> SessionSummaryResp:
    return _summary_resp(request.app.state.sessions.get(session_id))


@app.get("/api/export/{session_id}")
async def export_session(session_id: str, request: Request):
    return session_to_dict(request.app.state.sessions.get(session_id))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
