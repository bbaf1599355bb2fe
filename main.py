import asyncio
from typing import List, Optional

from utils.config import load_config
from utils.logging import setup_logging, get_logger
from models import EvaluationRequest, PracticeSession, score_tier
from agents.orchestrator_agent import EvaluationOrchestrator
from parsers import load_questions
from dotenv import load_dotenv, find_dotenv
from tools.export import save_session_json, summarize

load_dotenv(find_dotenv(), override=False)


logger = get_logger(__name__)


async def run_practice(
    answers: Optional[List[str]] = None,
    orchestrator: Optional[EvaluationOrchestrator] = None,
    questions_path: Optional[str] = None,
    verbose: bool = True,
) -> PracticeSession:
    """Ask every question once and evaluate each answer.

    With ``answers`` given, they are consumed in order instead of reading stdin.
    """
    cfg = load_config()
    orchestrator = orchestrator or EvaluationOrchestrator(cfg)
    questions = load_questions(questions_path or cfg.questions_path)
    scripted = list(answers) if answers is not None else None
    session = PracticeSession.new()

    if verbose:
        print("Starting interview practice. Commands: /skip to skip a question, /quit to end.")
    for idx, question in enumerate(questions, start=1):
        if verbose:
            print(f"\n[{idx}/{len(questions)} | {question.category} | {question.difficulty}]\nQ: {question.question}")
        if scripted is not None:
            if not scripted:
                break
            answer = scripted.pop(0)
        else:
            try:
                answer = input("Your answer: ")
            except (KeyboardInterrupt, EOFError):
                break

        cmd = answer.strip().lower()
        if cmd in {"/quit", "quit"}:
            break
        if cmd in {"/skip", "skip", "/next", "next"}:
            continue
        if not answer.strip():
            if verbose:
                print("Please provide an answer before submitting.")
            continue

        try:
            evaluation = await orchestrator.evaluate(
                EvaluationRequest(
                    question=question.question,
                    user_answer=answer,
                    ideal_points=question.ideal_answer_points,
                    category=question.category,
                )
            )
        except Exception:
            logger.exception("Error evaluating answer")
            if verbose:
                print("Failed to evaluate answer. Please try again.")
            continue

        session.record_response(question.id, answer, evaluation)
        if verbose:
            tier = score_tier(evaluation.score)
            print(f"{tier.headline} ({evaluation.score}/10)")
            print(evaluation.feedback)
            for s in evaluation.strengths:
                print(f"  + {s}")
            for i in evaluation.improvements:
                print(f"  -> {i}")

    session.finalize()
    return session


async def run_cli() -> None:
    cfg = load_config()
    setup_logging(cfg.log_level)
    session = await run_practice()

    summary = summarize(session)
    print("\nSession complete. Summary:")
    if summary.questions_answered:
        print(f"{summary.title} {summary.message}")
        print(f"Average score: {summary.average_score}/10 across {summary.questions_answered} questions")
        print("Individual scores: " + ", ".join(str(s) for s in summary.scores))
    else:
        print("No evaluations recorded.")
    try:
        save_session_json(session, "session_transcript.json")
        print("Saved transcript to session_transcript.json")
    except OSError as e:
        logger.warning(f"Could not save transcript: {e}")


def main():
    try:
        asyncio.run(run_cli())
    except KeyboardInterrupt:
        print("\nSession ended.")


if __name__ == "__main__":
    main()
