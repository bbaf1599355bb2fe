from __future__ import annotations

from typing import Dict

from models import Evaluation, PracticeResponse, PracticeSession, Question, SessionNotFound


class SessionStore:
    """Process-local practice sessions, keyed by session id."""

    def __init__(self) -> None:
        self._sessions: Dict[str, PracticeSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> PracticeSession:
        session = PracticeSession.new()
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> PracticeSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    def record(self, session_id: str, question: Question, user_answer: str, evaluation: Evaluation) -> PracticeResponse:
        return self.get(session_id).record_response(question.id, user_answer, evaluation)

    def complete(self, session_id: str) -> PracticeSession:
        session = self.get(session_id)
        session.finalize()
        return session
