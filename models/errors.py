from __future__ import annotations


class EvaluationError(Exception):
    pass


class ValidationError(EvaluationError):
    """The request is missing a question or an answer."""


class UpstreamUnavailable(EvaluationError):
    """The AI service is unconfigured, unreachable, or returned something unusable."""


class InternalError(EvaluationError):
    pass


class SessionNotFound(LookupError):
    pass


class QuestionNotFound(LookupError):
    pass
