"""Session feature: service layer, schemas, and API router."""

from .router import create_session_router
from .schemas import (
    AnswerResult,
    ChoicesPayload,
    ExplainerPayload,
    GradePayload,
    ProgressPayload,
    SolutionPayload,
    SpotPayload,
    SpotResponse,
    StepPayload,
    SummaryPayload,
)
from .service import SessionConfig, SessionManager

__all__ = [
    "AnswerResult",
    "ChoicesPayload",
    "ExplainerPayload",
    "GradePayload",
    "ProgressPayload",
    "SessionConfig",
    "SessionManager",
    "SolutionPayload",
    "SpotPayload",
    "SpotResponse",
    "StepPayload",
    "SummaryPayload",
    "create_session_router",
]
