from ruleexplain.orchestrator.models import (
    Found,
    NotFound,
    PollResult,
    StatusEvent,
    SubmissionStatus,
    TransientError,
)
from ruleexplain.orchestrator.orchestrator import RequestOrchestrator

__all__ = [
    "Found",
    "NotFound",
    "PollResult",
    "RequestOrchestrator",
    "StatusEvent",
    "SubmissionStatus",
    "TransientError",
]
