from .models import BuildOutcome, BuildStatus, FallbackContent, OrchestrationResult, OrchestrationState

__all__ = [
    "BuildOutcome",
    "BuildStatus",
    "FallbackContent",
    "OrchestrationResult",
    "OrchestrationState",
]
