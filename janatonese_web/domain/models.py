######## models.py
########

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BuildStatus(str, Enum):
    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class OrchestrationState(str, Enum):
    INIT = "init"
    PROBING = "probing"
    BUILDING = "building"
    FALLING_BACK = "falling_back"
    READY = "ready"


@dataclass(frozen=True)
class BuildOutcome:
    status: BuildStatus
    exit_code: Optional[int] = None     # None when the tool never ran to completion
    reason: str = ""

    @classmethod
    def skipped(cls) -> "BuildOutcome":
        return cls(status=BuildStatus.SKIPPED, reason="build tool not available")

    @classmethod
    def succeeded(cls) -> "BuildOutcome":
        return cls(status=BuildStatus.SUCCEEDED, exit_code=0)

    @classmethod
    def failed(cls, exit_code: Optional[int], reason: str = "") -> "BuildOutcome":
        return cls(status=BuildStatus.FAILED, exit_code=exit_code, reason=reason)

    @property
    def needs_fallback(self) -> bool:
        return self.status is not BuildStatus.SUCCEEDED


@dataclass(frozen=True)
class OrchestrationResult:
    tool_available: bool
    outcome: BuildOutcome
    fallback_written: bool
    duration_seconds: float


@dataclass(frozen=True)
class FallbackContent:
    title: str
    heading: str
    subtitle: str
    description: tuple[str, ...]
    features_heading: str
    features: tuple[str, ...]
    footer: str
