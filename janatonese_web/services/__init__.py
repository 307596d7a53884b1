from .build_service import BuildService
from .fallback_page import DEFAULT_FALLBACK_CONTENT, FallbackPageRenderer, FallbackService
from .startup_orchestrator import StartupOrchestrator
from .toolchain_prober import PathLookupProber, ToolchainProber

__all__ = [
    "BuildService",
    "DEFAULT_FALLBACK_CONTENT",
    "FallbackPageRenderer",
    "FallbackService",
    "PathLookupProber",
    "StartupOrchestrator",
    "ToolchainProber",
]
