from __future__ import annotations

import logging
import threading
import time
from typing import Optional

from janatonese_web.domain.models import BuildOutcome, OrchestrationResult, OrchestrationState
from janatonese_web.services.build_service import BuildService
from janatonese_web.services.fallback_page import FallbackService
from janatonese_web.services.toolchain_prober import ToolchainProber

logger = logging.getLogger(__name__)


class StartupOrchestrator:
    """
    Runs the probe -> build-or-fallback cycle once per process.

        init -> probing -> building -> ready
                        -> building -> falling_back -> ready
                        -> falling_back -> ready

    Errors raised by a collaborator end the cycle on the fallback path.
    The HTTP listener does not wait for this; see `is_ready` for callers
    that want to.
    """

    def __init__(self, prober: ToolchainProber, build_service: BuildService, fallback_service: FallbackService):
        self.prober = prober
        self.build_service = build_service
        self.fallback_service = fallback_service

        self._lock = threading.Lock()
        self._ready = threading.Event()
        self._state = OrchestrationState.INIT
        self._claimed = False
        self._result: Optional[OrchestrationResult] = None

    @property
    def state(self) -> OrchestrationState:
        with self._lock:
            return self._state

    @property
    def is_ready(self) -> bool:
        return self._ready.is_set()

    @property
    def result(self) -> Optional[OrchestrationResult]:
        return self._result

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        return self._ready.wait(timeout)

    def _set_state(self, state: OrchestrationState) -> None:
        with self._lock:
            self._state = state
        logger.debug("Orchestration state -> %s", state.value)

    def start_in_background(self) -> threading.Thread:
        t = threading.Thread(target=self.run, name="startup-orchestrator", daemon=True)
        t.start()
        return t

    def run(self) -> Optional[OrchestrationResult]:
        with self._lock:
            already_claimed = self._claimed
            self._claimed = True

        if already_claimed:
            self._ready.wait()
            return self._result

        try:
            self._result = self._run_cycle()
        finally:
            self._set_state(OrchestrationState.READY)
            self._ready.set()
        return self._result

    def _run_cycle(self) -> OrchestrationResult:
        tool = self.build_service.tool_name
        started = time.monotonic()

        self._set_state(OrchestrationState.PROBING)
        try:
            tool_available = self.prober.probe()
        except Exception:
            logger.exception("Probing for %s failed; treating it as unavailable.", tool)
            tool_available = False

        if tool_available:
            logger.info("%s is available. Building %s web app...", tool.capitalize(), tool.capitalize())
            self._set_state(OrchestrationState.BUILDING)
            try:
                outcome = self.build_service.build()
            except Exception as e:
                logger.exception("Build of %s web app raised.", tool)
                outcome = BuildOutcome.failed(None, f"Build raised: {e}")
        else:
            logger.info("%s is not available.", tool.capitalize())
            outcome = BuildOutcome.skipped()

        fallback_written = False
        if outcome.needs_fallback:
            if outcome.reason:
                logger.info("Build %s: %s", outcome.status.value, outcome.reason)
            logger.info("Serving placeholder app...")
            self._set_state(OrchestrationState.FALLING_BACK)
            try:
                fallback_written = self.fallback_service.write_fallback()
            except Exception:
                logger.exception("Writing the placeholder app raised.")

        return OrchestrationResult(
            tool_available=tool_available,
            outcome=outcome,
            fallback_written=fallback_written,
            duration_seconds=round(time.monotonic() - started, 3),
        )
