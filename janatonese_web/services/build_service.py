from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from janatonese_web.domain.models import BuildOutcome
from janatonese_web.repositories.output_repository import OutputRepository

logger = logging.getLogger(__name__)


@dataclass
class BuildService:
    """
    Service layer: runs the external front-end build once and maps its
    exit status to a BuildOutcome. The tool's stdout/stderr go straight to
    ours so build logs show up live in the server output.
    """
    tool_name: str
    build_args: tuple[str, ...]
    frontend_root: Path
    timeout_seconds: int
    output_repo: OutputRepository

    def command(self) -> list[str]:
        return [self.tool_name, *self.build_args]

    def build(self) -> BuildOutcome:
        try:
            self.output_repo.ensure_exists()
        except OSError as e:
            logger.error("Could not create output directory %s: %s", self.output_repo.output_dir, e)
            return BuildOutcome.failed(None, f"Could not create output directory: {e}")

        cmd = self.command()
        logger.info("Running: %r (cwd=%s)", cmd, self.frontend_root)

        try:
            proc = subprocess.run(
                cmd,
                cwd=str(self.frontend_root),
                timeout=self.timeout_seconds or None,
            )
        except subprocess.TimeoutExpired:
            # subprocess.run kills the child before re-raising
            logger.error("Build timed out after %ss; child process terminated.", self.timeout_seconds)
            return BuildOutcome.failed(None, f"Build timed out after {self.timeout_seconds}s.")
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            logger.error("Failed to execute %r: %s", cmd, e)
            return BuildOutcome.failed(None, f"Failed to execute: {e}")

        if proc.returncode == 0:
            logger.info("%s web app built successfully!", self.tool_name.capitalize())
            return BuildOutcome.succeeded()

        logger.error("Failed to build %s web app (exit code %s).", self.tool_name.capitalize(), proc.returncode)
        return BuildOutcome.failed(proc.returncode, f"Build exited with code {proc.returncode}.")
