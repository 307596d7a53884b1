import logging
import subprocess
from dataclasses import dataclass

from janatonese_web.config.ini_config import DEFAULT_LOOKUP_COMMAND

logger = logging.getLogger(__name__)


class ToolchainProber:
    """Strategy interface."""
    def probe(self) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class PathLookupProber(ToolchainProber):
    """
    Asks the platform's executable lookup (`which` / `where`) whether
    tool_name is on PATH. Never raises: anything but exit status 0 means
    "not available".
    """
    tool_name: str
    lookup_command: str = DEFAULT_LOOKUP_COMMAND
    timeout_seconds: int = 10

    def probe(self) -> bool:
        cmd = [self.lookup_command, self.tool_name]
        try:
            proc = subprocess.run(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout_seconds or None,
            )
        except subprocess.TimeoutExpired:
            logger.warning("Lookup for %s timed out after %ss", self.tool_name, self.timeout_seconds)
            return False
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            logger.warning("Could not run %r: %s", cmd, e)
            return False

        if proc.returncode != 0:
            logger.debug("%r exited with %s", cmd, proc.returncode)
        return proc.returncode == 0
