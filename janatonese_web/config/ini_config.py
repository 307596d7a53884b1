########## ini_config.py

import os
import shlex
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

INI_DEFAULT_NAME = "janatonese_web.ini"
DEFAULT_LOOKUP_COMMAND = "where" if os.name == "nt" else "which"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class AppSettings:
    frontend_root: Path
    output_dir: Path

    tool_name: str
    build_args: tuple[str, ...]
    lookup_command: str
    probe_timeout_seconds: int
    build_timeout_seconds: int      # 0 = wait forever

    project_mount: str
    wait_for_ready: bool

    flask_host: str
    flask_port: int
    flask_debug: bool

    log_level: str


def parse_port(raw: Optional[str]) -> Optional[int]:
    """Returns None for anything that is not a usable TCP port."""
    raw = (raw or "").strip()
    if not (raw.isascii() and raw.isdigit()):
        return None
    port = int(raw)
    return port if 0 < port < 65536 else None


class IniConfig:
    """
    Adapter around ConfigParser and filesystem resolution.
    Keeps INI handling out of the service code. Every key has a default,
    so a missing default INI just means "use the defaults".
    """

    def __init__(self, ini_path: Path, required: bool = True):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok and required:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @staticmethod
    def from_env_or_default() -> "IniConfig":
        ini_raw = (os.getenv("APP_INI") or "").strip()
        if ini_raw:
            return IniConfig(Path(ini_raw))
        # If APP_INI is not set, default to repo-root-relative ini location
        return IniConfig(Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME, required=False)

    @property
    def base_dir(self) -> Path:
        return self._ini_path.resolve().parent

    def _cfg_path(self, section: str, key: str, default: str, base: Path) -> Path:
        """
        Reads a filesystem path from INI and resolves it.
        Relative paths are taken relative to `base`.
        """
        raw = (self._cfg.get(section, key, fallback="") or "").strip() or default
        p = Path(os.path.expandvars(os.path.expanduser(raw)))
        if not p.is_absolute():
            p = base / p
        return p.resolve()

    def _cfg_str(self, section: str, key: str, default: str) -> str:
        return (self._cfg.get(section, key, fallback=default) or "").strip() or default

    def load_settings(self) -> AppSettings:
        # Paths
        frontend_root = self._cfg_path("paths", "frontend_root", "janatonese", self.base_dir)
        output_dir = self._cfg_path("paths", "output_dir", "build/web", frontend_root)

        # Toolchain
        tool_name = self._cfg_str("toolchain", "tool_name", "flutter")
        build_args = tuple(shlex.split(self._cfg.get("toolchain", "build_args", fallback="build web")))
        lookup_command = self._cfg_str("toolchain", "lookup_command", DEFAULT_LOOKUP_COMMAND)
        probe_timeout_seconds = max(0, self._cfg.getint("toolchain", "probe_timeout_seconds", fallback=10))
        build_timeout_seconds = max(0, self._cfg.getint("toolchain", "build_timeout_seconds", fallback=900))

        # Serving
        project_mount = "/" + self._cfg_str("serving", "project_mount", "/janatonese").strip("/")
        wait_for_ready = self._cfg.getboolean("serving", "wait_for_ready", fallback=False)

        # Flask; PORT env var wins over the INI when it parses
        flask_host = self._cfg_str("flask", "host", "0.0.0.0")
        ini_port = parse_port(self._cfg.get("flask", "port", fallback="")) or DEFAULT_PORT
        flask_port = parse_port(os.getenv("PORT")) or ini_port
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=False)

        log_level = self._cfg_str("logging", "level", "INFO").upper()

        return AppSettings(
            frontend_root=frontend_root,
            output_dir=output_dir,
            tool_name=tool_name,
            build_args=build_args,
            lookup_command=lookup_command,
            probe_timeout_seconds=probe_timeout_seconds,
            build_timeout_seconds=build_timeout_seconds,
            project_mount=project_mount,
            wait_for_ready=wait_for_ready,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
            log_level=log_level,
        )
