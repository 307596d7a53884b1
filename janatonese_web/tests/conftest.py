from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from janatonese_web.config.ini_config import AppSettings


@pytest.fixture
def frontend_root(tmp_path: Path) -> Path:
    root = tmp_path / "janatonese"
    root.mkdir()
    (root / "pubspec.yaml").write_text("name: janatonese\n", encoding="utf-8")
    return root


@pytest.fixture
def make_settings(frontend_root: Path):
    def _make(**overrides) -> AppSettings:
        values = dict(
            frontend_root=frontend_root,
            output_dir=frontend_root / "build" / "web",
            tool_name="flutter",
            build_args=("build", "web"),
            lookup_command="which",
            probe_timeout_seconds=10,
            build_timeout_seconds=60,
            project_mount="/janatonese",
            wait_for_ready=False,
            flask_host="127.0.0.1",
            flask_port=3000,
            flask_debug=False,
            log_level="INFO",
        )
        values.update(overrides)
        return AppSettings(**values)

    return _make


@pytest.fixture
def install_tool(tmp_path: Path, monkeypatch):
    """
    Writes an executable shell script named `name` into a fresh bin dir
    and puts that dir first on PATH.
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", str(bin_dir) + os.pathsep + os.environ.get("PATH", ""))

    def _install(name: str, body: str) -> Path:
        script = bin_dir / name
        script.write_text("#!/bin/sh\n" + body, encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _install
