from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest

from janatonese_web.domain.models import BuildStatus
from janatonese_web.repositories.output_repository import OutputRepository
from janatonese_web.services import build_service as build_module
from janatonese_web.services.build_service import BuildService


# -----------------------------
# Test doubles
# -----------------------------
@dataclass
class FakeCompletedProcess:
    returncode: int


class RecordingRun:
    def __init__(self, returncode: int = 0, exc: BaseException | None = None):
        self.returncode = returncode
        self.exc = exc
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        if self.exc is not None:
            raise self.exc
        return FakeCompletedProcess(returncode=self.returncode)


# -----------------------------
# Helpers
# -----------------------------
def make_service(frontend_root: Path, timeout_seconds: int = 60, output_dir: Path | None = None) -> BuildService:
    return BuildService(
        tool_name="flutter",
        build_args=("build", "web"),
        frontend_root=frontend_root,
        timeout_seconds=timeout_seconds,
        output_repo=OutputRepository(output_dir=output_dir or frontend_root / "build" / "web"),
    )


# -----------------------------
# Tests
# -----------------------------
def test_build_succeeds_on_exit_zero(monkeypatch, frontend_root: Path):
    fake = RecordingRun(returncode=0)
    monkeypatch.setattr(build_module.subprocess, "run", fake)
    svc = make_service(frontend_root)

    outcome = svc.build()

    assert outcome.status is BuildStatus.SUCCEEDED
    assert outcome.exit_code == 0
    assert not outcome.needs_fallback
    assert (frontend_root / "build" / "web").is_dir()

    cmd, kwargs = fake.calls[0]
    assert cmd == ["flutter", "build", "web"]
    assert kwargs["cwd"] == str(frontend_root)
    assert kwargs["timeout"] == 60
    # build output is streamed, not captured
    assert "capture_output" not in kwargs
    assert "stdout" not in kwargs
    assert "stderr" not in kwargs


@pytest.mark.parametrize("code", [1, 2, 64, 255, -9])
def test_build_fails_on_nonzero_exit(monkeypatch, frontend_root: Path, code: int):
    monkeypatch.setattr(build_module.subprocess, "run", RecordingRun(returncode=code))

    outcome = make_service(frontend_root).build()

    assert outcome.status is BuildStatus.FAILED
    assert outcome.exit_code == code
    assert outcome.needs_fallback


@pytest.mark.parametrize(
    "exc",
    [
        FileNotFoundError("flutter"),
        PermissionError("flutter"),
        ValueError("embedded null byte"),
        subprocess.SubprocessError("boom"),
    ],
)
def test_spawn_error_is_a_failed_build(monkeypatch, frontend_root: Path, exc: BaseException):
    monkeypatch.setattr(build_module.subprocess, "run", RecordingRun(exc=exc))

    outcome = make_service(frontend_root).build()

    assert outcome.status is BuildStatus.FAILED
    assert outcome.exit_code is None
    assert "Failed to execute" in outcome.reason


def test_timeout_is_a_failed_build(monkeypatch, frontend_root: Path):
    exc = subprocess.TimeoutExpired(cmd=["flutter", "build", "web"], timeout=5)
    monkeypatch.setattr(build_module.subprocess, "run", RecordingRun(exc=exc))

    outcome = make_service(frontend_root, timeout_seconds=5).build()

    assert outcome.status is BuildStatus.FAILED
    assert outcome.exit_code is None
    assert "timed out" in outcome.reason


def test_zero_timeout_waits_forever(monkeypatch, frontend_root: Path):
    fake = RecordingRun(returncode=0)
    monkeypatch.setattr(build_module.subprocess, "run", fake)

    make_service(frontend_root, timeout_seconds=0).build()

    assert fake.calls[0][1]["timeout"] is None


def test_existing_output_dir_is_fine(monkeypatch, frontend_root: Path):
    out = frontend_root / "build" / "web"
    out.mkdir(parents=True)
    (out / "old.js").write_text("old", encoding="utf-8")
    monkeypatch.setattr(build_module.subprocess, "run", RecordingRun(returncode=0))

    outcome = make_service(frontend_root).build()

    assert outcome.status is BuildStatus.SUCCEEDED
    assert (out / "old.js").read_text(encoding="utf-8") == "old"


def test_uncreatable_output_dir_fails_without_spawning(monkeypatch, tmp_path: Path, frontend_root: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    fake = RecordingRun(returncode=0)
    monkeypatch.setattr(build_module.subprocess, "run", fake)

    outcome = make_service(frontend_root, output_dir=blocker / "web").build()

    assert outcome.status is BuildStatus.FAILED
    assert outcome.exit_code is None
    assert fake.calls == []


def test_nul_byte_in_build_args_is_a_failed_build(frontend_root: Path):
    svc = make_service(frontend_root)
    svc.build_args = ("build\x00", "web")

    outcome = svc.build()

    assert outcome.status is BuildStatus.FAILED
    assert outcome.exit_code is None
