from __future__ import annotations

from typing import Optional

from flask import Flask

from janatonese_web.config.ini_config import AppSettings, IniConfig
from janatonese_web.repositories.output_repository import OutputRepository
from janatonese_web.services.build_service import BuildService
from janatonese_web.services.fallback_page import FallbackService
from janatonese_web.services.startup_orchestrator import StartupOrchestrator
from janatonese_web.services.toolchain_prober import PathLookupProber
from janatonese_web.web.routes import create_blueprint

ORCHESTRATOR_EXTENSION = "startup_orchestrator"


def build_orchestrator(settings: AppSettings, output_repo: OutputRepository) -> StartupOrchestrator:
    prober = PathLookupProber(
        tool_name=settings.tool_name,
        lookup_command=settings.lookup_command,
        timeout_seconds=settings.probe_timeout_seconds,
    )

    build_service = BuildService(
        tool_name=settings.tool_name,
        build_args=settings.build_args,
        frontend_root=settings.frontend_root,
        timeout_seconds=settings.build_timeout_seconds,
        output_repo=output_repo,
    )

    return StartupOrchestrator(
        prober=prober,
        build_service=build_service,
        fallback_service=FallbackService(output_repo=output_repo),
    )


def create_app(settings: Optional[AppSettings] = None) -> Flask:
    """
    Composition root. The orchestrator is wired but not started; the
    entry point starts it next to the listener.
    """
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()

    output_repo = OutputRepository(output_dir=settings.output_dir)
    orchestrator = build_orchestrator(settings, output_repo)

    # static_folder=None: the catch-all owns every path, /static included
    app = Flask(__name__, static_folder=None)
    app.register_blueprint(
        create_blueprint(
            output_repo,
            orchestrator,
            frontend_root=settings.frontend_root,
            project_mount=settings.project_mount,
            wait_for_ready=settings.wait_for_ready,
        )
    )

    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug
    app.extensions[ORCHESTRATOR_EXTENSION] = orchestrator

    return app
