import logging

from janatonese_web.app_factory import ORCHESTRATOR_EXTENSION, create_app
from janatonese_web.config.ini_config import IniConfig
from janatonese_web.logging_setup import setup_logging

logger = logging.getLogger("janatonese_web")


def main() -> None:
    settings = IniConfig.from_env_or_default().load_settings()
    setup_logging(settings.log_level)

    app = create_app(settings)

    # Runs next to the listener, not before it: early requests may see an
    # empty or half-written build/web unless [serving] wait_for_ready is on.
    app.extensions[ORCHESTRATOR_EXTENSION].start_in_background()

    logger.info("Server running at http://%s:%s/", app.config["HOST"], app.config["PORT"])
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"], use_reloader=False)


if __name__ == "__main__":
    main()

#############################
#
# Key design patterns used
# •	Application Factory: create_app() builds the app and wires dependencies.
# •	Dependency Injection (manual): collaborators are passed into services and the blueprint.
# •	Service Layer: BuildService, FallbackService and StartupOrchestrator hold the startup logic.
# •	Repository: OutputRepository owns build/web (creation, index.html, static file lookup).
# •	Strategy: ToolchainProber lets the "is flutter installed?" check be swapped in tests.
######################################################################
# Startup flow
# •	main() loads AppSettings (INI + PORT), configures logging, builds the app.
# •	StartupOrchestrator.run() starts on a daemon thread:
#    probe (which flutter) -> flutter build web -> placeholder index.html if needed.
# •	app.run() binds immediately; every path that is not a file gets index.html.
