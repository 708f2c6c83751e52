"""
Emergency Response Simulation - application launcher.

Loads settings, configures logging, builds the simulation and plays it on the
terminal. The game takes no command-line arguments; behaviour is tuned
through environment variables or a ``.env`` file.
"""

import sys

from .config import configure_logging, get_logger, get_settings, log_error
from .core.dependencies import build_simulation_runner
from .core.exceptions import EmergencyResponseError

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def main() -> int:
    """
    Run one simulation.

    Returns:
        Process exit code
    """
    settings = get_settings()
    configure_logging(settings)
    logger = get_logger("app.main")

    logger.info("Starting application", app_name=settings.app_name, version=settings.app_version)

    try:
        result = build_simulation_runner(settings).run()
    except KeyboardInterrupt:
        logger.warning("Simulation interrupted by user")
        return EXIT_INTERRUPTED
    except EmergencyResponseError as e:
        log_error(e, {"stage": "simulation"})
        return EXIT_FAILURE

    logger.info("Application finished", final_score=result.final_score, rounds=len(result.rounds))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
