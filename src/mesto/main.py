"""Application entry point for the Mesto backend server."""

import structlog

from mesto.app import App
from mesto.config import Config
from mesto.logging import setup_logging
from mesto.web.runner import run_server

logger = structlog.get_logger(__name__)


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    logger.info("starting_server", host=config.host, port=config.port, debug=config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
