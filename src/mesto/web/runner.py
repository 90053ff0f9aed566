"""Uvicorn server runner with custom log formats."""

import copy

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from mesto.app import App
from mesto.config import Config
from mesto.web.server import create_fastapi_app


def run_server(app: App, config: Config) -> None:
    fastapi_app = create_fastapi_app(app, config)

    # Deep copy, the formatter dicts inside uvicorn's default are shared
    log_config = copy.deepcopy(LOGGING_CONFIG)
    log_config["formatters"]["access"]["fmt"] = '%(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s'
    log_config["formatters"]["default"]["fmt"] = "%(asctime)s - %(levelname)s - %(message)s"

    uvicorn.run(fastapi_app, host=config.host, port=config.port, log_config=log_config, access_log=True)
