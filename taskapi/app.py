"""Application assembly, routing and the server entry point."""

from __future__ import annotations

import argparse
import logging

from flask import Blueprint, Flask

from taskapi.config import TEST_MODE, Config
from taskapi.handlers import TaskHandler
from taskapi.middleware import install_cors, install_error_handler, install_logger
from taskapi.repository import InMemoryTaskRepository
from taskapi.services import TaskService

log = logging.getLogger("taskapi")


def setup_routes(app: Flask, handler: TaskHandler) -> None:
    """Register the /api/v1/tasks endpoints."""
    tasks = Blueprint("tasks", __name__, url_prefix="/api/v1/tasks")
    tasks.add_url_rule("", "create_task", handler.create_task, methods=["POST"])
    tasks.add_url_rule("", "get_all_tasks", handler.get_all_tasks, methods=["GET"])
    tasks.add_url_rule(
        "/<task_id>", "get_task_by_id", handler.get_task_by_id, methods=["GET"]
    )
    app.register_blueprint(tasks)


def create_app(config: Config | None = None) -> Flask:
    """Build the Flask application with storage, middleware and routes."""
    if config is None:
        config = Config.load()

    app = Flask(__name__)
    app.config["TESTING"] = config.mode == TEST_MODE
    app.config["TASKAPI_CONFIG"] = config
    app.json.sort_keys = False

    handler = TaskHandler(TaskService(InMemoryTaskRepository()))

    install_cors(app)
    install_error_handler(app)
    install_logger(app)
    setup_routes(app, handler)
    return app


def main(argv: list[str] | None = None) -> int:
    """Start the API server on the configured port."""
    parser = argparse.ArgumentParser(
        prog="taskapi", description="Run the task management API server."
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    config = Config.load()
    app = create_app(config)
    log.info("Starting server on port %s", config.port)
    try:
        app.run(host="0.0.0.0", port=int(config.port))
    except (OSError, ValueError) as exc:
        log.critical("Failed to start server: %s", exc)
        return 1
    return 0