from __future__ import annotations

import atexit
import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .commands.controller import register as register_commands
from .common.logging_utils import setup_logging
from .container import build_container

logger = logging.getLogger(__name__)


def create_app(*, start_autosave: bool = True) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    data_file = getattr(settings, "DATA_FILE")

    logger.info("Starting Shift Tracker (settings=%s, data=%s)", settings_module, data_file)

    container = build_container(
        data_file=data_file,
        autosave_interval_seconds=float(getattr(settings, "AUTOSAVE_INTERVAL_SECONDS", 300)),
        save_on_mutation=bool(getattr(settings, "SAVE_ON_MUTATION", True)),
        preserve_corrupt=bool(getattr(settings, "PRESERVE_CORRUPT_DATA", False)),
        command_prefix=getattr(settings, "COMMAND_PREFIX", "!"),
    )
    app.extensions["shift_tracker"] = container

    register_commands(app, container)

    if start_autosave:
        container.autosave.start()
        atexit.register(container.autosave.stop)

    return app


def run() -> None:
    """Serve with the built-in server.

    The reloader is off: it would call create_app() in a second process whose
    autosave keeps writing a stale (empty) snapshot over the served data.
    """
    app = create_app()
    app.run(use_reloader=False)


if __name__ == "__main__":
    run()
