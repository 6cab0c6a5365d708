"""Server and CLI entry points for the growth rate service."""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from growthrates import create_app
from growthrates.logging_utils import log

DEFAULT_LOG_DIR = "instance"


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Build the app with the built-in growth rates and serve it.

    Also configures logging to a rotating file and the console.
    """
    _configure_logging()
    app = create_app()
    log.info(event="server_start", host=host, port=port, growth_rates=len(app.extensions["growth_rates"]))
    try:
        print(f"[INFO] Starting growth rate server on {host}:{port}")
        app.run(host=host, port=port, debug=debug)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)


def _configure_logging(log_dir: str = DEFAULT_LOG_DIR):
    """Configure logging to both console and a rotating file at ``log_dir/growth.log``.

    Safe to call repeatedly; existing root handlers are replaced.
    """
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError:
        log.warn(event="log_dir_unavailable", path=log_dir)
        return
    log_path = os.path.join(log_dir, "growth.log")
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(formatter)

    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(file_handler)
    root.addHandler(console)
