"""Command that prepares the web directory and serves the application."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from imgdenoise.web import create_app

logger = logging.getLogger(__name__)

DEFAULT_PORT = "8080"


def prepare_directories(web_dir) -> None:
    """Create the templates and uploads directories under web_dir."""
    root = Path(web_dir)
    (root / "templates").mkdir(parents=True, exist_ok=True)
    (root / "static" / "uploads").mkdir(parents=True, exist_ok=True)


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Serve the image denoising application.")
    parser.add_argument(
        "--web-dir", default="web", help="directory holding templates and static files"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Start the server on the port named by PORT (8080 by default)."""
    logging.basicConfig(level=logging.INFO)
    args = _parse_args(argv)

    try:
        prepare_directories(args.web_dir)
    except OSError as exc:
        logger.error("Failed to create directories: %s", exc)
        return 1

    port_text = os.environ.get("PORT") or DEFAULT_PORT
    try:
        port = int(port_text)
    except ValueError:
        logger.error("Invalid port: %s", port_text)
        return 1

    app = create_app(args.web_dir)
    logger.info("Server started on http://localhost:%s", port)
    try:
        app.run(host="0.0.0.0", port=port)
    except OSError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())