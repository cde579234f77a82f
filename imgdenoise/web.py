"""HTTP application: upload images, view them and run denoising on them."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path

from flask import Flask, jsonify, render_template, request

from imgdenoise.images import load_image, save_image
from imgdenoise.processor import ImageProcessor

logger = logging.getLogger(__name__)

PCA_MAX_COMPONENTS = 50
NMF_MAX_ITERATIONS = 200
STATIC_URL = "/static"
UPLOADS_URL = STATIC_URL + "/uploads/"
METHODS = ("pca", "nmf")
MIN_FACTORS = 1
MAX_FACTORS = 100


class _BadRequest(ValueError):
    """Raised when an analysis request does not pass validation."""


def _is_http_error(exc: Exception) -> bool:
    """Tell whether exc is an HTTP error that carries its own response."""
    return isinstance(getattr(exc, "code", None), int) and callable(
        getattr(exc, "get_response", None)
    )


def _extension(filename: str) -> str:
    """Return the suffix from the last dot of the final path element, dot included."""
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _parse_analyze_request(payload) -> tuple[str, str, int]:
    if not isinstance(payload, dict):
        raise _BadRequest("request body must be a JSON object")

    image_id = payload.get("image_id")
    if image_id is None:
        image_id = ""
    if not isinstance(image_id, str):
        raise _BadRequest("field 'image_id' must be a string")

    method = payload.get("method")
    if not isinstance(method, str) and method is not None:
        raise _BadRequest("field 'method' must be a string")
    if not method:
        raise _BadRequest("field 'method' is required")
    if method not in METHODS:
        raise _BadRequest(f"field 'method' must be one of: {' '.join(METHODS)}")

    n_factors = payload.get("n_factors")
    if n_factors is not None and (isinstance(n_factors, bool) or not isinstance(n_factors, int)):
        raise _BadRequest("field 'n_factors' must be an integer")
    if not n_factors:
        raise _BadRequest("field 'n_factors' is required")
    if not MIN_FACTORS <= n_factors <= MAX_FACTORS:
        raise _BadRequest(
            f"field 'n_factors' must be between {MIN_FACTORS} and {MAX_FACTORS}"
        )
    return image_id, method, n_factors


def create_app(web_dir="web") -> Flask:
    """Build the application serving templates and static files from web_dir."""
    root = Path(web_dir).resolve()
    uploads_dir = root / "static" / "uploads"
    processor = ImageProcessor(PCA_MAX_COMPONENTS, NMF_MAX_ITERATIONS)

    app = Flask(
        __name__,
        static_folder=str(root / "static"),
        static_url_path=STATIC_URL,
        template_folder=str(root / "templates"),
    )

    @app.get("/")
    def home():
        return render_template("index.html")

    @app.post("/upload")
    def upload():
        file = request.files.get("image")
        if file is None:
            return jsonify(error="no file provided in field 'image'"), 400

        new_filename = f"{time.time_ns()}{_extension(file.filename or '')}"
        target = uploads_dir / new_filename
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            file.save(target)
        except OSError as exc:
            return jsonify(error=str(exc)), 500

        return jsonify(id=new_filename, image=UPLOADS_URL + new_filename), 200

    @app.get("/results/<image_id>")
    def results(image_id: str):
        if not os.path.exists(os.path.join(uploads_dir, image_id)):
            return render_template("error.html", error="Image not found"), 404
        return render_template(
            "results.html", id=image_id, image=UPLOADS_URL + image_id
        )

    @app.post("/analyze")
    def analyze():
        try:
            image_id, method, n_factors = _parse_analyze_request(
                request.get_json(silent=True)
            )
        except _BadRequest as exc:
            return jsonify(error="Invalid request parameters", details=str(exc)), 400

        try:
            image = load_image(os.path.join(uploads_dir, image_id))
        except (OSError, ValueError) as exc:
            return jsonify(error="Failed to load image", details=str(exc)), 500

        width, height = image.size
        if width <= 0 or height <= 0:
            return jsonify(error="Empty image provided"), 400

        try:
            result = processor.process_image(method, image, n_factors)
        except ValueError as exc:
            return jsonify(error="Image processing failed", details=str(exc)), 400

        result_filename = f"processed_{method}_{n_factors}_{image_id}"
        try:
            save_image(os.path.join(uploads_dir, result_filename), result)
        except (OSError, ValueError) as exc:
            return jsonify(error="Failed to save result", details=str(exc)), 500

        return jsonify(
            result=UPLOADS_URL + result_filename, method=method, factors=n_factors
        ), 200

    @app.errorhandler(Exception)
    def recover(exc: Exception):
        if _is_http_error(exc):
            return exc
        logger.error("Panic occurred: %s", exc)
        return jsonify(error="Internal server error", details=str(exc)), 500

    return app