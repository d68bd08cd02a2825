"""Flask application factory for the py-term web UI.

The ``create_app`` function boots a site image, creates a shell, and
returns a Flask app.  One app instance is one terminal session: the
shell, its navigator, and its history live as long as the app does.
"""

from __future__ import annotations

import os
from pathlib import Path

from flask import Flask, Response, jsonify, render_template, request

from py_term.bootloader import Bootloader
from py_term.history import Direction

_HTTP_BAD_REQUEST = 400

# Environment variable naming a site image for the ``py-term-web`` entry point.
IMAGE_ENV_VAR = "PY_TERM_IMAGE"


def create_app(image_path: Path | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        image_path: Optional JSON site image; the bundled default is
            used when omitted.

    Returns:
        A configured Flask application ready to serve.

    Raises:
        BootError: If the image cannot be loaded.

    """
    bootloader = Bootloader(image_path=image_path)
    shell = bootloader.boot()

    boot_log = "\n".join(bootloader.boot_log)
    motd = bootloader.image.motd if bootloader.image is not None else ""

    app = Flask(__name__)

    @app.route("/")
    def index() -> str:  # pyright: ignore[reportUnusedFunction]
        """Render the terminal HTML page."""
        return render_template("index.html", boot_log=boot_log, motd=motd, prompt=shell.prompt())

    @app.route("/api/execute", methods=["POST"])
    def execute() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run a command line and return its result as JSON.

        Expects JSON body: ``{"command": "..."}``

        Returns:
            JSON with ``output``, ``title``, ``url``, ``clear``,
            ``halted`` and the next ``prompt``.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get("command"), str):
            return jsonify({"error": "Missing 'command' field"}), _HTTP_BAD_REQUEST

        result = shell.execute(data["command"])
        return jsonify(
            {
                "output": result.output,
                "title": result.title,
                "url": result.url,
                "clear": result.clear,
                "halted": result.halted,
                "prompt": shell.prompt(),
            }
        )

    @app.route("/api/history", methods=["POST"])
    def history() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Recall a history entry for an arrow key.

        Expects JSON body: ``{"direction": "up" | "down"}``

        Returns:
            JSON with ``command`` (empty string on the blank line).

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or data.get("direction") not in [d.value for d in Direction]:
            return jsonify({"error": "'direction' must be 'up' or 'down'"}), _HTTP_BAD_REQUEST

        command = shell.recall(data["direction"])
        return jsonify({"command": command if command is not None else ""})

    @app.route("/api/status")
    def status() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the current directory and history size."""
        return jsonify({"cwd": shell.navigator.pwd(), "history": len(shell.history)})

    return app


def main() -> None:
    """Run the web UI development server.

    This is the ``py-term-web`` console entry point.  Set
    ``PY_TERM_IMAGE`` to serve a custom site image.
    """
    image = os.environ.get(IMAGE_ENV_VAR)
    app = create_app(Path(image) if image else None)
    # One Shell serves every request; keep the dev server single-threaded.
    app.run(debug=True, port=8080, threaded=False)
