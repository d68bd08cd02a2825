"""Browser-based web UI for py-term.

This package provides a Flask application that exposes the shell
through a web browser.  It is an **optional** extra — install with::

    pip install py-term[web]

The ``create_app`` factory in ``app.py`` boots a site image, creates a
shell, and serves four endpoints:

- ``GET /`` — HTML terminal page.
- ``POST /api/execute`` — run a command line and return JSON.
- ``POST /api/history`` — recall a history entry for an arrow key.
- ``GET /api/status`` — current directory and history size.
"""
