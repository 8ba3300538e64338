# interactive_de/__main__.py
"""Entry point for `python -m interactive_de`."""

from interactive_de.cli import app

if __name__ == "__main__":
    app()
