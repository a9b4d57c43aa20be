"""
CineCache Package Main Entry Point

Run the CLI with ``python -m cinecache``.
"""

from cinecache.cli.typer_app import app

if __name__ == "__main__":
    app()
