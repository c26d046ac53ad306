"""Entry point for running ubix as a module.

This allows running the application with:
    python -m ubix COMMAND [OPTIONS]
"""

from ubix.cli import app

if __name__ == "__main__":
    app()
