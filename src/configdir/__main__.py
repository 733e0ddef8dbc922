"""Entry point for running configdir as a module: python -m configdir"""

from configdir.cli import app

if __name__ == "__main__":
    app()
