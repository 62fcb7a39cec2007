"""
Convenience entry point for running timeperiods as a module.

Usage: python -m timeperiods [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app()
