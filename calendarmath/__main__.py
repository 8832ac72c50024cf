"""
Convenience entry point for running calendarmath as a module.

Usage: python -m calendarmath [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app()
