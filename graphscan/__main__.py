"""
Entry point for running graphscan as a module.

Usage: python -m graphscan [args]
"""

from graphscan.cli import app

if __name__ == "__main__":
    app()
