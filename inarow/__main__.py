"""Main entry point for the inarow CLI."""

from .cli import run

if __name__ == "__main__":
    run()
