"""
Main entry point for running the service as a module.
Usage: python -m tennis_league
"""
from .runner import main

if __name__ == "__main__":
    main()
