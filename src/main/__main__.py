"""
Main module entry point.

This allows running the worker as: python -m src.main
(the API is served with python -m src.main.app)
"""

from .worker import main

if __name__ == "__main__":
    main()
