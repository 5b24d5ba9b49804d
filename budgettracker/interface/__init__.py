"""Mini README: Interactive interfaces for the budget tracker.

Exports the FastAPI application factory behind the browser dashboard. The
terminal session lives in the top-level CLI script and shares the same
presentation helpers.
"""

from .web_app import create_application

__all__ = ["create_application"]
