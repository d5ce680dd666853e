"""
peoplegraph
Demo web server exposing a static list of people over GraphQL
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
