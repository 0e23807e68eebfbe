"""SauceFinder: reverse image search with canonical source resolution."""

from .__version__ import __version__

__all__ = ["__version__"]
