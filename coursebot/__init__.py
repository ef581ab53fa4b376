"""LINE course catalog bot."""
from coursebot.version import __version__

__all__ = ["__version__"]
