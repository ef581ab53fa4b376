"""
Application version information.

Version format: MAJOR.MINOR
- MAJOR: Breaking changes (0 for MVP/beta)
- MINOR: Incremented with each merged PR

Version is displayed on server startup and in GET /health.
"""

__version__ = "0.1"
