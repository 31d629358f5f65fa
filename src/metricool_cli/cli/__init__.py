"""CLI package - modular, feature-based, stateless architecture.

This package provides a clean separation of concerns:
- core/: Shared utilities (types, validators, parsers, console, session)
- brands/: Brand listing
- best_time/: Best time to post per platform
- scheduled/: Scheduled-post listing
- schedule/: Post scheduling

Usage:
    metricool --help
    metricool brands
    metricool best-time linkedin
    metricool scheduled --start 2026-01-30 --end 2026-02-05
    metricool schedule '{"platforms": ["linkedin"], "text": "Hi", "datetime": "2026-01-30T10:00:00"}'
"""

from .app import app, main

__all__ = ["app", "main"]
