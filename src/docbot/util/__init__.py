"""
Shared utilities for docbot.

- **logger.py**: Console and session-file logging used by every module.
"""
