"""
Top‑level package for the Resource Console API.

The HTTP service lives under ``resource_console_api.app``; a small
``requests`` based client used by the console front end is available
as ``resource_console_api.client``.
"""

__all__ = []
