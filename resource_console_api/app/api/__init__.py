"""
API package containing the routers.

``router.py`` exposes a single ``router`` that the application mounts
under ``settings.api_prefix``.
"""
