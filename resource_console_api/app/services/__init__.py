"""
Service layer abstraction.

The store encapsulates all record keeping.  API handlers only talk to
``ResourceStore`` so the in‑memory maps could be replaced by a
database without touching the routers.
"""
