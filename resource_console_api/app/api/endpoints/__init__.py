"""
Endpoint modules.

``resources`` builds one CRUD router per resource kind, ``search``
holds the cross-kind search route and ``info`` the health check and
resource catalogue.  They are aggregated in ``api/router.py``.
"""
