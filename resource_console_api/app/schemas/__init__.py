"""
Pydantic schema definitions for API payloads.

Each resource kind defines three models: ``<Kind>Create`` (the
insertable shape, every field required), ``<Kind>Update`` (the same
fields, all optional, used for partial updates) and ``<Kind>Read``
(the stored record including ``id`` and ``createdAt``).  Field names
are snake_case in Python and camelCase on the wire.
"""
