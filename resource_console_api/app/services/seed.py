"""
Sample data loaded at startup when ``SEED_DATA`` is enabled.

Gives a fresh console something to show: two records of each kind.
The posts and comments reference the seeded users and posts by id.
"""

import logging

from ..core.resources import ResourceKind
from ..schemas.comment import CommentCreate
from ..schemas.post import PostCreate
from ..schemas.product import ProductCreate
from ..schemas.user import UserCreate
from .storage import ResourceStore


SAMPLE_RECORDS = [
    (ResourceKind.USERS, UserCreate(
        name="John Doe", email="john@example.com", username="johndoe", password="password123",
    )),
    (ResourceKind.USERS, UserCreate(
        name="Jane Smith", email="jane@example.com", username="janesmith", password="password123",
    )),
    (ResourceKind.POSTS, PostCreate(
        title="First Post", body="This is the content of the first post.", user_id=1,
    )),
    (ResourceKind.POSTS, PostCreate(
        title="Second Post", body="This is the content of the second post.", user_id=2,
    )),
    (ResourceKind.COMMENTS, CommentCreate(
        name="Alice Johnson", email="alice@example.com", body="Great post!", post_id=1,
    )),
    (ResourceKind.COMMENTS, CommentCreate(
        name="Bob Wilson", email="bob@example.com", body="I learned a lot from this, thanks!", post_id=1,
    )),
    (ResourceKind.PRODUCTS, ProductCreate(
        name="Smartphone", price=699.99,
        description="Latest model with high-resolution camera", category="electronics",
    )),
    (ResourceKind.PRODUCTS, ProductCreate(
        name="Laptop", price=1299.99,
        description="Powerful laptop for professionals", category="electronics",
    )),
]


def seed_store(store: ResourceStore) -> None:
    """Insert the sample records into ``store``."""
    for kind, payload in SAMPLE_RECORDS:
        store.create(kind, payload)
    logging.getLogger(__name__).info("Seeded store with %d sample records", len(SAMPLE_RECORDS))
