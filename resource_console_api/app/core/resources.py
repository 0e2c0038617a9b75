"""
Catalogue of resource kinds.

``ResourceKind`` is the closed set of record types the console
manages.  ``RESOURCES`` maps each kind to everything the rest of the
application needs to know about it: its schemas, the fields scanned
by search and the labels shown in the console navigation.  Routers,
the store and the search endpoint all look kinds up here instead of
branching on resource names.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Type

from pydantic import BaseModel

from ..schemas.comment import CommentCreate, CommentRead, CommentUpdate
from ..schemas.post import PostCreate, PostRead, PostUpdate
from ..schemas.product import ProductCreate, ProductRead, ProductUpdate
from ..schemas.user import UserCreate, UserRead, UserUpdate


class ResourceKind(str, Enum):
    USERS = "users"
    POSTS = "posts"
    COMMENTS = "comments"
    PRODUCTS = "products"


@dataclass(frozen=True)
class ResourceSpec:
    kind: ResourceKind
    # Singular display name, used in messages such as "Post not found".
    singular: str
    label: str
    icon: str
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    read_schema: Type[BaseModel]
    search_fields: Tuple[str, ...]


RESOURCES: Dict[ResourceKind, ResourceSpec] = {
    ResourceKind.USERS: ResourceSpec(
        kind=ResourceKind.USERS,
        singular="User",
        label="Users",
        icon="person",
        create_schema=UserCreate,
        update_schema=UserUpdate,
        read_schema=UserRead,
        search_fields=("name", "email", "username"),
    ),
    ResourceKind.POSTS: ResourceSpec(
        kind=ResourceKind.POSTS,
        singular="Post",
        label="Posts",
        icon="article",
        create_schema=PostCreate,
        update_schema=PostUpdate,
        read_schema=PostRead,
        search_fields=("title", "body"),
    ),
    ResourceKind.COMMENTS: ResourceSpec(
        kind=ResourceKind.COMMENTS,
        singular="Comment",
        label="Comments",
        icon="chat",
        create_schema=CommentCreate,
        update_schema=CommentUpdate,
        read_schema=CommentRead,
        search_fields=("name", "email", "body"),
    ),
    ResourceKind.PRODUCTS: ResourceSpec(
        kind=ResourceKind.PRODUCTS,
        singular="Product",
        label="Products",
        icon="shopping_bag",
        create_schema=ProductCreate,
        update_schema=ProductUpdate,
        read_schema=ProductRead,
        search_fields=("name", "description", "category"),
    ),
}
