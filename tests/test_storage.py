from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

import pytest

from resource_console_api.app.core.resources import ResourceKind
from resource_console_api.app.schemas.comment import CommentCreate
from resource_console_api.app.schemas.post import PostCreate
from resource_console_api.app.schemas.product import ProductCreate
from resource_console_api.app.schemas.user import UserCreate
from resource_console_api.app.services.seed import SAMPLE_RECORDS, seed_store
from resource_console_api.app.services.storage import DuplicateUsernameError, ResourceStore


def _user(username="alice", **overrides):
    data = dict(name="Alice", email="alice@example.com", username=username, password="secret1")
    data.update(overrides)
    return UserCreate(**data)


def _post(title="Hello", body="World", user_id=1):
    return PostCreate(title=title, body=body, user_id=user_id)


def test_create_assigns_id_and_timestamp(store):
    record = store.create(ResourceKind.USERS, _user())
    assert record.id == 1
    assert isinstance(record.created_at, datetime)
    assert record.created_at.tzinfo is not None
    assert store.get(ResourceKind.USERS, 1) == record


def test_create_then_get_returns_input_fields(store):
    payload = CommentCreate(name="Bob", email="bob@example.com", body="Nice", post_id=7)
    record = store.create(ResourceKind.COMMENTS, payload)
    fetched = store.get(ResourceKind.COMMENTS, record.id)
    assert fetched.model_dump(exclude={"id", "created_at"}) == payload.model_dump()


def test_get_missing_returns_none(store):
    assert store.get(ResourceKind.POSTS, 99) is None


def test_counters_are_per_kind(store):
    store.create(ResourceKind.POSTS, _post())
    store.create(ResourceKind.POSTS, _post())
    user = store.create(ResourceKind.USERS, _user())
    assert user.id == 1


def test_ids_are_not_reused_after_delete(store):
    first = store.create(ResourceKind.POSTS, _post())
    assert store.delete(ResourceKind.POSTS, first.id) is True
    second = store.create(ResourceKind.POSTS, _post())
    assert second.id > first.id


def test_delete_twice(store):
    record = store.create(ResourceKind.POSTS, _post())
    assert store.delete(ResourceKind.POSTS, record.id) is True
    assert store.delete(ResourceKind.POSTS, record.id) is False


def test_list_preserves_insertion_order(store):
    titles = ["one", "two", "three"]
    for title in titles:
        store.create(ResourceKind.POSTS, _post(title=title))
    assert [p.title for p in store.list(ResourceKind.POSTS)] == titles


def test_update_merges_partial_fields(store):
    record = store.create(ResourceKind.POSTS, _post(title="Old", body="Body"))
    updated = store.update(ResourceKind.POSTS, record.id, {"title": "New"})
    assert updated.title == "New"
    assert updated.body == "Body"
    assert store.get(ResourceKind.POSTS, record.id).title == "New"


def test_update_cannot_change_id_or_created_at(store):
    record = store.create(ResourceKind.POSTS, _post())
    updated = store.update(
        ResourceKind.POSTS, record.id, {"id": 50, "created_at": datetime(2000, 1, 1), "body": "x"}
    )
    assert updated.id == record.id
    assert updated.created_at == record.created_at
    assert store.get(ResourceKind.POSTS, 50) is None


def test_update_missing_returns_none(store):
    assert store.update(ResourceKind.USERS, 12, {"name": "Nobody"}) is None


def test_product_price_is_stored_as_float(store):
    payload = ProductCreate(name="Mug", price="19.99", description="Ceramic mug", category="kitchen")
    record = store.create(ResourceKind.PRODUCTS, payload)
    assert record.price == 19.99
    assert isinstance(record.price, float)


def test_duplicate_username_is_rejected(store):
    store.create(ResourceKind.USERS, _user(username="alice"))
    with pytest.raises(DuplicateUsernameError):
        store.create(ResourceKind.USERS, _user(username="alice", email="other@example.com"))
    assert len(store.list(ResourceKind.USERS)) == 1


def test_update_to_taken_username_is_rejected(store):
    store.create(ResourceKind.USERS, _user(username="alice"))
    bob = store.create(ResourceKind.USERS, _user(username="bob"))
    with pytest.raises(DuplicateUsernameError):
        store.update(ResourceKind.USERS, bob.id, {"username": "alice"})
    # Keeping one's own username is not a conflict.
    assert store.update(ResourceKind.USERS, bob.id, {"username": "bob"}).username == "bob"


class TestSearch:
    @pytest.fixture(autouse=True)
    def records(self, store):
        store.create(ResourceKind.USERS, _user(username="alice", name="Alice Liddell"))
        store.create(ResourceKind.USERS, _user(username="bob", name="Bob", email="bob@example.com"))
        store.create(ResourceKind.PRODUCTS, ProductCreate(
            name="Laptop", price=999, description="Fast machine", category="Electronics",
        ))

    def test_empty_term_matches_everything(self, store):
        assert len(store.search(ResourceKind.USERS, "")) == 2

    def test_match_is_case_insensitive(self, store):
        results = store.search(ResourceKind.USERS, "ALICE")
        assert [u.username for u in results] == ["alice"]

    def test_matches_any_search_field(self, store):
        assert len(store.search(ResourceKind.PRODUCTS, "electronics")) == 1
        assert len(store.search(ResourceKind.PRODUCTS, "fast")) == 1

    def test_non_search_fields_are_ignored(self, store):
        # Passwords are not searchable.
        assert store.search(ResourceKind.USERS, "secret1") == []

    def test_no_match_returns_empty_list(self, store):
        assert store.search(ResourceKind.PRODUCTS, "tractor") == []


def test_reset_clears_records_and_counters(store):
    store.create(ResourceKind.POSTS, _post())
    store.reset()
    assert store.list(ResourceKind.POSTS) == []
    assert store.create(ResourceKind.POSTS, _post()).id == 1


def test_concurrent_creates_get_unique_ids(store):
    with ThreadPoolExecutor(max_workers=8) as pool:
        records = list(pool.map(lambda i: store.create(ResourceKind.POSTS, _post(title=str(i))), range(200)))
    assert sorted(r.id for r in records) == list(range(1, 201))


def test_seed_store_loads_sample_records():
    store = ResourceStore()
    seed_store(store)
    total = sum(len(store.list(kind)) for kind in ResourceKind)
    assert total == len(SAMPLE_RECORDS)
    assert [u.username for u in store.list(ResourceKind.USERS)] == ["johndoe", "janesmith"]
    assert store.get(ResourceKind.PRODUCTS, 2).price == 1299.99
