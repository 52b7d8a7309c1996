"""Tests for the user store."""
import threading

import pytest

from sentiment.errors import CapacityExceeded, DuplicateUsername, EmptyResult, NotFound
from sentiment.services import SortDirection, UserStore


def test_create_and_find_by_id(users):
    """Created user is found by the returned id."""
    k = users.create_user("alice", "pw")
    assert k == 1
    user = users.find_by_id(k)
    assert user.username == "alice"
    assert user.password == "pw"


def test_ids_are_sequential(users):
    assert [users.create_user(f"u{i}", "pw") for i in range(3)] == [1, 2, 3]


def test_capacity_exceeded_leaves_store_unchanged():
    """The N+1th create fails and nothing changes."""
    store = UserStore(capacity=3)
    for i in range(3):
        store.create_user(f"user{i}", "pw")
    before = store.list_all()
    with pytest.raises(CapacityExceeded):
        store.create_user("extra", "pw")
    assert len(store) == 3
    assert store.list_all() == before
    assert store.next_id == 4


def test_capacity_checked_before_duplicate():
    store = UserStore(capacity=1)
    store.create_user("alice", "pw")
    with pytest.raises(CapacityExceeded):
        store.create_user("alice", "pw")


def test_duplicate_username_rejected(users):
    users.create_user("alice", "pw")
    with pytest.raises(DuplicateUsername):
        users.create_user("alice", "other")
    assert len(users) == 1
    # A refused create does not consume an id
    assert users.create_user("bob", "pw") == 2


def test_username_is_case_sensitive(users):
    users.create_user("alice", "pw")
    assert users.create_user("Alice", "pw") == 2
    assert users.find_by_username("Alice").id == 2


def test_find_by_username_not_found(users):
    users.create_user("alice", "pw")
    with pytest.raises(NotFound):
        users.find_by_username("ALICE")


def test_find_by_id_not_found(users):
    with pytest.raises(NotFound):
        users.find_by_id(1)


def test_delete_then_find(users):
    """Deleted id is gone, other ids unchanged."""
    for name in ("a", "b", "c"):
        users.create_user(name, "pw")
    users.delete_user(2)
    with pytest.raises(NotFound):
        users.find_by_id(2)
    assert [(u.id, u.username) for u in users.list_all()] == [(1, "a"), (3, "c")]
    assert users.find_by_id(3).username == "c"


def test_ids_never_reused(users):
    users.create_user("a", "pw")
    users.delete_user(1)
    assert users.create_user("a", "pw") == 2


def test_deleted_username_can_register_again(users):
    users.create_user("alice", "pw")
    users.delete_user(1)
    users.create_user("alice", "pw")
    assert users.find_by_username("alice").id == 2


def test_delete_missing(users):
    with pytest.raises(NotFound):
        users.delete_user(42)


def test_edit_blank_fields_keep_values(users):
    k = users.create_user("alice", "pw")
    users.edit_user(k, "", "")
    users.edit_user(k, None, "   ")
    user = users.find_by_id(k)
    assert (user.username, user.password) == ("alice", "pw")


def test_edit_partial(users):
    k = users.create_user("alice", "pw")
    users.edit_user(k, password="secret")
    assert users.find_by_id(k).password == "secret"
    users.edit_user(k, username="alicia")
    assert users.find_by_id(k).username == "alicia"
    assert users.find_by_id(k).password == "secret"


def test_edit_does_not_recheck_uniqueness(users):
    users.create_user("alice", "pw")
    bob = users.create_user("bob", "pw")
    users.edit_user(bob, username="alice")
    assert [u.username for u in users.list_all()] == ["alice", "alice"]


def test_strict_edit_rejects_duplicate_username():
    store = UserStore(capacity=10, strict_username_on_edit=True)
    store.create_user("alice", "pw")
    bob = store.create_user("bob", "pw")
    with pytest.raises(DuplicateUsername):
        store.edit_user(bob, username="alice")
    assert store.find_by_id(bob).username == "bob"
    # Keeping your own name is not a collision
    store.edit_user(bob, username="bob", password="new")
    assert store.find_by_id(bob).password == "new"


def test_edit_missing(users):
    with pytest.raises(NotFound):
        users.edit_user(7, "x", "y")


def test_returned_records_are_copies(users):
    k = users.create_user("alice", "pw")
    users.find_by_id(k).username = "mallory"
    users.list_all()[0].password = "hacked"
    user = users.find_by_id(k)
    assert (user.username, user.password) == ("alice", "pw")


def test_search_case_insensitive(users):
    users.create_user("Alice", "pw")
    users.create_user("bob", "pw")
    assert [u.username for u in users.search_by_username("ALI")] == ["Alice"]


def test_search_keeps_storage_order(users):
    for name in ("anna", "bob", "hannah"):
        users.create_user(name, "pw")
    assert [u.username for u in users.search_by_username("AN")] == ["anna", "hannah"]


def test_search_no_match(users):
    users.create_user("alice", "pw")
    with pytest.raises(EmptyResult):
        users.search_by_username("zed")


def test_search_empty_store(users):
    with pytest.raises(EmptyResult):
        users.search_by_username("")


def test_sort_by_id(users):
    for name in ("a", "b", "c"):
        users.create_user(name, "pw")
    users.delete_user(2)
    assert [u.id for u in users.sort_by_id(SortDirection.DESCENDING)] == [3, 1]
    assert [u.id for u in users.sort_by_id("asc")] == [1, 3]
    # Storage order untouched
    assert [u.id for u in users.list_all()] == [1, 3]


def test_concurrent_creates_get_unique_ids():
    """Creates from several threads never share an id or overrun capacity."""
    store = UserStore(capacity=200)
    created, refused = [], []
    start = threading.Barrier(8)

    def worker(n):
        start.wait()
        for i in range(30):
            try:
                created.append(store.create_user(f"t{n}-{i}", "pw"))
            except CapacityExceeded:
                refused.append((n, i))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(created) == 200
    assert len(refused) == 40
    assert sorted(created) == list(range(1, 201))
    assert [u.id for u in store.list_all()] == list(range(1, 201))
    assert store.next_id == 201
