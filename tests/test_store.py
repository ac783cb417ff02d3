import threading

from user_directory_api.app.core.store import UserStore, get_store, init_store
from user_directory_api.app.models.user import User


def make_user(username="alice", first_name="Alice", last_name="Liddell", active=True, id=None):
    return User(
        username=username,
        email=f"{username}@example.com",
        first_name=first_name,
        last_name=last_name,
        active=active,
        id=id,
    )


def test_seed_users():
    store = UserStore()
    users = store.list()
    assert [u.username for u in users] == ["johndoe", "janedoe", "bobsmith"]
    assert [u.id for u in users] == [1, 2, 3]
    assert all(u.active for u in users)
    assert users[0].email == "john.doe@example.com"


def test_unseeded_store_is_empty():
    store = UserStore(seed=False)
    assert store.list() == []
    assert store.count() == 0


def test_create_assigns_next_id_and_forces_active():
    store = UserStore()
    created = store.create(make_user(active=False, id=42))
    assert created.id == 4
    assert created.active is True
    assert store.count() == 4
    assert store.get(4).username == "alice"


def test_ids_strictly_increase_and_are_not_reused():
    store = UserStore()
    first = store.create(make_user("alice"))
    assert store.delete(first.id)
    second = store.create(make_user("carol"))
    third = store.create(make_user("dave"))
    assert first.id < second.id < third.id
    assert store.get(first.id) is None


def test_get_missing_returns_none():
    store = UserStore()
    assert store.get(999) is None


def test_get_by_username_is_exact_and_case_sensitive():
    store = UserStore()
    user = store.get_by_username("johndoe")
    assert user.id == 1
    assert user.first_name == "John"
    assert store.get_by_username("JohnDoe") is None
    assert store.get_by_username("john") is None


def test_update_replaces_fields_but_keeps_id():
    store = UserStore()
    updated = store.update(
        1,
        User("johndoe_updated", "john.updated@example.com", "John", "Doe Updated", active=False, id=77),
    )
    assert updated.id == 1
    assert updated.username == "johndoe_updated"
    assert updated.email == "john.updated@example.com"
    assert updated.last_name == "Doe Updated"
    assert updated.active is False
    assert store.get(1).last_name == "Doe Updated"
    assert store.get(77) is None


def test_update_missing_returns_none_and_creates_nothing():
    store = UserStore()
    assert store.update(999, make_user()) is None
    assert store.count() == 3
    assert store.get(999) is None


def test_delete():
    store = UserStore()
    assert store.delete(1) is True
    assert store.count() == 2
    assert store.get(1) is None
    assert store.delete(1) is False


def test_delete_missing_leaves_count_unchanged():
    store = UserStore()
    assert store.delete(999) is False
    assert store.count() == 3


def test_deactivate():
    store = UserStore()
    user = store.deactivate(1)
    assert user.active is False
    assert store.active_count() == 2
    assert store.get(1).active is False
    assert [u.id for u in store.list_active()] == [2, 3]


def test_deactivate_is_idempotent():
    store = UserStore()
    store.deactivate(2)
    again = store.deactivate(2)
    assert again.active is False
    assert store.active_count() == 2


def test_deactivate_missing_returns_none():
    store = UserStore()
    assert store.deactivate(999) is None
    assert store.active_count() == 3


def test_search_by_last_name_keeps_insertion_order():
    store = UserStore()
    results = store.search_by_name("Doe")
    assert [u.username for u in results] == ["johndoe", "janedoe"]


def test_search_is_case_insensitive_and_matches_first_name():
    store = UserStore()
    assert [u.username for u in store.search_by_name("john")] == ["johndoe"]
    assert [u.username for u in store.search_by_name("SMI")] == ["bobsmith"]


def test_search_without_match_returns_empty_list():
    store = UserStore()
    assert store.search_by_name("Nonexistent") == []


def test_search_with_empty_term_matches_everyone():
    store = UserStore()
    assert len(store.search_by_name("")) == 3


def test_counts_add_up():
    store = UserStore()
    store.create(make_user())
    store.deactivate(2)
    store.deactivate(4)
    inactive = sum(1 for u in store.list() if not u.active)
    assert store.count() == 4
    assert store.active_count() == 2
    assert store.count() == store.active_count() + inactive


def test_returned_records_do_not_alias_storage():
    store = UserStore()
    user = store.get(1)
    user.username = "mallory"
    user.active = False
    listed = store.list()
    listed[1].first_name = "Changed"
    assert store.get(1).username == "johndoe"
    assert store.get(1).active is True
    assert store.get(2).first_name == "Jane"


def test_create_does_not_keep_reference_to_candidate():
    store = UserStore()
    candidate = make_user()
    created = store.create(candidate)
    candidate.username = "changed"
    assert store.get(created.id).username == "alice"
    assert candidate.id is None


def test_full_name():
    store = UserStore()
    assert store.get(3).full_name == "Bob Smith"


def test_init_store_replaces_process_store():
    get_store().create(make_user())
    assert get_store().count() == 4
    store = init_store(seed=False)
    assert get_store() is store
    assert store.count() == 0


def test_stats_returns_total_and_active():
    store = UserStore()
    store.deactivate(1)
    assert store.stats() == (3, 2)


def run_in_threads(target, count):
    start = threading.Barrier(count)

    def worker(index):
        start.wait()
        target(index)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def test_concurrent_creates_get_unique_ids():
    store = UserStore(seed=False)
    created = []

    def create_many(index):
        ids = [store.create(make_user(f"user{index}_{n}")).id for n in range(500)]
        created.extend(ids)

    run_in_threads(create_many, 8)
    assert len(created) == 4000
    assert len(set(created)) == 4000
    assert sorted(created) == list(range(1, 4001))
    assert store.count() == 4000
    assert store.create(make_user()).id == 4001


def test_concurrent_deactivations_keep_counts_consistent():
    store = UserStore(seed=False)
    for n in range(800):
        store.create(make_user(f"user{n}"))
    observed = []

    def deactivate_slice(index):
        for user_id in range(index + 1, 801, 8):
            store.deactivate(user_id)
            total, active = store.stats()
            observed.append((total, active))

    run_in_threads(deactivate_slice, 8)
    assert store.active_count() == 0
    assert all(total == 800 and 0 <= active < 800 for total, active in observed)
    assert all(not user.active for user in store.list())
