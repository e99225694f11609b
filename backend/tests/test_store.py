"""
Tests for the in-memory UserStore: seeding, lookups, id sequencing and the
duplicate-email guard (including under concurrent registration).
"""

import threading

import pytest

from identity.errors import ConflictError
from models.user import UserRecord
from store import DEMO_USERS, UserStore


class TestSeeding:
    def test_demo_store_has_two_users(self):
        store = UserStore.with_demo_users()
        assert len(store) == 2
        assert store.find_by_id("1").email == "john@example.com"
        assert store.find_by_id("2").email == "jane@example.com"

    def test_empty_store(self):
        store = UserStore()
        assert len(store) == 0
        assert store.find_by_email("john@example.com") is None

    def test_stores_do_not_share_records(self):
        a = UserStore.with_demo_users()
        b = UserStore.with_demo_users()
        a.add("Ann", "ann@example.com", "pw")
        assert len(a) == 3
        assert len(b) == 2
        assert len(DEMO_USERS) == 2


class TestLookups:
    def setup_method(self):
        self.store = UserStore.with_demo_users()

    def test_find_by_email(self):
        user = self.store.find_by_email("jane@example.com")
        assert user is not None
        assert user.id == "2"
        assert user.name == "Jane Smith"

    def test_email_match_is_case_sensitive(self):
        assert self.store.find_by_email("JOHN@example.com") is None

    def test_find_by_id(self):
        assert self.store.find_by_id("1").email == "john@example.com"
        assert self.store.find_by_id("99") is None


class TestAdd:
    def setup_method(self):
        self.store = UserStore.with_demo_users()

    def test_ids_are_sequential(self):
        first = self.store.add("Ann", "ann@example.com", "pw")
        second = self.store.add("Bob", "bob@example.com", "pw")
        assert (first.id, second.id) == ("3", "4")

    def test_added_record_is_findable(self):
        self.store.add("Ann", "ann@example.com", "pw")
        assert self.store.find_by_email("ann@example.com") == UserRecord(
            id="3", name="Ann", email="ann@example.com", password="pw",
        )

    def test_duplicate_email_rejected(self):
        with pytest.raises(ConflictError):
            self.store.add("Someone Else", "john@example.com", "other")
        assert len(self.store) == 2

    def test_concurrent_same_email_only_one_wins(self):
        results = []
        barrier = threading.Barrier(8)

        def worker(i):
            barrier.wait()
            try:
                self.store.add(f"User {i}", "race@example.com", "pw")
                results.append("ok")
            except ConflictError:
                results.append("conflict")

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count("ok") == 1
        assert results.count("conflict") == 7
        assert len(self.store) == 3
