"""Tests for the process-wide session store dependency."""

import threading
import time

import pytest

from loadtracker.api import dependencies
from loadtracker.db.kv_store import InMemoryKeyValueStore


@pytest.fixture
def fresh_store(monkeypatch):
    init_calls = []

    def slow_init_db(bind=None):
        init_calls.append(bind)
        time.sleep(0.2)

    monkeypatch.setattr(dependencies, "_store", None)
    monkeypatch.setattr(dependencies, "init_db", slow_init_db)
    monkeypatch.setattr(dependencies, "DatabaseKeyValueStore", lambda engine: InMemoryKeyValueStore())
    monkeypatch.setattr(dependencies.settings, "SEED_SAMPLE_DATA", True)
    return init_calls


class TestGetSessionStore:
    def test_same_instance_on_repeated_calls(self, fresh_store):
        assert dependencies.get_session_store() is dependencies.get_session_store()
        assert len(fresh_store) == 1

    def test_concurrent_first_use_builds_one_store(self, fresh_store):
        results = []
        barrier = threading.Barrier(2)

        def worker():
            barrier.wait()
            results.append(dependencies.get_session_store())

        threads = [threading.Thread(target=worker) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 2
        assert results[0] is results[1]
        assert len(fresh_store) == 1
        # sample sessions seeded once
        assert len(results[0]) == 6
