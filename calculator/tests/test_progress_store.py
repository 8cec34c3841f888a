"""
Tests for calculator/progress_store.py.
"""

from datetime import datetime, timedelta, timezone

import pytest

from calculator.progress_store import InMemoryProgressStore


class FakeClock:
    def __init__(self):
        self.now = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return InMemoryProgressStore(max_age=timedelta(days=7), clock=clock)


def test_put_then_get_returns_data_step_and_age(store, clock):
    store.put("abc", {"targetCountry": "Canada"}, step=1)
    clock.advance(hours=2)

    saved = store.get("abc")

    assert saved.data == {"targetCountry": "Canada"}
    assert saved.step == 1
    assert saved.age == timedelta(hours=2)


def test_get_unknown_session_returns_none(store):
    assert store.get("missing") is None


def test_put_overwrites_previous_progress(store):
    store.put("abc", {"age": 30}, step=0)
    store.put("abc", {"age": 30, "educationLevel": "phd"}, step=2)

    assert store.get("abc").step == 2


def test_progress_expires_after_max_age(store, clock):
    store.put("abc", {"age": 30}, step=0)

    clock.advance(days=6, hours=23)
    assert store.get("abc") is not None

    clock.advance(hours=1)
    assert store.get("abc") is None


def test_clear(store):
    store.put("abc", {}, step=3)

    assert store.clear("abc") is True
    assert store.get("abc") is None
    assert store.clear("abc") is False


def test_stored_data_is_copied(store):
    data = {"age": 30}
    store.put("abc", data, step=0)
    data["age"] = 99

    assert store.get("abc").data == {"age": 30}


def test_step_out_of_range_rejected(store):
    with pytest.raises(ValueError):
        store.put("abc", {}, step=4)


def test_nested_data_is_copied_on_put_and_get(store):
    data = {"otherLanguages": ["Hindi"]}
    store.put("abc", data, step=2)
    data["otherLanguages"].append("French")

    restored = store.get("abc")
    restored.data["otherLanguages"].append("German")

    assert store.get("abc").data == {"otherLanguages": ["Hindi"]}


def test_put_evicts_expired_sessions(store, clock):
    for i in range(1000):
        store.put(f"old-{i}", {"age": 30}, step=0)
    clock.advance(days=30)

    store.put("fresh", {}, step=0)

    assert len(store) == 1
    assert store.get("fresh") is not None


def test_put_keeps_sessions_within_max_age(store, clock):
    store.put("recent", {}, step=1)
    clock.advance(days=3)

    store.put("fresh", {}, step=0)

    assert len(store) == 2
