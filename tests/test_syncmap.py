from dataclasses import dataclass

import pytest

from ekit.syncmap import SyncMap


@dataclass(eq=False)
class User:
    name: str = ""


def test_load():
    found = User("found")
    empty = User()
    m = SyncMap()
    m.store("found", found)
    m.store("found but empty", empty)
    m.store("found but nil", None)

    val, ok = m.load("found")
    assert ok is True and val is found
    val, ok = m.load("found but empty")
    assert ok is True and val is empty
    assert m.load("found but nil") == (None, True)
    assert m.load("not found") == (None, False)


def test_load_or_store_non_none():
    m, user = SyncMap(), User("Tom")
    val, loaded = m.load_or_store(user.name, user)
    assert loaded is False
    assert val is user

    val, loaded = m.load_or_store("Tom", User("Tom-copy"))
    assert loaded is True
    assert val is user


def test_load_or_store_none():
    m, user = SyncMap(), User("Jerry")
    assert m.load_or_store(user.name, None) == (None, False)
    assert m.load_or_store(user.name, user) == (None, True)


def test_load_or_store_func_non_none():
    m, user = SyncMap(), User("Tom")
    val, loaded = m.load_or_store_func(user.name, lambda: user)
    assert loaded is False
    assert val is user

    calls = []

    def build():
        calls.append(1)
        return User("Tom")

    val, loaded = m.load_or_store_func(user.name, build)
    assert loaded is True
    assert val is user
    assert calls == []


def test_load_or_store_func_none():
    m = SyncMap()
    assert m.load_or_store_func("Tom", lambda: None) == (None, False)
    assert m.load_or_store_func("Tom", lambda: None) == (None, True)


def test_load_or_store_func_error():
    m = SyncMap()

    def fail():
        raise RuntimeError("init failed")

    with pytest.raises(RuntimeError, match="init failed"):
        m.load_or_store_func("Jerry", fail)
    assert m.load("Jerry") == (None, False)


def test_load_or_store_func_example():
    m = SyncMap()
    _, loaded = m.load_or_store_func("Tom", lambda: User("Tom"))
    assert loaded is False
    _, loaded = m.load_or_store_func("Tom", lambda: User("Tom-copy"))
    assert loaded is True
    _, loaded = m.load_or_store_func("Jerry", lambda: None)
    assert loaded is False
    assert m.load_or_store_func("Jerry", lambda: User("Jerry")) == (None, True)


def test_load_and_delete_non_none():
    m, user = SyncMap(), User("Jerry")
    m.store("Jerry", user)
    val, loaded = m.load_and_delete(user.name)
    assert loaded is True
    assert val is user
    assert m.load_and_delete(user.name) == (None, False)


def test_load_and_delete_none():
    m = SyncMap()
    m.store("Tom", None)
    assert m.load_and_delete("Tom") == (None, True)
    assert m.load_and_delete("Tom") == (None, False)


def test_delete():
    m, user = SyncMap(), User("Tom")
    m.store(user.name, user)
    val, ok = m.load(user.name)
    assert ok is True and val is user
    m.delete(user.name)
    assert m.load(user.name) == (None, False)


def test_range_string_keys():
    m, tom, jerry = SyncMap(), User("Tom"), User("Jerry")
    m.store(tom.name, tom)
    m.store(jerry.name, jerry)
    m.store("nil", None)
    shadow = {}

    def collect(key, val):
        shadow[key] = val
        return True

    m.range(collect)
    assert shadow["Tom"] is tom
    assert shadow["Jerry"] is jerry
    assert "nil" in shadow and shadow["nil"] is None
    assert len(shadow) == 3


def test_range_object_keys():
    m, tom = SyncMap(), User("Tom")
    m.store(tom, "Tom")
    m.store(None, "nil")
    shadow = {}

    def collect(key, val):
        shadow[key] = val
        return True

    m.range(collect)
    assert shadow[tom] == "Tom"
    assert shadow[None] == "nil"


def test_range_sum_example():
    m = SyncMap()
    m.store("Tom", 18)
    m.store("Jerry", 35)
    total = []
    m.range(lambda key, val: total.append(val) is None)
    assert sum(total) == 53


def test_range_stops_when_false():
    m = SyncMap()
    for i in range(5):
        m.store(i, i * 10)
    seen = []

    def first_only(key, val):
        seen.append((key, val))
        return False

    m.range(first_only)
    assert len(seen) == 1
    key, val = seen[0]
    assert val == key * 10
    assert m.load(key) == (val, True)