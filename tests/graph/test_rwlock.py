import threading
import time

import pytest

from spgraph import Graph
from spgraph.graph.rwlock import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    inside = threading.Barrier(2, timeout=5)

    def reader():
        with lock.read_locked():
            # Both readers must be inside at the same time to pass.
            inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)
    assert not any(t.is_alive() for t in threads)


def test_writer_waits_for_reader():
    lock = ReadWriteLock()
    events = []
    lock.acquire_read()

    def writer():
        with lock.write_locked():
            events.append("write")

    t = threading.Thread(target=writer)
    t.start()
    time.sleep(0.05)
    events.append("read-done")
    lock.release_read()
    t.join(timeout=5)
    assert events == ["read-done", "write"]


def test_reader_waits_for_writer():
    lock = ReadWriteLock()
    events = []
    lock.acquire_write()

    def reader():
        with lock.read_locked():
            events.append("read")

    t = threading.Thread(target=reader)
    t.start()
    time.sleep(0.05)
    events.append("write-done")
    lock.release_write()
    t.join(timeout=5)
    assert events == ["write-done", "read"]


def test_release_without_acquire():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_lock_released_after_exception():
    lock = ReadWriteLock()
    with pytest.raises(ValueError):
        with lock.write_locked():
            raise ValueError("boom")
    with lock.read_locked():
        pass


def test_concurrent_queries_and_mutations():
    g = Graph()
    for i in range(30):
        g.add_vertex(i)
    for i in range(29):
        g.add_edge(i, i + 1, 1)
    errors = []

    def query():
        try:
            for _ in range(50):
                path = g.shortest_path(0, 29)
                # A mutation is never observed half-applied.
                assert len(path) in (1, 29)
        except Exception as exc:  # pylint: disable=broad-except
            errors.append(exc)

    def mutate():
        try:
            for _ in range(50):
                g.add_symmetric_edge(0, 29, 1, "shortcut")
                g.remove_symmetric_edge(0, 29, "shortcut")
        except Exception as exc:  # pylint: disable=broad-except
            errors.append(exc)

    threads = [threading.Thread(target=query) for _ in range(3)]
    threads.append(threading.Thread(target=mutate))
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)
    assert errors == []
    assert not g.contains_edge(0, 29, "shortcut")
