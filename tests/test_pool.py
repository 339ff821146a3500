import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from patternkit.pool import Client, Connection, ConnectionPool, PoolExhaustedError


def test_new_pool_starts_with_initial_connections():
    pool = ConnectionPool(max_connections=4, initial_connections=2)
    assert pool.available == 2
    assert pool.in_use == 0


def test_acquire_up_to_limit_then_exhausted():
    pool = ConnectionPool(max_connections=4, initial_connections=2)
    taken = [pool.acquire() for _ in range(pool.max_connections)]
    assert len({conn.id for conn in taken}) == pool.max_connections
    assert pool.in_use == pool.max_connections
    with pytest.raises(PoolExhaustedError):
        pool.acquire()


def test_release_returns_same_connection():
    pool = ConnectionPool(max_connections=1, initial_connections=1)
    first = pool.acquire()
    first.connect()
    pool.release(first)
    assert first.connected is False
    assert pool.available == 1
    assert pool.acquire() is first


def test_release_unknown_connection_rejected():
    pool = ConnectionPool()
    with pytest.raises(ValueError):
        pool.release(Connection(99))


def test_invalid_sizes_rejected():
    with pytest.raises(ValueError):
        ConnectionPool(max_connections=1, initial_connections=2)


def test_instance_is_shared():
    assert ConnectionPool.instance() is ConnectionPool.instance()
    assert Client().pool is ConnectionPool.instance()


def test_client_connects_and_releases():
    pool = ConnectionPool(max_connections=2, initial_connections=0)
    client = Client(pool)
    connection = client.perform_operation()
    assert connection.connected is True
    assert pool.in_use == 1
    client.release(connection)
    assert connection.connected is False
    assert pool.in_use == 0


def test_client_raises_when_pool_exhausted():
    pool = ConnectionPool(max_connections=1, initial_connections=0)
    client = Client(pool)
    client.perform_operation()
    with pytest.raises(PoolExhaustedError):
        client.perform_operation()


def test_concurrent_acquire_respects_limit():
    pool = ConnectionPool(max_connections=4, initial_connections=2)
    barrier = threading.Barrier(8)

    def grab():
        barrier.wait()
        try:
            return pool.acquire()
        except PoolExhaustedError:
            return None

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda _: grab(), range(8)))
    got = [conn for conn in results if conn is not None]
    assert len(got) == pool.max_connections
    assert len({id(conn) for conn in got}) == pool.max_connections