import pytest

from designpatterns.object_pool import (
    DBConnection,
    DBConnectionPool,
    ObjectPool,
    PooledObject,
)


def test_db_connection_pool(capsys):
    pool = DBConnectionPool(3, creation_delay=0)

    conn1 = pool.acquire(0.05)
    assert conn1.id == 1
    conn2 = pool.acquire(0.05)
    assert conn2.id == 2
    conn3 = pool.acquire(0.05)
    assert conn3.id == 3
    conn4 = pool.acquire(0.05)
    assert conn4.id == 4

    for conn in (conn1, conn2, conn3, conn4):
        pool.release(conn)

    out = capsys.readouterr().out
    assert out == (
        "Creating new DB connection with ID: 1\n"
        "Creating new DB connection with ID: 2\n"
        "Creating new DB connection with ID: 3\n"
        "Creating new DB connection with ID: 4\n"
        "DB connection pool is full, closing connection with ID: 4\n"
    )


def test_released_connection_is_reused():
    pool = DBConnectionPool(2, creation_delay=0)
    conn = pool.acquire(0.05)
    pool.release(conn)
    assert pool.acquire(0.05).id == 2
    assert pool.acquire(0.05) is conn


def test_db_connection_query():
    assert DBConnection(7).query() == "Querying database with connection ID: 7"


def test_db_connection_pool_too_small():
    with pytest.raises(ValueError):
        DBConnectionPool(1, creation_delay=0)


def test_object_pool():
    pool = ObjectPool(3)
    obj1 = pool.acquire()
    assert obj1.id == 0
    obj2 = pool.acquire()
    assert obj2.id == 1
    obj3 = pool.acquire()
    assert obj3.id == 2


def test_object_pool_release_returns_object():
    pool = ObjectPool(2)
    first = pool.acquire()
    second = pool.acquire()
    pool.release(second)
    assert pool.acquire() is second
    pool.release(first)
    assert pool.acquire() == PooledObject(0)


def test_object_pool_invalid_size():
    with pytest.raises(ValueError):
        ObjectPool(0)