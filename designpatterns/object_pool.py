"""Pools that hand out and take back reusable objects."""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass

_PREFILLED_CONNECTIONS = 2


class PoolTimeoutError(TimeoutError):
    """No connection could be acquired in time."""


@dataclass
class DBConnection:
    """A database connection."""

    id: int

    def query(self) -> str:
        return f"Querying database with connection ID: {self.id}"


class DBConnectionPool:
    """A bounded pool of database connections, created on demand.

    Two connections are created up front; more are created when an
    acquire waits longer than its timeout.
    """

    def __init__(self, max_size: int, creation_delay: float = 0.5) -> None:
        if max_size < _PREFILLED_CONNECTIONS:
            raise ValueError(
                f"pool size must be at least {_PREFILLED_CONNECTIONS}, got {max_size}"
            )
        self.max_size = max_size
        self.creation_delay = creation_delay
        self._pool: queue.Queue[DBConnection] = queue.Queue(maxsize=max_size)
        self._lock = threading.Lock()
        self._next_id = 1
        for _ in range(_PREFILLED_CONNECTIONS):
            self._pool.put_nowait(self._create_connection())

    def _create_connection(self) -> DBConnection:
        with self._lock:
            print(f"Creating new DB connection with ID: {self._next_id}")
            time.sleep(self.creation_delay)
            conn = DBConnection(self._next_id)
            self._next_id += 1
            return conn

    def acquire(self, timeout: float) -> DBConnection:
        """Take a connection, waiting up to ``timeout`` seconds before creating one."""
        try:
            return self._pool.get(timeout=timeout)
        except queue.Empty:
            if self._pool.qsize() < self.max_size:
                return self._create_connection()
            raise PoolTimeoutError("timeout while acquiring DB connection") from None

    def release(self, conn: DBConnection) -> None:
        """Return a connection; it is dropped if the pool is full."""
        try:
            self._pool.put_nowait(conn)
        except queue.Full:
            print(f"DB connection pool is full, closing connection with ID: {conn.id}")


@dataclass
class PooledObject:
    """An object held in an :class:`ObjectPool`."""

    id: int


class ObjectPool:
    """A fixed pool of objects numbered from zero; acquire waits for a free one."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"pool size must be positive, got {size}")
        self._objects: queue.Queue[PooledObject] = queue.Queue(maxsize=size)
        for object_id in range(size):
            self._objects.put_nowait(PooledObject(object_id))

    def acquire(self) -> PooledObject:
        """Take an object, blocking until one is available."""
        return self._objects.get()

    def release(self, obj: PooledObject) -> None:
        """Return an object, blocking while the pool is full."""
        self._objects.put(obj)