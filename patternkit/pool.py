"""A bounded, thread-safe pool of database connections."""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class PoolExhaustedError(RuntimeError):
    """Raised when every connection is in use and no more may be created."""


class Connection:
    """A database connection that can be opened and closed."""

    def __init__(self, connection_id: int) -> None:
        self.id = connection_id
        self.connected = False

    def connect(self) -> None:
        logger.info("Database connected with id %s", self.id)
        self.connected = True

    def disconnect(self) -> None:
        logger.info("Database disconnected.")
        self.connected = False

    def __repr__(self) -> str:
        return f"Connection(id={self.id}, connected={self.connected})"


class ConnectionPool:
    """Hands out connections, creating new ones up to ``max_connections``."""

    _instance: ConnectionPool | None = None
    _instance_lock = threading.Lock()

    def __init__(self, max_connections: int = 4, initial_connections: int = 2) -> None:
        if not 0 <= initial_connections <= max_connections:
            raise ValueError("initial_connections must be between 0 and max_connections")
        self.max_connections = max_connections
        self._lock = threading.Lock()
        self._last_id = 0
        self._used: list[Connection] = []
        self._free: list[Connection] = [self._create() for _ in range(initial_connections)]

    @classmethod
    def instance(cls) -> ConnectionPool:
        """Return the shared pool, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def _create(self) -> Connection:
        self._last_id += 1
        return Connection(self._last_id)

    @property
    def available(self) -> int:
        return len(self._free)

    @property
    def in_use(self) -> int:
        return len(self._used)

    def acquire(self) -> Connection:
        """Take a free connection, creating one if the limit allows."""
        with self._lock:
            if not self._free:
                if len(self._used) >= self.max_connections:
                    raise PoolExhaustedError("No free connections available.")
                self._free.append(self._create())
            connection = self._free.pop()
            self._used.append(connection)
            return connection

    def release(self, connection: Connection) -> None:
        """Disconnect ``connection`` and return it to the free connections."""
        with self._lock:
            if not any(used is connection for used in self._used):
                raise ValueError("connection is not checked out from this pool")
            connection.disconnect()
            self._used = [used for used in self._used if used is not connection]
            self._free.append(connection)


class Client:
    """Runs database work using connections from a pool."""

    def __init__(self, pool: ConnectionPool | None = None) -> None:
        self.pool = pool if pool is not None else ConnectionPool.instance()

    def perform_operation(self) -> Connection:
        """Acquire a connection and open it; raises PoolExhaustedError if none is left."""
        connection = self.pool.acquire()
        connection.connect()
        return connection

    def release(self, connection: Connection) -> None:
        self.pool.release(connection)