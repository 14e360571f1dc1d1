"""
MySQL Database - Connection Layer on mysql-connector-python.

Design Notes:
    - A small connection pool so query functions can run in parallel
    - Each query borrows a pooled connection and always returns it
    - Results are returned column by column with string cells
    - Errors handed to log() are emitted as structured events

Connection Options:
    user/password may be left empty when an option file (my.cnf) is
    given; the driver then reads them from the file's [client] group.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol, Tuple

import mysql.connector
import structlog
from mysql.connector import pooling

from mysql_userstat.errors import DatabaseConnectionError, QueryError

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONNECTIONS = 5
DEFAULT_PORT = 3306


class ConnectionPoolProtocol(Protocol):
    """Protocol for database connection pool."""

    def get_connection(self) -> Any:
        """Get a connection from the pool."""
        ...


def _to_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


class MySQLDatabase:
    """
    Pooled MySQL access for the user statistics collector.

    Usage:
        db = MySQLDatabase.connect("monitor", "secret", "db01")
        columns = db.query_column_dict("SELECT user FROM mysql.user")
        db.close()
    """

    def __init__(
        self,
        pool: ConnectionPoolProtocol,
        host: str = "",
        pool_size: int = DEFAULT_MAX_CONNECTIONS,
    ) -> None:
        """
        Initialize with an existing pool.

        Args:
            pool: Connection pool; get_connection() must return a
                connection whose close() hands it back and whose
                disconnect() closes the underlying session
            host: Server name, used in log events
            pool_size: Connections held by the pool, drained on close()
        """
        self.pool = pool
        self.host = host
        self.pool_size = pool_size
        self._closed = False
        self._events = structlog.get_logger(__name__).bind(db_host=host)

    @classmethod
    def connect(
        cls,
        user: str,
        password: str,
        host: str,
        option_file: Optional[str] = None,
        port: int = DEFAULT_PORT,
        max_connections: int = DEFAULT_MAX_CONNECTIONS,
        connect_timeout: int = 10,
    ) -> MySQLDatabase:
        """
        Open a connection pool and verify the server answers.

        Args:
            user: MySQL user ("" to take it from the option file)
            password: MySQL password ("" to take it from the option file)
            host: Server host name or address
            option_file: Path to a my.cnf style file
            port: Server TCP port
            max_connections: Pool size
            connect_timeout: Seconds to wait for each connection

        Returns:
            Connected MySQLDatabase

        Raises:
            DatabaseConnectionError: If the pool cannot be created or
                the server does not answer
        """
        options: Dict[str, Any] = {
            "host": host,
            "port": port,
            "connection_timeout": connect_timeout,
        }
        if user:
            options["user"] = user
        if password:
            options["password"] = password
        if option_file:
            options["option_files"] = option_file

        try:
            pool = pooling.MySQLConnectionPool(
                pool_name=f"userstat-{host or 'default'}-{port}",
                pool_size=max_connections,
                **options,
            )
        except mysql.connector.Error as exc:
            raise DatabaseConnectionError(
                f"cannot connect to MySQL at {host}:{port}: {exc}"
            ) from exc

        database = cls(pool, host=host, pool_size=max_connections)
        if not database.ping():
            raise DatabaseConnectionError(f"MySQL at {host}:{port} did not answer")

        logger.info(
            f"MySQLDatabase connected (host={host}, port={port}, pool_size={max_connections})"
        )
        return database

    def query_column_dict(self, query: str) -> Dict[str, List[str]]:
        """
        Run ``query`` and return its result keyed by column name.

        Raises:
            QueryError: If the driver reports a failure
        """
        rows, columns = self._execute(query)
        result: Dict[str, List[str]] = {name: [] for name in columns}
        for row in rows:
            for name, value in zip(columns, row):
                result[name].append(_to_cell(value))
        return result

    def _execute(self, query: str) -> Tuple[List[tuple], List[str]]:
        if self._closed:
            raise QueryError("database is closed", query=query)
        try:
            conn = self.pool.get_connection()
        except mysql.connector.Error as exc:
            raise QueryError(f"no connection available: {exc}", query=query) from exc

        try:
            cursor = conn.cursor()
            try:
                cursor.execute(query)
                rows = cursor.fetchall()
                columns = [desc[0].lower() for desc in cursor.description or []]
            finally:
                cursor.close()
        except mysql.connector.Error as exc:
            raise QueryError(f"query failed: {exc}", query=query) from exc
        finally:
            conn.close()
        return rows, columns

    def ping(self) -> bool:
        """
        Check database connectivity.

        Returns:
            True if ``SELECT 1`` succeeds
        """
        try:
            self._execute("SELECT 1")
        except QueryError as exc:
            logger.warning(f"MySQL ping failed: {exc}")
            return False
        return True

    def log(self, error: BaseException) -> None:
        """Emit ``error`` as a structured error event."""
        self._events.error(
            "userstat_error",
            error_type=type(error).__name__,
            error=str(error),
        )

    def close(self) -> None:
        """
        Stop handing out connections and disconnect the idle ones.

        Connections still borrowed by a running query are not waited for.
        """
        if self._closed:
            return
        self._closed = True

        disconnected = 0
        for _ in range(self.pool_size):
            try:
                conn = self.pool.get_connection()
            except mysql.connector.Error:
                break
            try:
                conn.disconnect()
            except mysql.connector.Error as exc:
                logger.warning(f"Disconnecting pooled connection failed: {exc}")
            disconnected += 1
        logger.debug(f"MySQLDatabase closed ({disconnected} connections released)")
