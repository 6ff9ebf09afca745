"""SQLite-backed store handle: connection, schema versions and transactions."""

import logging
import sqlite3
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Union

from audread.core import StoreUnavailable, TransactionFailed

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"


class StoreState(Enum):
    UNINITIALIZED = "uninitialized"
    OPENING = "opening"
    READY = "ready"
    ERRORED = "errored"


def _create_schema_v1(cur: sqlite3.Cursor) -> None:
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS documents (
            id TEXT PRIMARY KEY,
            title TEXT NOT NULL,
            language TEXT,
            created_at TEXT NOT NULL,
            sentence_count INTEGER
        );
        """
    )
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS sentences (
            doc_id TEXT NOT NULL,
            id TEXT NOT NULL,
            text TEXT NOT NULL,
            idx INTEGER NOT NULL,
            hash TEXT NOT NULL,
            PRIMARY KEY (doc_id, id)
        );
        """
    )
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS settings (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        );
        """
    )
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS audio_cache (
            key TEXT PRIMARY KEY,
            payload BLOB NOT NULL,
            content_type TEXT NOT NULL,
            timestamp REAL NOT NULL,
            ttl_seconds REAL
        );
        """
    )
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS dictionary_cache (
            key TEXT PRIMARY KEY,
            data TEXT NOT NULL,
            timestamp REAL NOT NULL,
            ttl_seconds REAL
        );
        """
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_documents_created_at ON documents(created_at);")
    cur.execute("CREATE INDEX IF NOT EXISTS idx_sentences_doc ON sentences(doc_id);")
    cur.execute(
        "CREATE UNIQUE INDEX IF NOT EXISTS idx_sentences_doc_index ON sentences(doc_id, idx);"
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_audio_cache_timestamp ON audio_cache(timestamp);")
    cur.execute(
        "CREATE INDEX IF NOT EXISTS idx_dictionary_cache_timestamp ON dictionary_cache(timestamp);"
    )


# Migration i brings the database from user_version i to i + 1.
# New schema versions are appended here; steps must keep existing rows.
MIGRATIONS: List[Callable[[sqlite3.Cursor], None]] = [
    _create_schema_v1,
]

SCHEMA_VERSION = len(MIGRATIONS)


class StoreHandle:
    """Owns the SQLite connection and applies the versioned schema.

    The handle is created once by the composition root and passed to every
    repository. ``open()`` is lazy and idempotent: the first call connects and
    upgrades the schema, later calls return the same connection. A failed open
    leaves the handle in the ERRORED state for good.
    """

    def __init__(self, db_path: Union[Path, str]) -> None:
        self.db_path = db_path if str(db_path) == MEMORY_DB else Path(db_path)
        self._connection: Optional[sqlite3.Connection] = None
        self._state = StoreState.UNINITIALIZED
        self._open_error: Optional[Exception] = None

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is StoreState.READY

    def open(self) -> sqlite3.Connection:
        """Return the ready connection, opening and upgrading it on first use.

        Raises:
            StoreUnavailable: If the database cannot be opened or upgraded,
                now or on any earlier call.
        """
        if self._state is StoreState.READY and self._connection is not None:
            return self._connection
        if self._state is StoreState.ERRORED:
            raise StoreUnavailable(
                "Store failed to open earlier; restart required",
                details={"db_path": str(self.db_path), "cause": str(self._open_error)},
            )
        if self._state is StoreState.OPENING:
            raise StoreUnavailable("Store is already being opened", details={"db_path": str(self.db_path)})

        self._state = StoreState.OPENING
        connection = None
        try:
            if isinstance(self.db_path, Path):
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
            # Autocommit mode; transactions are opened explicitly with BEGIN.
            connection = sqlite3.connect(str(self.db_path), isolation_level=None)
            connection.row_factory = sqlite3.Row
            connection.execute("PRAGMA foreign_keys = ON;")
            self._upgrade_schema(connection)
        except (sqlite3.Error, OSError) as e:
            if connection is not None:
                connection.close()
            self._state = StoreState.ERRORED
            self._open_error = e
            logger.error("Failed to open store at %s: %s", self.db_path, e)
            raise StoreUnavailable(
                f"Failed to open store: {e}", details={"db_path": str(self.db_path)}
            ) from e

        self._connection = connection
        self._state = StoreState.READY
        logger.info("Store opened at %s (schema v%d)", self.db_path, SCHEMA_VERSION)
        return connection

    @contextmanager
    def transaction(self, operation: str) -> Iterator[sqlite3.Cursor]:
        """Run the block inside one write transaction.

        Commits when the block finishes, rolls back on any exception.
        ``sqlite3.Error`` is re-raised as TransactionFailed; other exceptions
        propagate unchanged after the rollback.
        """
        connection = self.open()
        try:
            connection.execute("BEGIN IMMEDIATE")
        except sqlite3.Error as e:
            logger.error("Could not begin %s: %s", operation, e)
            raise TransactionFailed(operation, e) from e

        cur = connection.cursor()
        try:
            yield cur
            connection.execute("COMMIT")
        except sqlite3.Error as e:
            self._rollback(connection)
            logger.error("Transaction %s rolled back: %s", operation, e)
            raise TransactionFailed(operation, e) from e
        except BaseException:
            self._rollback(connection)
            raise

    def read(self, operation: str, sql: str, params: tuple = ()) -> List[sqlite3.Row]:
        """Execute a single read statement and return all rows.

        Raises:
            TransactionFailed: If the query fails.
        """
        connection = self.open()
        try:
            return connection.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            logger.error("Read %s failed: %s", operation, e)
            raise TransactionFailed(operation, e) from e

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            self._state = StoreState.UNINITIALIZED

    @staticmethod
    def _rollback(connection: sqlite3.Connection) -> None:
        if connection.in_transaction:
            connection.execute("ROLLBACK")

    @staticmethod
    def _upgrade_schema(connection: sqlite3.Connection) -> None:
        current = connection.execute("PRAGMA user_version;").fetchone()[0]
        if current > SCHEMA_VERSION:
            raise sqlite3.DatabaseError(
                f"database schema v{current} is newer than supported v{SCHEMA_VERSION}"
            )
        for version in range(current, SCHEMA_VERSION):
            cur = connection.cursor()
            cur.execute("BEGIN IMMEDIATE")
            try:
                MIGRATIONS[version](cur)
                # PRAGMA does not accept bound parameters.
                cur.execute(f"PRAGMA user_version = {version + 1};")
                cur.execute("COMMIT")
            except sqlite3.Error:
                if connection.in_transaction:
                    connection.execute("ROLLBACK")
                raise
            logger.info("Applied store schema v%d", version + 1)
