"""
Data access tier: runs SQL statements against the DuckDB store.

Every call opens its own connection and closes it before returning, so no
connection state is shared between operations. Connections are only opened
on existing database files, a missing file is never created here.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Sequence

import duckdb
import pandas as pd

logger = logging.getLogger(__name__)
stream_handler = logging.StreamHandler(sys.stdout)
stream_handler.setLevel(logging.INFO)
formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
stream_handler.setFormatter(formatter)
logger.addHandler(stream_handler)
logger.setLevel(logging.DEBUG)


class DataAccess:
    """
    Thin wrapper around DuckDB exposing query, scalar and action execution.

    Args:
        database_path: Path to the DuckDB database file.
        read_only: Whether to open connections in read-only mode.
    """

    def __init__(self, database_path: str, read_only: bool = False):
        self.database_path = database_path
        self.read_only = read_only

    def _connect(self) -> duckdb.DuckDBPyConnection:
        if self.database_path != ":memory:" and not Path(self.database_path).is_file():
            raise FileNotFoundError(f"Database file {self.database_path} does not exist")
        return duckdb.connect(database=self.database_path, read_only=self.read_only)

    def open_close_connection(self) -> bool:
        """
        Opens and closes a connection to the store to make sure all is well.

        Returns:
            bool: True if the connection could be opened, False otherwise
        """
        try:
            con = self._connect()
        except (duckdb.Error, FileNotFoundError) as e:
            logger.error("Unable to open %s: %s", self.database_path, e)
            return False
        con.close()
        return True

    def execute_non_scalar_query(
        self, sql: str, params: Sequence[Any] | None = None
    ) -> pd.DataFrame:
        """
        Executes a query returning rows.

        Args:
            sql: The SQL statement, using ? placeholders for parameters
            params: Values bound to the placeholders

        Returns:
            pd.DataFrame: The result rows
        """
        logger.debug("Executing query: %s with params %s", " ".join(sql.split()), params)
        con = self._connect()
        try:
            return con.execute(sql, params or []).df()
        finally:
            con.close()

    def execute_scalar_query(self, sql: str, params: Sequence[Any] | None = None) -> Any:
        """
        Executes a query returning a single value.

        Args:
            sql: The SQL statement, using ? placeholders for parameters
            params: Values bound to the placeholders

        Returns:
            The first column of the first row, or None if the query returned no rows
        """
        logger.debug("Executing scalar: %s with params %s", " ".join(sql.split()), params)
        con = self._connect()
        try:
            row = con.execute(sql, params or []).fetchone()
        finally:
            con.close()
        return None if row is None else row[0]

    def execute_action_query(self, sql: str, params: Sequence[Any] | None = None) -> int:
        """
        Executes an INSERT, UPDATE or DELETE statement.

        Args:
            sql: The SQL statement, using ? placeholders for parameters
            params: Values bound to the placeholders

        Returns:
            int: Number of rows affected
        """
        logger.debug("Executing action: %s with params %s", " ".join(sql.split()), params)
        con = self._connect()
        try:
            row = con.execute(sql, params or []).fetchone()
        finally:
            con.close()
        return int(row[0]) if row else 0
