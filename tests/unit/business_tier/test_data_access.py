"""Module for testing data_access.py in business_tier."""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

import duckdb
import pytest

from business_tier.data_access import DataAccess


class TestDataAccess(unittest.TestCase):
    """Class for testing DataAccess against a scratch DuckDB file."""

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.database_path = str(Path(self.tmp_dir.name) / "scratch.duckdb")
        con = duckdb.connect(database=self.database_path)
        con.execute("CREATE TABLE Lines (LineID INTEGER PRIMARY KEY, Color VARCHAR NOT NULL);")
        con.execute("INSERT INTO Lines VALUES (1, 'Red'), (2, 'Blue');")
        con.close()
        self.data = DataAccess(self.database_path)

    def tearDown(self):
        self.tmp_dir.cleanup()

    def test_execute_non_scalar_query(self):
        """Tests rows are returned as a dataframe."""
        # Act
        df = self.data.execute_non_scalar_query(
            "SELECT LineID, Color FROM Lines WHERE LineID > ? ORDER BY LineID;", [0]
        )

        # Assert
        self.assertEqual(list(df.columns), ["LineID", "Color"])
        self.assertEqual(df["Color"].tolist(), ["Red", "Blue"])

    def test_execute_scalar_query(self):
        """Tests the first value of the first row is returned."""
        self.assertEqual(
            self.data.execute_scalar_query(
                "SELECT Color FROM Lines WHERE LineID = ?;", [2]
            ),
            "Blue",
        )

    def test_execute_scalar_query_no_rows(self):
        """Tests None is returned when the query matches nothing."""
        self.assertIsNone(
            self.data.execute_scalar_query("SELECT Color FROM Lines WHERE LineID = ?;", [9])
        )

    def test_execute_action_query_returns_row_count(self):
        """Tests the number of affected rows is returned."""
        # Act
        count = self.data.execute_action_query(
            "UPDATE Lines SET Color = ? WHERE LineID = ?;", ["Green", 1]
        )

        # Assert
        self.assertEqual(count, 1)
        self.assertEqual(
            self.data.execute_scalar_query("SELECT Color FROM Lines WHERE LineID = 1;"),
            "Green",
        )

    def test_parameters_are_not_interpolated(self):
        """Tests quotes in parameters are stored verbatim."""
        # Act
        self.data.execute_action_query(
            "INSERT INTO Lines VALUES (?, ?);", [3, "O'Hare'); DROP TABLE Lines; --"]
        )

        # Assert
        self.assertEqual(
            self.data.execute_scalar_query("SELECT COUNT(*) FROM Lines;"), 3
        )

    def test_driver_errors_propagate(self):
        """Tests driver errors are not swallowed."""
        with pytest.raises(duckdb.Error):
            self.data.execute_non_scalar_query("SELECT * FROM Missing;")

    def test_open_close_connection(self):
        """Tests a reachable store reports success."""
        self.assertTrue(self.data.open_close_connection())

    @patch("business_tier.data_access.duckdb.connect")
    def test_open_close_connection_failure(self, mock_connect):
        """Tests a store that cannot be opened reports failure."""
        # Arrange
        mock_connect.side_effect = duckdb.IOException("Could not set lock on file")

        # Act + Assert
        self.assertFalse(self.data.open_close_connection())
        mock_connect.assert_called_once_with(database=self.database_path, read_only=False)

    @patch("business_tier.data_access.duckdb.connect")
    def test_connection_closed_after_error(self, mock_connect):
        """Tests the connection is closed even when the statement fails."""
        # Arrange
        mock_con = MagicMock()
        mock_con.execute.side_effect = duckdb.ParserException("syntax error")
        mock_connect.return_value = mock_con

        # Act
        with pytest.raises(duckdb.ParserException):
            DataAccess(self.database_path, read_only=True).execute_scalar_query("SELEC 1")

        # Assert
        mock_connect.assert_called_once_with(database=self.database_path, read_only=True)
        mock_con.close.assert_called_once()


class TestMissingDatabaseFile(unittest.TestCase):
    """Class for testing DataAccess never creates a database file."""

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.database_path = Path(self.tmp_dir.name) / "typo.duckdb"

    def tearDown(self):
        self.tmp_dir.cleanup()

    def test_open_close_connection_missing_file(self):
        """Tests a path that does not exist reports failure and is not created."""
        # Act
        result = DataAccess(str(self.database_path)).open_close_connection()

        # Assert
        self.assertFalse(result)
        self.assertFalse(self.database_path.exists())

    @patch("business_tier.data_access.duckdb.connect")
    def test_query_missing_file(self, mock_connect):
        """Tests queries against a missing file fail without connecting."""
        with pytest.raises(FileNotFoundError):
            DataAccess(str(self.database_path)).execute_scalar_query("SELECT 1;")

        mock_connect.assert_not_called()
        self.assertFalse(self.database_path.exists())

    def test_in_memory_database(self):
        """Tests the in-memory database needs no file."""
        self.assertEqual(DataAccess(":memory:").execute_scalar_query("SELECT 42;"), 42)
