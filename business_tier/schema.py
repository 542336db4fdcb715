"""
Schema and bulk loader for the CTA ridership store.

The store is a DuckDB database file holding stations, stops, daily ridership
records, train lines, and the mapping of lines to stops. `build_store` creates
one from a directory of CSV exports named after each table, e.g. Stations.csv.
"""

import logging
import sys
from pathlib import Path

import duckdb

logger = logging.getLogger(__name__)
stream_handler = logging.StreamHandler(sys.stdout)
stream_handler.setLevel(logging.INFO)
formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
stream_handler.setFormatter(formatter)
logger.addHandler(stream_handler)
logger.setLevel(logging.DEBUG)

# Creation and load order
TABLES = ["Stations", "Stops", "Riderships", "Lines", "StopDetails"]

DDL = {
    "Stations": """
        CREATE TABLE IF NOT EXISTS Stations (
            StationID INTEGER PRIMARY KEY,
            Name VARCHAR NOT NULL
        );
    """,
    "Stops": """
        CREATE TABLE IF NOT EXISTS Stops (
            StopID INTEGER PRIMARY KEY,
            Name VARCHAR NOT NULL,
            StationID INTEGER NOT NULL,
            Direction VARCHAR NOT NULL,
            ADA BOOLEAN NOT NULL,
            Latitude DOUBLE NOT NULL,
            Longitude DOUBLE NOT NULL
        );
    """,
    "Riderships": """
        CREATE TABLE IF NOT EXISTS Riderships (
            StationID INTEGER NOT NULL,
            "Date" DATE NOT NULL,
            TypeOfDay VARCHAR NOT NULL CHECK (TypeOfDay IN ('W', 'A', 'U')),
            DailyTotal INTEGER NOT NULL
        );
    """,
    "Lines": """
        CREATE TABLE IF NOT EXISTS Lines (
            LineID INTEGER PRIMARY KEY,
            Color VARCHAR NOT NULL
        );
    """,
    "StopDetails": """
        CREATE TABLE IF NOT EXISTS StopDetails (
            StopID INTEGER NOT NULL,
            LineID INTEGER NOT NULL
        );
    """,
}


def create_schema(con: duckdb.DuckDBPyConnection):
    """
    Create all store tables if they do not already exist.

    Args:
        con: An open DuckDB connection
    """
    for table in TABLES:
        con.execute(DDL[table])
        logger.info("Ensured table %s exists", table)


def load_csv_directory(con: duckdb.DuckDBPyConnection, directory: str | Path) -> dict[str, int]:
    """
    Append the contents of <Table>.csv files in a directory to the matching tables.

    Columns in each CSV must be in the same order as the table definition.
    Tables without a CSV file are left untouched.

    Args:
        con: An open DuckDB connection with the schema already created
        directory: Directory containing the CSV exports

    Returns:
        dict[str, int]: Number of rows loaded per table
    """
    directory = Path(directory)
    loaded = {}
    for table in TABLES:
        csv_path = directory / f"{table}.csv"
        if not csv_path.exists():
            logger.info("No %s found, skipping table %s", csv_path.name, table)
            continue

        logger.info("Loading %s into %s", csv_path, table)
        before = con.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
        con.read_csv(str(csv_path), header=True).insert_into(table)
        after = con.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
        loaded[table] = after - before
        logger.info("Loaded %d rows into %s", loaded[table], table)
    return loaded


def build_store(database_path: str, csv_directory: str | Path | None = None) -> dict[str, int]:
    """
    Create a store file with the full schema, optionally populated from CSV exports.

    Args:
        database_path: Path of the DuckDB database file to create or extend
        csv_directory: Optional directory of <Table>.csv files to load

    Returns:
        dict[str, int]: Number of rows loaded per table
    """
    con = duckdb.connect(database=database_path)
    try:
        create_schema(con)
        if csv_directory is None:
            return {}
        return load_csv_directory(con, csv_directory)
    finally:
        con.close()
