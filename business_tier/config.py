"""
Configuration for locating the CTA ridership store.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DATABASE_PATH = "cta.duckdb"


@dataclass(frozen=True)
class StoreConfig:
    """
    Location of the DuckDB database file backing the reporting service.

    Attributes:
        database_path: Path to the DuckDB database file.
        read_only: Whether connections should be opened in read-only mode.
    """

    database_path: str = DEFAULT_DATABASE_PATH
    read_only: bool = False

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """
        Build a config from the CTA_DATABASE_PATH and CTA_READ_ONLY environment variables.

        Returns:
            StoreConfig: The resolved configuration
        """
        # Only needed for local development, does nothing if no .env file exists
        load_dotenv()

        read_only = os.environ.get("CTA_READ_ONLY", "false").strip().lower()
        return cls(
            database_path=os.environ.get("CTA_DATABASE_PATH", DEFAULT_DATABASE_PATH),
            read_only=read_only in ("1", "true", "yes"),
        )
