"""
Module containing utility functions used by Streamlit app.
"""

import streamlit as st

from business_tier.config import StoreConfig
from business_tier.reporting_service import ReportingService
from pages.utils.station_view import StationView


@st.cache_resource
def _create_reporting_service(database_path: str) -> ReportingService:
    defaults = StoreConfig.from_env()
    return ReportingService(
        StoreConfig(database_path=database_path, read_only=defaults.read_only)
    )


def get_reporting_service(database_path: str) -> ReportingService:
    """
    Returns the reporting service for a database file and checks the store can be opened.

    Only the service is cached, query results are always re-read from the store. The
    check runs on every rerun so a file created after the first visit is picked up.

    Args:
        database_path: Path to the DuckDB database file

    Returns:
        ReportingService: Service bound to the given store
    """
    service = _create_reporting_service(database_path)
    if not service.test_connection():
        st.error(f"Error: 'Database file {database_path} could not be opened'.")
    return service


def database_path_input() -> str:
    """
    Renders the database file input in the sidebar, shared by every page.

    Returns:
        str: The database file chosen by the user
    """
    if "database_path" not in st.session_state:
        st.session_state.database_path = StoreConfig.from_env().database_path
    return st.sidebar.text_input(label="Database file", key="database_path")


def get_station_view(database_path: str) -> StationView:
    """
    Returns the StationView for this session, replacing it if the database file changed.

    Args:
        database_path: Path to the DuckDB database file

    Returns:
        StationView: The session's presentation state
    """
    view = st.session_state.get("station_view")
    if view is None or st.session_state.get("station_view_path") != database_path:
        view = StationView(get_reporting_service(database_path))
        st.session_state.station_view = view
        st.session_state.station_view_path = database_path
    return view
