"""
Streamlit app page displaying the busiest CTA stations by total ridership.
"""

import pandas as pd
import streamlit as st

from business_tier.exceptions import ReportingError
from pages.utils.charts import create_top_stations_bar_chart
from pages.utils.utils import database_path_input, get_reporting_service

st.title("Top Stations")

database_path = database_path_input()
service = get_reporting_service(database_path)

n = st.slider(label="Number of stations", min_value=1, max_value=50, value=10)

try:
    ridership = service.get_top_station_ridership(n)
    df_top_stations = pd.DataFrame(
        {
            "station": [r.station.name for r in ridership],
            "riders": [r.total_riders for r in ridership],
        }
    )
except ReportingError as e:
    st.error(f"Error: '{e}'.")
    st.stop()

if df_top_stations.empty:
    st.info("No ridership recorded in this database.")
else:
    st.altair_chart(create_top_stations_bar_chart(df_top_stations))
    st.caption(
        """
        ** Totals are the sum of every daily ridership record for the station, across
        weekdays, Saturdays, and Sundays/holidays.
        """
    )
