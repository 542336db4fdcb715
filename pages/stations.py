"""
Streamlit app page for browsing CTA stations, their stops, and ridership statistics.
"""

import streamlit as st

from pages.utils.charts import create_day_type_bar_chart, day_type_frame
from pages.utils.utils import database_path_input, get_station_view

st.title("Stations")

database_path = database_path_input()
view = get_station_view(database_path)

# Sidebar actions replacing the original File menu
if st.sidebar.button("Load Stations", use_container_width=True):
    view.load_stations()
if st.sidebar.button("Top-10 Stations by Ridership", use_container_width=True):
    view.load_top_stations(10)
phrase = st.sidebar.text_input(label="Find station", key="find_phrase")
if phrase != st.session_state.get("last_find_phrase", ""):
    st.session_state.last_find_phrase = phrase
    view.find_stations(phrase)

col1, col2 = st.columns(2)
with col1:
    station = st.selectbox(
        label="Station",
        options=view.stations,
        index=None,
        placeholder="Choose a station",
    )
    if station is not None and station != view.attempted_station:
        view.select_station(station)
with col2:
    stop = st.selectbox(
        label="Stop",
        options=view.stops,
        index=None,
        placeholder="Choose a stop",
    )
    if stop is not None and stop != view.attempted_stop:
        view.select_stop(stop)

if view.error:
    st.error(view.error)

fields = view.station_fields
st.header("Station")
c1, c2, c3, c4 = st.columns(4)
c1.text_input("Station ID", value=fields.station_id, disabled=True)
c2.text_input("Total ridership", value=fields.total_ridership, disabled=True)
c3.text_input("Avg daily ridership", value=fields.avg_daily_ridership, disabled=True)
c4.text_input("% ridership", value=fields.percent_ridership, disabled=True)

c1, c2, c3 = st.columns(3)
c1.text_input("Weekday", value=fields.weekday_ridership, disabled=True)
c2.text_input("Saturday", value=fields.saturday_ridership, disabled=True)
c3.text_input("Sunday/Holiday", value=fields.sunday_holiday_ridership, disabled=True)

if fields.breakdown:
    st.altair_chart(create_day_type_bar_chart(day_type_frame(fields.breakdown)))

stop_fields = view.stop_fields
st.header("Stop")
c1, c2, c3 = st.columns(3)
c1.text_input("Accessible", value=stop_fields.accessible, disabled=True)
c2.text_input("Direction", value=stop_fields.direction, disabled=True)
c3.text_input("Location", value=stop_fields.location, disabled=True)
st.write("Lines: " + (", ".join(stop_fields.lines) if stop_fields.lines else "-"))

if st.button("Switch ADA accessibility", disabled=view.selected_stop is None):
    view.toggle_accessibility()
    st.rerun()
