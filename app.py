"""
Streamlit app entry point.
"""

import streamlit as st

st.set_page_config(layout="wide")

pages = [
    st.Page(
        "pages/table_of_contents.py", title="Table of Contents", icon=":material/list:"
    ),
    st.Page("pages/stations.py", title="Stations", icon=":material/train:"),
    st.Page(
        "pages/top_stations.py", title="Top Stations", icon=":material/leaderboard:"
    ),
    st.Page("pages/about.py", title="About", icon=":material/help_outline:"),
]

page = st.navigation(pages)
page.run()
