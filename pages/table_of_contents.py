import streamlit as st

st.title("Table of Contents")

pages = [
    (
        "Stations",
        "stations",
        """
        Browse "L" stations by name, search for a station, or list the ten busiest. Pick a station 
        to see its total, daily average, and weekday/Saturday/Sunday ridership, then pick one of its 
        stops to see the lines serving it, its direction, location, and accessibility.
        """,
    ),
    (
        "Top Stations",
        "top_stations",
        """
        Compare the busiest stations by total ridership across every recorded day.
        """,
    ),
    (
        "About",
        "about",
        """
        Find out more details about this project such as where the data comes from and how the 
        statistics are calculated.
        """,
    ),
]

# Create headers
col1, col2 = st.columns([1, 3])
col1.subheader("Page")
col2.subheader("Description")

st.divider()

# Generate rows
for label, path, desc in pages:
    c1, c2 = st.columns([1, 3])
    with c1:
        st.page_link(f"pages/{path}.py", label=label)
    with c2:
        st.write(desc)
