import streamlit as st

st.title('Chicago "L" Ridership Explorer')

st.header("Background")

st.markdown(
    """
    The Chicago Transit Authority (CTA) publishes daily entry counts for every "L" station, split by 
    the type of day the count was taken on. Using this data, we can answer questions such as:
      - Which stations are the busiest?
      - How many riders does my station see on an average day?
      - How much quieter is my station on weekends?
      - Which stops are wheelchair accessible, and which lines serve them?

    And much more!
    """
)

st.header("Methodology")

st.markdown(
    """
    Every statistic is calculated by the database on demand, nothing is precomputed or cached. 
    Ridership records are tagged `W` (weekday), `A` (Saturday) or `U` (Sunday/holiday). The average 
    daily ridership of a station is its total ridership divided by the number of days with a record, 
    rounded down. The percentage of ridership compares a station's total with the total across all 
    stations.
    """
)

st.header("Credits")
st.write(
    """
    Data provided by Chicago Transit Authority.
    """
)
