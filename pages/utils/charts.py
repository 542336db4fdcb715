"""
Altair chart builders used by the Streamlit pages.
"""

import altair as alt
import pandas as pd

from business_tier.models import DayType

DAY_TYPE_LABELS = {
    DayType.WEEKDAY: "Weekday",
    DayType.SATURDAY: "Saturday",
    DayType.SUNDAY_HOLIDAY: "Sunday/Holiday",
}


def day_type_frame(breakdown: dict[DayType, int]) -> pd.DataFrame:
    """
    Converts a day-type breakdown into a dataframe ready for charting.

    Args:
        breakdown: Ridership per day type

    Returns:
        pd.DataFrame: One row per day type with day_type and riders columns
    """
    return pd.DataFrame(
        {
            "day_type": [DAY_TYPE_LABELS[d] for d in DayType],
            "riders": [breakdown.get(d, 0) for d in DayType],
        }
    )


def create_day_type_bar_chart(df: pd.DataFrame) -> alt.LayerChart:
    """
    Creates a bar chart using Altair to display a station's ridership
    split by type of day (weekday, Saturday, Sunday/holiday).

    Args:
        df: Input Pandas dataframe with day_type and riders columns

    Returns:
        alt.LayerChart: Layered Altair bar chart
    """
    chart = (
        alt.Chart(df)
        .mark_bar(color="#00a1de")
        .encode(
            x=alt.X("day_type:N", title="Type of Day", sort=list(DAY_TYPE_LABELS.values())),
            y=alt.Y("riders:Q", title="Riders"),
            tooltip=[alt.Tooltip("riders:Q", title="Riders", format=",")],
        )
    )

    # Create text layer explicitly bound to the same Y-axis
    text = chart.mark_text(align="center", baseline="bottom", dy=-5).encode(
        text=alt.Text("riders:Q", format=",")
    )

    return (
        (chart + text)
        .properties(title="Ridership by Type of Day")
        .configure_view(stroke=None)
    )


def create_top_stations_bar_chart(df: pd.DataFrame) -> alt.LayerChart:
    """
    Creates a horizontal bar chart using Altair to display the busiest stations.

    Args:
        df: Input Pandas dataframe with station and riders columns, busiest first

    Returns:
        alt.LayerChart: Layered Altair bar chart
    """
    chart = (
        alt.Chart(df)
        .mark_bar(color="#c60c30")
        .encode(
            x=alt.X("riders:Q", title="Total Riders"),
            y=alt.Y("station:N", title="Station", sort=df["station"].tolist()),
            tooltip=[alt.Tooltip("riders:Q", title="Riders", format=",")],
        )
    )

    text = chart.mark_text(align="left", baseline="middle", dx=3).encode(
        text=alt.Text("riders:Q", format=",")
    )

    return (
        (chart + text)
        .properties(title="Top Stations by Total Ridership")
        .configure_view(stroke=None)
    )
