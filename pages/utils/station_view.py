"""
Presentation state for the Stations page.

StationView holds the current station/stop selection and the formatted values
shown on screen. Each user interaction re-queries the reporting service and
refills the fields, clearing them first so a failed query never leaves stale
values next to fresh ones.
"""

from dataclasses import dataclass, field
from enum import Enum

from business_tier.exceptions import ReportingError
from business_tier.models import DayType
from business_tier.reporting_service import ReportingService


class ViewState(str, Enum):
    NO_SELECTION = "no_selection"
    STATION_SELECTED = "station_selected"
    STOP_SELECTED = "stop_selected"


@dataclass
class StationFields:
    station_id: str = ""
    total_ridership: str = ""
    avg_daily_ridership: str = ""
    percent_ridership: str = ""
    weekday_ridership: str = ""
    saturday_ridership: str = ""
    sunday_holiday_ridership: str = ""
    # Raw day-type totals, kept for charting
    breakdown: dict[DayType, int] = field(default_factory=dict)


@dataclass
class StopFields:
    accessible: str = ""
    direction: str = ""
    location: str = ""
    lines: list[str] = field(default_factory=list)


def format_count(value: int) -> str:
    return f"{value:,}"


def format_yes_no(value: bool) -> str:
    return "Yes" if value else "No"


class StationView:
    """
    State machine behind the Stations page.

    Args:
        service: The reporting service queried on every interaction
    """

    def __init__(self, service: ReportingService):
        self.service = service
        self.stations: list[str] = []
        self.stops: list[str] = []
        self.selected_station: str | None = None
        self.selected_stop: str | None = None
        # Last names passed to select_station/select_stop, whether or not they succeeded
        self.attempted_station: str | None = None
        self.attempted_stop: str | None = None
        self.station_id: int | None = None
        self.station_fields = StationFields()
        self.stop_fields = StopFields()
        self.error: str | None = None

    @property
    def state(self) -> ViewState:
        if self.selected_stop is not None:
            return ViewState.STOP_SELECTED
        if self.selected_station is not None:
            return ViewState.STATION_SELECTED
        return ViewState.NO_SELECTION

    def clear_stop_ui(self):
        self.selected_stop = None
        self.attempted_stop = None
        self.stop_fields = StopFields()

    def clear_station_ui(self, clear_stations: bool = False):
        self.clear_stop_ui()
        self.selected_station = None
        self.station_id = None
        self.station_fields = StationFields()
        self.stops = []
        if clear_stations:
            self.stations = []
            self.attempted_station = None

    def _report(self, e: Exception):
        self.error = f"Error: '{e}'."

    def load_stations(self):
        """File >> Load Stations: list every station by name."""
        self.error = None
        self.clear_station_ui(clear_stations=True)
        try:
            self.stations = [s.name for s in self.service.get_stations()]
        except ReportingError as e:
            self.clear_station_ui(clear_stations=True)
            self._report(e)

    def load_top_stations(self, n: int = 10):
        """List the n busiest stations, busiest first."""
        self.error = None
        self.clear_station_ui(clear_stations=True)
        try:
            self.stations = [s.name for s in self.service.get_top_stations(n)]
        except (ReportingError, ValueError) as e:
            self.clear_station_ui(clear_stations=True)
            self._report(e)

    def find_stations(self, phrase: str):
        """List the stations whose name contains the phrase."""
        self.error = None
        self.clear_station_ui(clear_stations=True)
        try:
            self.stations = [s.name for s in self.service.get_stations_by_phrase(phrase)]
        except ReportingError as e:
            self.clear_station_ui(clear_stations=True)
            self._report(e)

    def select_station(self, station_name: str | None):
        """
        Show the stops and ridership statistics of a station.

        Args:
            station_name: Name of the station clicked, None if nothing is selected
        """
        if not station_name:
            return

        self.error = None
        self.clear_station_ui()
        self.attempted_station = station_name

        try:
            station_id = self.service.get_station_id(station_name)
            stops = [s.name for s in self.service.get_stops(station_id)]

            total = self.service.get_total_ridership_for(station_name)
            average = self.service.get_average_daily_ridership(station_name)
            percent = self.service.get_percent_of_total_ridership(station_name)
            breakdown = self.service.get_ridership_breakdown(station_name)
        except (ReportingError, ValueError) as e:
            self.clear_station_ui()
            self._report(e)
            return

        self.selected_station = station_name
        self.station_id = station_id
        self.stops = stops
        self.station_fields = StationFields(
            station_id=str(station_id),
            total_ridership=format_count(total),
            avg_daily_ridership=f"{format_count(average)}/day",
            percent_ridership=f"{percent:.2f}%",
            weekday_ridership=format_count(breakdown[DayType.WEEKDAY]),
            saturday_ridership=format_count(breakdown[DayType.SATURDAY]),
            sunday_holiday_ridership=format_count(breakdown[DayType.SUNDAY_HOLIDAY]),
            breakdown=breakdown,
        )

    def select_stop(self, stop_name: str | None):
        """
        Show the lines, accessibility, direction and location of a stop.

        Args:
            stop_name: Name of the stop clicked, None if nothing is selected
        """
        if not stop_name or self.station_id is None:
            return

        self.error = None
        self.clear_stop_ui()

        try:
            lines = self.service.get_lines_at(stop_name, self.station_id)
            ada = self.service.is_ada(stop_name, self.station_id)
            direction = self.service.get_direction(stop_name, self.station_id)
            c = self.service.get_coordinates(stop_name, self.station_id)
        except ReportingError as e:
            self.clear_stop_ui()
            self._report(e)
            self.attempted_stop = stop_name
            return

        self.selected_stop = stop_name
        self.attempted_stop = stop_name
        self.stop_fields = StopFields(
            accessible=format_yes_no(ada),
            direction=direction,
            location=f"{c.latitude:.4f}, {c.longitude:.4f}",
            lines=lines,
        )

    def toggle_accessibility(self):
        """Flip the ADA flag of the selected stop and show the stored result."""
        self.error = None
        if self.selected_stop is None or self.station_id is None:
            self.error = "Error: 'Select a stop first'."
            return

        try:
            self.service.toggle_ada(self.selected_stop, self.station_id)
            ada = self.service.is_ada(self.selected_stop, self.station_id)
        except ReportingError as e:
            self.stop_fields.accessible = ""
            self._report(e)
            return

        self.stop_fields.accessible = format_yes_no(ada)
