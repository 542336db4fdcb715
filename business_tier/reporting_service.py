"""
Business tier: reporting operations acting as the interface between the UI and the store.

Every operation runs a single parameterized statement through a fresh
DataAccess connection and maps the result into plain values or DTOs. Any
failure is surfaced as a ReportingError carrying the underlying message.
"""

import functools
import logging
import sys
from typing import Any, Callable, TypeVar

from business_tier.config import StoreConfig
from business_tier.data_access import DataAccess
from business_tier.exceptions import ReportingError
from business_tier.models import Coordinates, DayType, Station, StationRidership, Stop

logger = logging.getLogger(__name__)
stream_handler = logging.StreamHandler(sys.stdout)
stream_handler.setLevel(logging.INFO)
formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
stream_handler.setFormatter(formatter)
logger.addHandler(stream_handler)
logger.setLevel(logging.DEBUG)

T = TypeVar("T")


def reporting_operation(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator wrapping any exception raised by an operation in a ReportingError.

    Args:
        func: The reporting operation to wrap

    Returns:
        The wrapped operation
    """
    operation = f"ReportingService.{func.__name__.lstrip('_')}"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger.info("Running %s", operation)
        try:
            return func(*args, **kwargs)
        except ReportingError:
            raise
        except Exception as e:
            logger.error("%s failed: %s", operation, e)
            raise ReportingError(operation, str(e)) from e

    return wrapper


def _escape_like(phrase: str) -> str:
    return phrase.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ReportingService:
    """
    Reporting operations over the CTA ridership store.

    Args:
        config: Location of the store. Each operation opens its own connection.
    """

    def __init__(self, config: StoreConfig):
        self.config = config

    def _data(self) -> DataAccess:
        return DataAccess(self.config.database_path, read_only=self.config.read_only)

    def _require(self, value: Any, what: str) -> Any:
        if value is None:
            raise LookupError(f"{what} not found")
        return value

    def test_connection(self) -> bool:
        """
        Opens and closes a connection to the store, e.g. on startup to make sure all is well.

        Returns:
            bool: True if successful, False if not
        """
        return self._data().open_close_connection()

    @reporting_operation
    def get_stations(self) -> list[Station]:
        """
        Returns all the CTA stations, ordered by name.
        """
        df = self._data().execute_non_scalar_query(
            """
            SELECT StationID AS station_id, Name AS name
            FROM Stations
            ORDER BY Name ASC;
            """
        )
        return [Station(int(row.station_id), str(row.name)) for row in df.itertuples()]

    @reporting_operation
    def get_stops(self, station_id: int) -> list[Stop]:
        """
        Returns the stops belonging to the given station, ordered by name.

        Args:
            station_id: ID of the owning station

        Returns:
            list[Stop]: The stops, possibly empty
        """
        df = self._data().execute_non_scalar_query(
            """
            SELECT
                StopID AS stop_id,
                Name AS name,
                StationID AS station_id,
                Direction AS direction,
                ADA AS ada,
                Latitude AS latitude,
                Longitude AS longitude
            FROM Stops
            WHERE StationID = ?
            ORDER BY Name ASC;
            """,
            [int(station_id)],
        )
        return [
            Stop(
                id=int(row.stop_id),
                name=str(row.name),
                station_id=int(row.station_id),
                direction=str(row.direction),
                ada=bool(row.ada),
                latitude=float(row.latitude),
                longitude=float(row.longitude),
            )
            for row in df.itertuples()
        ]

    def get_top_stations(self, n: int) -> list[Station]:
        """
        Returns the top N stations by total ridership, busiest first.

        Args:
            n: Number of stations to return, must be at least 1

        Returns:
            list[Station]: At most n stations

        Raises:
            ValueError: If n is less than 1
        """
        return [r.station for r in self.get_top_station_ridership(n)]

    def get_top_station_ridership(self, n: int) -> list[StationRidership]:
        """
        Returns the top N stations paired with their total ridership, busiest first.

        Raises:
            ValueError: If n is less than 1
        """
        if n < 1:
            raise ValueError("get_top_stations: N must be positive")
        return self._get_top_station_ridership(n)

    @reporting_operation
    def _get_top_station_ridership(self, n: int) -> list[StationRidership]:
        df = self._data().execute_non_scalar_query(
            """
            SELECT
                Stations.StationID AS station_id,
                Stations.Name AS name,
                SUM(DailyTotal) AS total_riders
            FROM Riderships
            INNER JOIN Stations ON Riderships.StationID = Stations.StationID
            GROUP BY Stations.StationID, Stations.Name
            ORDER BY total_riders DESC, Stations.Name ASC
            LIMIT ?;
            """,
            [int(n)],
        )
        return [
            StationRidership(Station(int(row.station_id), str(row.name)), int(row.total_riders))
            for row in df.itertuples()
        ]

    @reporting_operation
    def get_total_ridership(self) -> int:
        """
        Returns the total ridership across all stations.
        """
        result = self._data().execute_scalar_query(
            "SELECT CAST(COALESCE(SUM(DailyTotal), 0) AS BIGINT) FROM Riderships;"
        )
        return int(result)

    @reporting_operation
    def get_total_ridership_for(self, station_name: str) -> int:
        """
        Returns the total ridership for the given station, 0 if it has no records.
        """
        result = self._data().execute_scalar_query(
            """
            SELECT CAST(COALESCE(SUM(DailyTotal), 0) AS BIGINT)
            FROM Riderships
            INNER JOIN Stations ON Riderships.StationID = Stations.StationID
            WHERE Stations.Name = ?;
            """,
            [station_name],
        )
        return int(result)

    @reporting_operation
    def get_days_count(self, station_name: str) -> int:
        """
        Returns the number of days with recorded ridership for the given station.
        """
        result = self._data().execute_scalar_query(
            """
            SELECT COUNT(*)
            FROM Riderships
            INNER JOIN Stations ON Riderships.StationID = Stations.StationID
            WHERE Stations.Name = ?;
            """,
            [station_name],
        )
        return int(result)

    @reporting_operation
    def get_average_daily_ridership(self, station_name: str) -> int:
        """
        Returns total ridership divided by the number of recorded days for a station.

        Args:
            station_name: Exact station name

        Returns:
            int: Whole riders per day, rounded down

        Raises:
            ReportingError: If the station has no recorded days
        """
        days = self.get_days_count(station_name)
        if days == 0:
            raise ZeroDivisionError(f"no ridership days recorded for {station_name}")
        return self.get_total_ridership_for(station_name) // days

    @reporting_operation
    def get_percent_of_total_ridership(self, station_name: str) -> float:
        """
        Returns the station's share of the overall ridership, as a percentage.

        Raises:
            ReportingError: If there is no ridership recorded at all
        """
        overall = self.get_total_ridership()
        if overall == 0:
            raise ZeroDivisionError("no ridership recorded")
        return self.get_total_ridership_for(station_name) / overall * 100

    def get_ridership_by_day_type(self, station_name: str, day_type: DayType | str) -> int:
        """
        Returns the ridership for the given station on the given type of day.

        Args:
            station_name: Exact station name
            day_type: W (weekday), A (Saturday) or U (Sunday/holiday)

        Returns:
            int: Summed ridership, 0 if no records match

        Raises:
            ValueError: If day_type is not a known code
        """
        return self._get_ridership_by_day_type(station_name, DayType(day_type))

    @reporting_operation
    def _get_ridership_by_day_type(self, station_name: str, day_type: DayType) -> int:
        result = self._data().execute_scalar_query(
            """
            SELECT CAST(COALESCE(SUM(DailyTotal), 0) AS BIGINT)
            FROM Riderships
            INNER JOIN Stations ON Riderships.StationID = Stations.StationID
            WHERE Stations.Name = ? AND Riderships.TypeOfDay = ?;
            """,
            [station_name, day_type.value],
        )
        return int(result)

    def get_ridership_breakdown(self, station_name: str) -> dict[DayType, int]:
        """
        Returns the station's ridership split by weekday, Saturday and Sunday/holiday.
        """
        return {
            day_type: self.get_ridership_by_day_type(station_name, day_type)
            for day_type in DayType
        }

    @reporting_operation
    def get_lines_at(self, stop_name: str, station_id: int) -> list[str]:
        """
        Returns the colors of the lines serving the given stop, ordered by color.
        """
        df = self._data().execute_non_scalar_query(
            """
            SELECT Lines.Color AS color
            FROM Stops
            INNER JOIN StopDetails ON Stops.StopID = StopDetails.StopID
            INNER JOIN Lines ON StopDetails.LineID = Lines.LineID
            WHERE Stops.Name = ? AND Stops.StationID = ?
            ORDER BY Lines.Color ASC;
            """,
            [stop_name, int(station_id)],
        )
        return [str(color) for color in df["color"]]

    @reporting_operation
    def is_ada(self, stop_name: str, station_id: int) -> bool:
        """
        Returns whether the given stop is ADA (wheelchair) accessible.
        """
        result = self._data().execute_scalar_query(
            "SELECT ADA FROM Stops WHERE Name = ? AND StationID = ?;",
            [stop_name, int(station_id)],
        )
        return bool(self._require(result, f"Stop '{stop_name}'"))

    @reporting_operation
    def get_direction(self, stop_name: str, station_id: int) -> str:
        """
        Returns the direction of travel for the given stop.
        """
        result = self._data().execute_scalar_query(
            "SELECT Direction FROM Stops WHERE Name = ? AND StationID = ?;",
            [stop_name, int(station_id)],
        )
        return str(self._require(result, f"Stop '{stop_name}'"))

    @reporting_operation
    def get_coordinates(self, stop_name: str, station_id: int) -> Coordinates:
        """
        Returns the location of the given stop.
        """
        df = self._data().execute_non_scalar_query(
            """
            SELECT Latitude AS latitude, Longitude AS longitude
            FROM Stops
            WHERE Name = ? AND StationID = ?;
            """,
            [stop_name, int(station_id)],
        )
        if df.empty:
            raise LookupError(f"Stop '{stop_name}' not found")
        row = df.iloc[0]
        return Coordinates(float(row["latitude"]), float(row["longitude"]))

    @reporting_operation
    def get_station_id(self, station_name: str) -> int:
        """
        Returns the ID of the station with exactly the given name.
        """
        result = self._data().execute_scalar_query(
            "SELECT StationID FROM Stations WHERE Name = ?;", [station_name]
        )
        return int(self._require(result, f"Station '{station_name}'"))

    @reporting_operation
    def get_station(self, station_name: str) -> Station:
        """
        Returns the station with exactly the given name.
        """
        return Station(self.get_station_id(station_name), station_name)

    @reporting_operation
    def get_stations_by_phrase(self, phrase: str) -> list[Station]:
        """
        Returns the stations whose name contains the given phrase, ordered by name.

        The match is case-insensitive and an empty phrase matches every station.

        Args:
            phrase: Substring to look for

        Returns:
            list[Station]: Matching stations, possibly empty
        """
        df = self._data().execute_non_scalar_query(
            """
            SELECT StationID AS station_id, Name AS name
            FROM Stations
            WHERE Name ILIKE ? ESCAPE '\\'
            ORDER BY Name ASC;
            """,
            [f"%{_escape_like(phrase)}%"],
        )
        return [Station(int(row.station_id), str(row.name)) for row in df.itertuples()]

    @reporting_operation
    def update_ada(self, stop_name: str, station_id: int, status: bool):
        """
        Sets the ADA accessibility flag of the given stop.
        """
        self._data().execute_action_query(
            "UPDATE Stops SET ADA = ? WHERE Name = ? AND StationID = ?;",
            [bool(status), stop_name, int(station_id)],
        )

    @reporting_operation
    def toggle_ada(self, stop_name: str, station_id: int):
        """
        Flips the ADA accessibility flag of the given stop.

        The new state is not returned, callers should re-read it with is_ada.
        """
        self.update_ada(stop_name, station_id, not self.is_ada(stop_name, station_id))
