"""
Step definitions for the station drill-down feature.
"""

from behave import given, then, when
from behave.runner import Context

from business_tier.config import StoreConfig
from business_tier.reporting_service import ReportingService
from pages.utils.station_view import StationFields, StationView


def split_list(text: str) -> list[str]:
    return [item.strip() for item in text.split(",") if item.strip()]


@given("the sample ridership store is loaded")  # type: ignore[reportCallIssue]
def step_sample_store_loaded(context: Context):
    """
    Creates the station view over the store built for this scenario.

    Args:
        context: The Behave context object.
    """
    service = ReportingService(StoreConfig(database_path=context.database_path))
    assert service.test_connection(), "Sample store could not be opened"
    context.view = StationView(service)


@when("I load all stations")  # type: ignore[reportCallIssue]
def step_load_stations(context: Context):
    context.view.load_stations()


@when("I load the top {n:d} stations")  # type: ignore[reportCallIssue]
def step_load_top_stations(context: Context, n: int):
    context.view.load_top_stations(n)


@when('I search for stations containing "{phrase}"')  # type: ignore[reportCallIssue]
def step_find_stations(context: Context, phrase: str):
    context.view.find_stations(phrase)


@when('I select the station "{station}"')  # type: ignore[reportCallIssue]
def step_select_station(context: Context, station: str):
    assert station in context.view.stations, f"{station} not in {context.view.stations}"
    context.view.select_station(station)


@when('I select the stop "{stop}"')  # type: ignore[reportCallIssue]
def step_select_stop(context: Context, stop: str):
    assert stop in context.view.stops, f"{stop} not in {context.view.stops}"
    context.view.select_stop(stop)


@when("I switch the stop accessibility")  # type: ignore[reportCallIssue]
def step_toggle_accessibility(context: Context):
    context.view.toggle_accessibility()
    assert context.view.error is None, context.view.error


@then('the total ridership shows "{value}"')  # type: ignore[reportCallIssue]
def step_total_ridership(context: Context, value: str):
    assert context.view.station_fields.total_ridership == value


@then('the average daily ridership shows "{value}"')  # type: ignore[reportCallIssue]
def step_average_ridership(context: Context, value: str):
    assert context.view.station_fields.avg_daily_ridership == value


@then(  # type: ignore[reportCallIssue]
    'the weekday, Saturday and Sunday ridership show "{weekday}", "{saturday}" and "{sunday}"'
)
def step_day_type_ridership(context: Context, weekday: str, saturday: str, sunday: str):
    fields = context.view.station_fields
    assert fields.weekday_ridership == weekday
    assert fields.saturday_ridership == saturday
    assert fields.sunday_holiday_ridership == sunday


@then('the stop is served by "{lines}"')  # type: ignore[reportCallIssue]
def step_stop_lines(context: Context, lines: str):
    assert context.view.stop_fields.lines == split_list(lines)


@then('the stop accessibility shows "{value}"')  # type: ignore[reportCallIssue]
def step_stop_accessibility(context: Context, value: str):
    assert context.view.stop_fields.accessible == value


@then('the stop location shows "{value}"')  # type: ignore[reportCallIssue]
def step_stop_location(context: Context, value: str):
    assert context.view.stop_fields.location == value


@then('the station list is "{stations}"')  # type: ignore[reportCallIssue]
def step_station_list(context: Context, stations: str):
    assert context.view.stations == split_list(stations), context.view.stations


@then('an error mentioning "{text}" is shown')  # type: ignore[reportCallIssue]
def step_error_shown(context: Context, text: str):
    assert context.view.error is not None and text in context.view.error


@then("the station fields are empty")  # type: ignore[reportCallIssue]
def step_station_fields_empty(context: Context):
    assert context.view.station_fields == StationFields()
    assert context.view.stops == []
