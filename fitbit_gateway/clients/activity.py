"""Fitbit activity endpoints.

Statistics, time series, daily summaries, goals, activity logging,
favorites and the public activity catalog. Every method builds a resource
path (plus form parameters for logging) and hands it to the executor; the
response is returned as the executor parsed it.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional, Union

from fitbit_gateway.clients.base import EndpointGateway
from fitbit_gateway.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

RESOURCE_PATH_CALORIES = 'calories'
RESOURCE_PATH_CALORIES_BMR = 'caloriesBMR'
RESOURCE_PATH_STEPS = 'steps'
RESOURCE_PATH_DISTANCE = 'distance'
RESOURCE_PATH_FLOORS = 'floors'
RESOURCE_PATH_ELEVATION = 'elevation'
RESOURCE_PATH_MINUTES_SEDENTARY = 'minutesSedentary'
RESOURCE_PATH_MINUTES_LIGHTLY_ACTIVE = 'minutesLightlyActive'
RESOURCE_PATH_MINUTES_FAIRLY_ACTIVE = 'minutesFairlyActive'
RESOURCE_PATH_MINUTES_VERY_ACTIVE = 'minutesVeryActive'
RESOURCE_PATH_ACTIVITY_CALORIES = 'activityCalories'

# Tracker variants only count data measured by the device, not manual logs
RESOURCE_PATH_TRACKER_CALORIES = 'tracker/calories'
RESOURCE_PATH_TRACKER_CALORIES_BMR = 'tracker/caloriesBMR'
RESOURCE_PATH_TRACKER_STEPS = 'tracker/steps'
RESOURCE_PATH_TRACKER_DISTANCE = 'tracker/distance'
RESOURCE_PATH_TRACKER_FLOORS = 'tracker/floors'
RESOURCE_PATH_TRACKER_ELEVATION = 'tracker/elevation'
RESOURCE_PATH_TRACKER_MINUTES_SEDENTARY = 'tracker/minutesSedentary'
RESOURCE_PATH_TRACKER_MINUTES_LIGHTLY_ACTIVE = 'tracker/minutesLightlyActive'
RESOURCE_PATH_TRACKER_MINUTES_FAIRLY_ACTIVE = 'tracker/minutesFairlyActive'
RESOURCE_PATH_TRACKER_MINUTES_VERY_ACTIVE = 'tracker/minutesVeryActive'
RESOURCE_PATH_TRACKER_ACTIVITY_CALORIES = 'tracker/activityCalories'

RESOURCE_PATHS = (
    RESOURCE_PATH_CALORIES,
    RESOURCE_PATH_CALORIES_BMR,
    RESOURCE_PATH_STEPS,
    RESOURCE_PATH_DISTANCE,
    RESOURCE_PATH_FLOORS,
    RESOURCE_PATH_ELEVATION,
    RESOURCE_PATH_MINUTES_SEDENTARY,
    RESOURCE_PATH_MINUTES_LIGHTLY_ACTIVE,
    RESOURCE_PATH_MINUTES_FAIRLY_ACTIVE,
    RESOURCE_PATH_MINUTES_VERY_ACTIVE,
    RESOURCE_PATH_ACTIVITY_CALORIES,
)

TRACKER_RESOURCE_PATHS = tuple(f"tracker/{path}" for path in RESOURCE_PATHS)

DISTANCE_UNITS = frozenset({
    'Centimeter',
    'Foot',
    'Inch',
    'Kilometer',
    'Meter',
    'Mile',
    'Millimeter',
    'Steps',
    'Yards',
})

DateLike = Union[date, datetime]


def format_date(value: DateLike) -> str:
    """Format a date as ``YYYY-MM-DD``, year padded to four digits."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_time(value: DateLike) -> str:
    """Format the time of day as ``HH:MM``; plain dates give ``00:00``."""
    return f"{getattr(value, 'hour', 0):02d}:{getattr(value, 'minute', 0):02d}"


@dataclass(frozen=True)
class ActivityLogEntry:
    """An activity to be logged.

    Either ``activity_id`` (an activity or intensity level from the
    catalog) or a free-text ``activity_name`` identifies the activity;
    when a name is given the ID is ignored.
    """

    start: DateLike
    duration_millis: int
    activity_id: Optional[Union[int, str]] = None
    activity_name: Optional[str] = None
    calories: Optional[int] = None
    distance: Optional[float] = None
    distance_unit: Optional[str] = None

    def to_parameters(self) -> Dict[str, Any]:
        """Form parameters for the log activity call."""
        parameters: Dict[str, Any] = {
            'date': format_date(self.start),
            'startTime': format_time(self.start),
        }

        if self.activity_name is not None:
            parameters['activityName'] = self.activity_name
            # Sent even when unset; named activities have always carried it
            parameters['manualCalories'] = self.calories
        else:
            parameters['activityId'] = self.activity_id
            if self.calories is not None:
                parameters['manualCalories'] = self.calories

        parameters['durationMillis'] = self.duration_millis

        if self.distance is not None:
            parameters['distance'] = self.distance

        if self.distance_unit is not None:
            if self.distance_unit in DISTANCE_UNITS:
                parameters['distanceUnit'] = self.distance_unit
            else:
                logger.debug(f"Dropping unknown distance unit: {self.distance_unit}")

        return parameters


class ActivityGateway(EndpointGateway):
    """Gateway for the activity resource family."""

    def get_activity_stats(self) -> Any:
        """Lifetime tracker statistics plus totals including manual log entries."""
        return self.make_api_request(f"user/{self.user_id}/activities")

    def get_time_series(
        self,
        resource_path: str,
        start_date: DateLike,
        end_date: Optional[DateLike] = None,
        end_date_period: Optional[str] = None,
    ) -> Any:
        """Per-day values of ``resource_path`` from ``start_date``.

        The range ends at ``end_date_period`` (e.g. ``7d``, ``1m``) when
        given, otherwise at ``end_date``.
        """
        if end_date is None and end_date_period is None:
            raise InvalidArgumentError("end_date or end_date_period must be provided")

        if end_date_period is None:
            end_date_period = format_date(end_date)

        resource = resource_path.strip('/')
        if not resource:
            raise InvalidArgumentError("resource_path must not be empty")

        return self.make_api_request(
            f"user/{self.user_id}/activities/{resource}"
            f"/date/{format_date(start_date)}/{end_date_period}"
        )

    def get_activities(self, day: Optional[DateLike], date_str: Optional[str] = None) -> Any:
        """Activity summary and log entries for one day.

        ``date_str`` is used verbatim instead of formatting ``day``.
        """
        if date_str is None:
            if day is None:
                raise InvalidArgumentError("day or date_str must be provided")
            date_str = format_date(day)

        return self.make_api_request(f"user/{self.user_id}/activities/date/{date_str}")

    def get_recent_activities(self) -> Any:
        return self.make_api_request('user/-/activities/recent')

    def get_frequent_activities(self) -> Any:
        return self.make_api_request('user/-/activities/frequent')

    def get_favorite_activities(self) -> Any:
        return self.make_api_request('user/-/activities/favorite')

    def get_daily_goals(self) -> Any:
        return self.make_api_request('user/-/activities/goals/daily')

    def get_weekly_goals(self) -> Any:
        return self.make_api_request('user/-/activities/goals/weekly')

    def log_activity(
        self,
        start: DateLike,
        activity_id: Optional[Union[int, str]],
        duration: int,
        calories: Optional[int] = None,
        distance: Optional[float] = None,
        distance_unit: Optional[str] = None,
        activity_name: Optional[str] = None,
    ) -> Any:
        """Log an activity.

        Args:
            start: Activity date and start time, in the user's timezone
            activity_id: Activity (or intensity level) ID from the catalog
            duration: Duration in milliseconds
            calories: Manual calories overriding the service's estimate
            distance: Distance in the unit system of the account
            distance_unit: One of ``DISTANCE_UNITS``; anything else is dropped
            activity_name: Free-text name, used instead of ``activity_id``
        """
        entry = ActivityLogEntry(
            start=start,
            duration_millis=duration,
            activity_id=activity_id,
            activity_name=activity_name,
            calories=calories,
            distance=distance,
            distance_unit=distance_unit,
        )
        return self.log_activity_entry(entry)

    def log_activity_entry(self, entry: ActivityLogEntry) -> Any:
        return self.make_api_request('user/-/activities', 'POST', entry.to_parameters())

    def delete_activity(self, activity_log_id: Union[int, str]) -> bool:
        """Delete a logged activity; returns ``True`` on success."""
        return self.make_api_request(f"user/-/activities/{activity_log_id}", 'DELETE')

    def add_favorite_activity(self, activity_id: Union[int, str]) -> Any:
        return self.make_api_request(f"user/-/activities/log/favorite/{activity_id}", 'POST')

    def delete_favorite_activity(self, activity_id: Union[int, str]) -> Any:
        return self.make_api_request(f"user/-/activities/log/favorite/{activity_id}", 'DELETE')

    def get_activity(self, activity_id: Union[int, str]) -> Any:
        """Catalog entry for one activity."""
        return self.make_api_request(f"activities/{activity_id}")

    def browse_activities(self) -> Any:
        """Tree of public activities plus the user's private custom ones."""
        return self.make_api_request('activities')
