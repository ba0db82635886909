"""A weather controller that serves fixed data instead of querying a service."""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from .day_names import get_day_from_datetime
from .weather_data import (
    CityData,
    CityWeatherData,
    GeoLocationData,
    WeatherController,
    city_weather_list_from_json,
)

_log = logging.getLogger(__name__)


class UnsupportedOperationError(NotImplementedError):
    """Raised for operations the dummy controller does not provide."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DummyWeatherController(WeatherController):
    """Serves city weather parsed from a JSON document, with day names set to the coming days."""

    def __init__(self, json_data: str = "[]", clock: Optional[Callable[[], datetime]] = None) -> None:
        self._json_data = json_data
        self._clock = clock or _utc_now
        self._city_weather_data: List[CityWeatherData] = []

    def _generate_data(self) -> List[CityWeatherData]:
        try:
            cities = city_weather_list_from_json(self._json_data)
        except ValueError as error:
            _log.warning("Cannot read dummy weather data! Error: %s", error)
            return []

        now = self._clock()
        today = now.astimezone()

        def day_name(index: int) -> str:
            if index == 0:
                return "Today"
            return get_day_from_datetime(now + timedelta(days=index), today)

        result = []
        for city in cities:
            forecast = tuple(
                dataclasses.replace(item, day_name=day_name(index))
                for index, item in enumerate(city.weather_data.forecast_data)
            )
            weather = dataclasses.replace(city.weather_data, forecast_data=forecast)
            result.append(dataclasses.replace(city, weather_data=weather))
        return result

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._city_weather_data):
            raise IndexError(f"city index {index} out of range")

    def load(self) -> None:
        self._city_weather_data = self._generate_data()

    def save(self) -> None:
        """Succeed without storing anything; dummy data lives in memory only."""
        _log.debug(
            "Dummy weather data is not persisted (%d cities in memory)",
            len(self._city_weather_data),
        )

    def refresh_cities(self) -> List[CityWeatherData]:
        """Return a copy of the cities currently held."""
        return list(self._city_weather_data)

    def add_city(self, city: CityData) -> Optional[CityWeatherData]:
        _log.debug("Refusing to add city %r to dummy data", city.city_name)
        raise UnsupportedOperationError(
            f"adding city {city.city_name!r} is not supported for dummy data"
        )

    def reorder_cities(self, index: int, new_index: int) -> None:
        self._check_index(index)
        self._check_index(new_index)
        data = self._city_weather_data
        data[index], data[new_index] = data[new_index], data[index]

    def remove_city(self, index: int) -> None:
        self._check_index(index)
        del self._city_weather_data[index]

    def search_location(self, query: str) -> List[GeoLocationData]:
        _log.debug("Refusing location search for %r on dummy data", query)
        raise UnsupportedOperationError(
            f"searching for {query!r} is not supported for dummy data"
        )