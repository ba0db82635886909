"""Weather data records, their JSON form and the weather controller interface."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple


def _field(obj: Any, key: str, where: str) -> Any:
    if not isinstance(obj, dict):
        raise ValueError(f"{where}: expected an object")
    try:
        return obj[key]
    except KeyError:
        raise ValueError(f"{where}: missing field {key!r}") from None


def _number(obj: Any, key: str, where: str) -> float:
    value = _field(obj, key, where)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{where}: field {key!r} must be a number")
    return float(value)


def _string(obj: Any, key: str, where: str) -> str:
    value = _field(obj, key, where)
    if not isinstance(value, str):
        raise ValueError(f"{where}: field {key!r} must be a string")
    return value


def _optional_string(obj: Any, key: str, where: str) -> Optional[str]:
    value = _field(obj, key, where)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{where}: field {key!r} must be a string or null")
    return value


@dataclass(frozen=True)
class CityData:
    """A city and its coordinates."""

    lat: float
    lon: float
    city_name: str

    @classmethod
    def from_dict(cls, obj: Any) -> "CityData":
        where = "CityData"
        return cls(
            lat=_number(obj, "lat", where),
            lon=_number(obj, "lon", where),
            city_name=_string(obj, "city_name", where),
        )

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lon": self.lon, "city_name": self.city_name}


class WeatherCondition(Enum):
    """The kind of weather shown by an icon."""

    UNKNOWN = "Unknown"
    SUNNY = "Sunny"
    PARTIALLY_CLOUDY = "PartiallyCloudy"
    MOSTLY_CLOUDY = "MostlyCloudy"
    CLOUDY = "Cloudy"
    SUNNY_RAINY = "SunnyRainy"
    RAINY = "Rainy"
    STORMY = "Stormy"
    SNOWY = "Snowy"
    FOGGY = "Foggy"

    @classmethod
    def parse(cls, value: Any) -> "WeatherCondition":
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown weather condition {value!r}") from None


@dataclass(frozen=True)
class TemperatureData:
    """Temperatures over the course of a day."""

    min: float = 0.0
    max: float = 0.0
    morning: float = 0.0
    day: float = 0.0
    evening: float = 0.0
    night: float = 0.0

    @classmethod
    def from_dict(cls, obj: Any) -> "TemperatureData":
        where = "TemperatureData"
        return cls(
            **{name: _number(obj, name, where) for name in ("min", "max", "morning", "day", "evening", "night")}
        )

    def to_dict(self) -> dict:
        return {
            "min": self.min,
            "max": self.max,
            "morning": self.morning,
            "day": self.day,
            "evening": self.evening,
            "night": self.night,
        }


@dataclass(frozen=True)
class PrecipitationData:
    """Chance and volume of precipitation."""

    probability: float = 0.0
    rain_volume: float = 0.0
    snow_volume: float = 0.0

    @classmethod
    def from_dict(cls, obj: Any) -> "PrecipitationData":
        where = "PrecipitationData"
        return cls(
            probability=_number(obj, "probability", where),
            rain_volume=_number(obj, "rain_volume", where),
            snow_volume=_number(obj, "snow_volume", where),
        )

    def to_dict(self) -> dict:
        return {
            "probability": self.probability,
            "rain_volume": self.rain_volume,
            "snow_volume": self.snow_volume,
        }


@dataclass(frozen=True)
class DayWeatherData:
    """The weather of one day."""

    condition: WeatherCondition = WeatherCondition.UNKNOWN
    description: str = ""
    current_temperature: float = 0.0
    detailed_temperature: TemperatureData = field(default_factory=TemperatureData)
    precipitation: PrecipitationData = field(default_factory=PrecipitationData)
    uv_index: float = 0.0

    @classmethod
    def from_dict(cls, obj: Any) -> "DayWeatherData":
        where = "DayWeatherData"
        return cls(
            condition=WeatherCondition.parse(_field(obj, "condition", where)),
            description=_string(obj, "description", where),
            current_temperature=_number(obj, "current_temperature", where),
            detailed_temperature=TemperatureData.from_dict(_field(obj, "detailed_temperature", where)),
            precipitation=PrecipitationData.from_dict(_field(obj, "precipitation", where)),
            uv_index=_number(obj, "uv_index", where),
        )

    def to_dict(self) -> dict:
        return {
            "condition": self.condition.value,
            "description": self.description,
            "current_temperature": self.current_temperature,
            "detailed_temperature": self.detailed_temperature.to_dict(),
            "precipitation": self.precipitation.to_dict(),
            "uv_index": self.uv_index,
        }


@dataclass(frozen=True)
class ForecastWeatherData:
    """The forecast for one named day."""

    day_name: str = ""
    weather_data: DayWeatherData = field(default_factory=DayWeatherData)

    @classmethod
    def from_dict(cls, obj: Any) -> "ForecastWeatherData":
        where = "ForecastWeatherData"
        return cls(
            day_name=_string(obj, "day_name", where),
            weather_data=DayWeatherData.from_dict(_field(obj, "weather_data", where)),
        )

    def to_dict(self) -> dict:
        return {"day_name": self.day_name, "weather_data": self.weather_data.to_dict()}


@dataclass(frozen=True)
class WeatherData:
    """Current weather and the forecast for the coming days."""

    current_data: DayWeatherData = field(default_factory=DayWeatherData)
    forecast_data: Tuple[ForecastWeatherData, ...] = ()

    @classmethod
    def from_dict(cls, obj: Any) -> "WeatherData":
        where = "WeatherData"
        forecast = _field(obj, "forecast_data", where)
        if not isinstance(forecast, list):
            raise ValueError(f"{where}: field 'forecast_data' must be a list")
        return cls(
            current_data=DayWeatherData.from_dict(_field(obj, "current_data", where)),
            forecast_data=tuple(ForecastWeatherData.from_dict(item) for item in forecast),
        )

    def to_dict(self) -> dict:
        return {
            "current_data": self.current_data.to_dict(),
            "forecast_data": [item.to_dict() for item in self.forecast_data],
        }


@dataclass(frozen=True)
class CityWeatherData:
    """A city together with its weather."""

    city_data: CityData
    weather_data: WeatherData = field(default_factory=WeatherData)

    @classmethod
    def from_dict(cls, obj: Any) -> "CityWeatherData":
        where = "CityWeatherData"
        return cls(
            city_data=CityData.from_dict(_field(obj, "city_data", where)),
            weather_data=WeatherData.from_dict(_field(obj, "weather_data", where)),
        )

    def to_dict(self) -> dict:
        return {"city_data": self.city_data.to_dict(), "weather_data": self.weather_data.to_dict()}


@dataclass(frozen=True)
class GeoLocationData:
    """A place found by a location search."""

    name: str
    lat: float
    lon: float
    country: str
    state: Optional[str] = None

    @classmethod
    def from_dict(cls, obj: Any) -> "GeoLocationData":
        where = "GeoLocationData"
        return cls(
            name=_string(obj, "name", where),
            lat=_number(obj, "lat", where),
            lon=_number(obj, "lon", where),
            country=_string(obj, "country", where),
            state=_optional_string(obj, "state", where),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "lat": self.lat,
            "lon": self.lon,
            "country": self.country,
            "state": self.state,
        }


class WeatherController(ABC):
    """Source of weather data for a list of cities. Failures raise exceptions."""

    @abstractmethod
    def load(self) -> None:
        """Load the stored list of cities."""

    @abstractmethod
    def save(self) -> None:
        """Store the list of cities."""

    @abstractmethod
    def refresh_cities(self) -> List[CityWeatherData]:
        """Return up-to-date weather for every city."""

    @abstractmethod
    def add_city(self, city: CityData) -> Optional[CityWeatherData]:
        """Add a city; return its weather, or None if it was already present."""

    @abstractmethod
    def reorder_cities(self, index: int, new_index: int) -> None:
        """Swap the cities at ``index`` and ``new_index``."""

    @abstractmethod
    def remove_city(self, index: int) -> None:
        """Remove the city at ``index``."""

    @abstractmethod
    def search_location(self, query: str) -> List[GeoLocationData]:
        """Return places matching ``query``."""


def city_weather_list_from_json(text: str) -> List[CityWeatherData]:
    """Parse a JSON array of city weather records; raise ValueError if malformed."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("expected a JSON array of city weather data")
    return [CityWeatherData.from_dict(item) for item in data]


def city_weather_list_to_json(items: Iterable[CityWeatherData]) -> str:
    """Serialize city weather records to a JSON array."""
    return json.dumps([item.to_dict() for item in items])


_ICON_CONDITIONS = {
    "01": WeatherCondition.SUNNY,
    "02": WeatherCondition.PARTIALLY_CLOUDY,
    "03": WeatherCondition.MOSTLY_CLOUDY,
    "04": WeatherCondition.CLOUDY,
    "10": WeatherCondition.SUNNY_RAINY,
    "09": WeatherCondition.RAINY,
    "11": WeatherCondition.STORMY,
    "13": WeatherCondition.SNOWY,
    "50": WeatherCondition.FOGGY,
}


def weather_condition_from_icon(icon_type: str) -> WeatherCondition:
    """Map a weather service icon code such as ``"01d"`` to a condition."""
    if len(icon_type) == 3 and icon_type[2] in ("d", "n"):
        return _ICON_CONDITIONS.get(icon_type[:2], WeatherCondition.UNKNOWN)
    return WeatherCondition.UNKNOWN


def unique_locations(locations: Iterable[GeoLocationData]) -> List[GeoLocationData]:
    """Drop locations whose name, country and state repeat an earlier one."""
    seen = set()
    result = []
    for location in locations:
        key = (location.name, location.country, location.state)
        if key not in seen:
            seen.add(key)
            result.append(location)
    return result