import json

import pytest

from todoweather.weather_data import (
    CityData,
    CityWeatherData,
    DayWeatherData,
    ForecastWeatherData,
    GeoLocationData,
    PrecipitationData,
    TemperatureData,
    WeatherCondition,
    WeatherController,
    WeatherData,
    city_weather_list_from_json,
    city_weather_list_to_json,
    unique_locations,
    weather_condition_from_icon,
)


def _sample_city(name="Berlin", condition=WeatherCondition.SUNNY):
    day = DayWeatherData(
        condition=condition,
        description="clear sky",
        current_temperature=21.5,
        detailed_temperature=TemperatureData(10.0, 25.0, 12.0, 22.0, 18.0, 11.0),
        precipitation=PrecipitationData(0.2, 1.5, 0.0),
        uv_index=4.0,
    )
    forecast = (
        ForecastWeatherData(day_name="Today", weather_data=day),
        ForecastWeatherData(day_name="Tue", weather_data=DayWeatherData()),
    )
    return CityWeatherData(
        city_data=CityData(lat=52.5, lon=13.4, city_name=name),
        weather_data=WeatherData(current_data=day, forecast_data=forecast),
    )


def test_round_trip_preserves_records():
    items = [_sample_city(), _sample_city("Oslo", WeatherCondition.SNOWY)]
    assert city_weather_list_from_json(city_weather_list_to_json(items)) == items


def test_condition_serialized_as_variant_name():
    text = city_weather_list_to_json([_sample_city()])
    data = json.loads(text)
    assert data[0]["weather_data"]["current_data"]["condition"] == "Sunny"
    assert data[0]["city_data"]["city_name"] == "Berlin"


def test_integers_accepted_as_numbers():
    data = json.loads(city_weather_list_to_json([_sample_city()]))
    data[0]["city_data"]["lat"] = 52
    parsed = city_weather_list_from_json(json.dumps(data))
    assert parsed[0].city_data.lat == 52.0


def test_missing_field_rejected():
    data = json.loads(city_weather_list_to_json([_sample_city()]))
    del data[0]["weather_data"]["current_data"]["uv_index"]
    with pytest.raises(ValueError):
        city_weather_list_from_json(json.dumps(data))


def test_unknown_condition_rejected():
    data = json.loads(city_weather_list_to_json([_sample_city()]))
    data[0]["weather_data"]["current_data"]["condition"] = "Hail"
    with pytest.raises(ValueError):
        city_weather_list_from_json(json.dumps(data))


def test_non_array_rejected():
    with pytest.raises(ValueError):
        city_weather_list_from_json("{}")


def test_invalid_json_rejected():
    with pytest.raises(ValueError):
        city_weather_list_from_json("not json")


def test_empty_list_round_trip():
    assert city_weather_list_from_json(city_weather_list_to_json([])) == []


@pytest.mark.parametrize(
    "icon, expected",
    [
        ("01d", WeatherCondition.SUNNY),
        ("01n", WeatherCondition.SUNNY),
        ("02d", WeatherCondition.PARTIALLY_CLOUDY),
        ("03n", WeatherCondition.MOSTLY_CLOUDY),
        ("04d", WeatherCondition.CLOUDY),
        ("10n", WeatherCondition.SUNNY_RAINY),
        ("09d", WeatherCondition.RAINY),
        ("11d", WeatherCondition.STORMY),
        ("13n", WeatherCondition.SNOWY),
        ("50d", WeatherCondition.FOGGY),
        ("05d", WeatherCondition.UNKNOWN),
        ("01x", WeatherCondition.UNKNOWN),
        ("", WeatherCondition.UNKNOWN),
    ],
)
def test_weather_condition_from_icon(icon, expected):
    assert weather_condition_from_icon(icon) is expected


def test_default_condition_is_unknown():
    assert DayWeatherData().condition is WeatherCondition.UNKNOWN


def test_unique_locations_keeps_first_of_each():
    first = GeoLocationData("Paris", 48.8, 2.3, "FR", None)
    duplicate = GeoLocationData("Paris", 48.9, 2.4, "FR", None)
    texas = GeoLocationData("Paris", 33.6, -95.5, "US", "Texas")
    tennessee = GeoLocationData("Paris", 36.3, -88.3, "US", "Tennessee")
    result = unique_locations([first, duplicate, texas, tennessee, texas])
    assert result == [first, texas, tennessee]


def test_geo_location_round_trip():
    location = GeoLocationData("Paris", 33.6, -95.5, "US", "Texas")
    assert GeoLocationData.from_dict(location.to_dict()) == location


def test_weather_controller_is_abstract():
    with pytest.raises(TypeError):
        WeatherController()