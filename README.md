# todoweather

The logic behind two small user interfaces. It does not depend on any
toolkit, so it can be used and tested on its own:

* a **to-do list**: task, date and time models, repositories that hold them,
  and controllers that a view talks to;
* a **weather forecast**: city and forecast data records with a JSON form, a
  controller interface with an offline implementation that serves data it is
  given, and helpers that turn a forecast into what a view shows.

The package has no runtime dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## To-do list

```python
from todoweather.repositories import task_repo, date_time_repo
from todoweather.controllers import TaskListController, CreateTaskController
from todoweather.task_view import task_to_item

tasks = TaskListController(task_repo())
model = tasks.task_model()

# listeners get (kind, row, count); kind is "changed", "removed" or "added"
model.add_listener(lambda kind, row, count: print(kind, row, count))
tasks.create_task("Write the report", 1717686537151)
tasks.toggle_done(0)
tasks.remove_task(1)

for task in model:
    item = task_to_item(task)
    print(item.checked, item.text, item.description)
    # e.g. "False Learn Rust Thu, Jun 06, 2024 15:08"

create = CreateTaskController(date_time_repo())
print(create.date_string(create.current_date()))   # "2024/6/11"
print(create.time_string(create.current_time()))   # "16:43"

create.on_back(lambda: print("going back"))
create.back()
```

* `todoweather.models` has the frozen dataclasses `DateModel`, `TimeModel`
  and `TaskModel` (`due_date` in milliseconds since the epoch).
* `todoweather.repositories` defines the `DateTimeRepository` and
  `TaskRepository` interfaces and the in-memory `MockDateTimeRepository`
  (fixed date, time and time stamp) and `MockTaskRepository`.
  `date_time_repo()` and `task_repo()` return ready-filled instances.
  Out-of-range indexes make `get_task` return `None` and `toggle_done` /
  `remove_task` return `False`.
* `todoweather.controllers.TaskListModel` exposes `row_count()`,
  `row_data(row)`, `len()` and iteration, and tells listeners about changes
  only when the repository accepted them.
* `todoweather.callback.Callback` holds one handler; `invoke` calls it and
  returns its result, or a default when nothing is connected.
* `todoweather.task_view.format_due_date` formats a millisecond UTC time as
  `Thu, Jun 06, 2024 16:29` and raises `ValueError` when it is out of range.

## Weather

```python
from todoweather.dummy_weather import DummyWeatherController
from todoweather.forecast_graph import forecast_graph_command

with open("cities.json", encoding="utf-8") as handle:
    controller = DummyWeatherController(handle.read())
controller.load()
cities = controller.refresh_cities()

for city in cities:
    print(city.city_data.city_name, city.weather_data.current_data.description)
    for day in city.weather_data.forecast_data:
        print(day.day_name, day.weather_data.detailed_temperature.day)

    temperatures = [
        day.weather_data.detailed_temperature.day
        for day in city.weather_data.forecast_data
    ]
    path = forecast_graph_command(temperatures, 5, 300.0, 100.0)
```

`DummyWeatherController` takes a JSON array of city weather records (the form
written by `city_weather_list_to_json`); with no argument it starts empty.
`load()` parses it and renames the forecast days: the first is "Today", the
rest get a short weekday name ("Mon" … "Sun"), or "Today" again if the day of
the month matches today's. Malformed JSON is logged and yields no cities.
The controller can reorder and remove cities (a bad index raises
`IndexError`); `add_city` and `search_location` raise
`UnsupportedOperationError`.

`forecast_graph_command` returns an SVG-style path: four moves marking the
bounding box, then pairs of quadratic curves joining the day temperatures. It
returns an empty string when the day count, width or height is zero.

`todoweather.weather_data` also offers `city_weather_list_from_json` (raises
`ValueError` on malformed input) and `city_weather_list_to_json`,
`weather_condition_from_icon` for mapping icon codes such as `"01d"` to a
`WeatherCondition`, and `unique_locations` for dropping search results whose
name, country and state repeat an earlier one. `todoweather.day_names` has
`get_day_from_datetime`.

## What the package does not do

* It draws no screens: there is no window, widget or command to start; a view
  has to be built on top of the controllers.
* It does not fetch weather from any online service and cannot search for
  places; the only `WeatherController` provided is the offline one.
* It stores nothing: tasks live in memory, and `DummyWeatherController.save()`
  does nothing.