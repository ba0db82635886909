import pytest

from todoweather.controllers import (
    CreateTaskController,
    TaskListController,
    TaskListModel,
)
from todoweather.models import DateModel, TaskModel, TimeModel
from todoweather.repositories import MockDateTimeRepository, MockTaskRepository


@pytest.fixture
def create_controller():
    return CreateTaskController(
        MockDateTimeRepository(
            DateModel(year=2024, month=6, day=12),
            TimeModel(hour=13, minute=30, second=29),
            15,
        )
    )


@pytest.fixture
def list_controller():
    return TaskListController(
        MockTaskRepository(
            [
                TaskModel(title="Item 1", due_date=1, done=True),
                TaskModel(title="Item 2", due_date=1, done=False),
            ]
        )
    )


def test_current_date(create_controller):
    assert create_controller.current_date() == DateModel(year=2024, month=6, day=12)


def test_current_time(create_controller):
    assert create_controller.current_time() == TimeModel(hour=13, minute=30, second=29)


def test_date_string(create_controller):
    assert create_controller.date_string(DateModel(year=2020, month=10, day=5)) == "2020/10/5"


def test_time_string(create_controller):
    assert create_controller.time_string(TimeModel(hour=10, minute=12, second=55)) == "10:12"


def test_back(create_controller):
    invoked = []
    create_controller.on_back(lambda: invoked.append(True))
    create_controller.back()
    assert invoked == [True]


def test_back_without_handler_does_nothing(create_controller):
    invoked = []
    create_controller.back()
    create_controller.on_back(lambda: invoked.append(True))
    assert invoked == []


def test_time_stamp(create_controller):
    assert create_controller.time_stamp(DateModel(), TimeModel()) == 15


def test_tasks(list_controller):
    model = list_controller.task_model()
    assert model.row_count() == 2
    assert model.row_data(0) == TaskModel(title="Item 1", due_date=1, done=True)
    assert model.row_data(1) == TaskModel(title="Item 2", due_date=1, done=False)


def test_toggle_task_checked(list_controller):
    model = list_controller.task_model()
    assert model.row_data(0).done
    list_controller.toggle_done(0)
    assert not model.row_data(0).done


def test_remove_task(list_controller):
    model = list_controller.task_model()
    assert model.row_count() == 2
    list_controller.remove_task(0)
    assert model.row_count() == 1
    assert model.row_data(0) == TaskModel(title="Item 2", due_date=1, done=False)


def test_show_create_task(list_controller):
    invoked = []
    list_controller.on_show_create_task(lambda: invoked.append(True))
    list_controller.show_create_task()
    assert invoked == [True]


def test_add_task(list_controller):
    model = list_controller.task_model()
    assert model.row_count() == 2
    list_controller.create_task("Item 3", 3)
    assert model.row_count() == 3
    assert model.row_data(2) == TaskModel(title="Item 3", due_date=3, done=False)


def test_listener_notifications(list_controller):
    events = []
    list_controller.task_model().add_listener(lambda *event: events.append(event))
    list_controller.toggle_done(1)
    list_controller.create_task("Item 3", 3)
    list_controller.remove_task(0)
    assert events == [("changed", 1, 1), ("added", 2, 1), ("removed", 0, 1)]


def test_no_notification_for_invalid_index(list_controller):
    events = []
    list_controller.task_model().add_listener(lambda *event: events.append(event))
    list_controller.toggle_done(7)
    list_controller.remove_task(7)
    assert events == []
    assert list_controller.task_model().row_count() == 2


def test_model_len_and_iteration():
    model = TaskListModel(MockTaskRepository([TaskModel(title="a"), TaskModel(title="b")]))
    assert len(model) == 2
    assert [task.title for task in model] == ["a", "b"]
    assert model.row_data(2) is None