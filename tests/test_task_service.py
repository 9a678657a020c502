"""Unit tests for TaskService."""

import pytest

from organizer.application import TaskService
from organizer.domain import InvalidArgument, RecordNotFound, Task


def _service() -> TaskService:
    return TaskService()


def test_add_and_get_task() -> None:
    service = _service()
    service.add_task(Task("1", "Task1", "Description1"))
    task = service.get_task("1")
    assert task is not None
    assert task.name == "Task1"
    assert task.description == "Description1"
    assert service.require_task("1") is task
    assert service.task_exists("1")


def test_add_none_and_duplicate_rejected() -> None:
    service = _service()
    with pytest.raises(InvalidArgument, match="Task cannot be null"):
        service.add_task(None)
    service.add_task(Task("1", "Task1", "Description1"))
    with pytest.raises(InvalidArgument, match="Task ID already exists"):
        service.add_task(Task("1", "Task2", "Description2"))


def test_get_unknown_task() -> None:
    service = _service()
    assert service.get_task("9") is None
    with pytest.raises(RecordNotFound, match="Task ID does not exist"):
        service.require_task("9")


def test_update_task() -> None:
    service = _service()
    service.add_task(Task("1", "Task1", "Description1"))
    service.update_task("1", name="Renamed")
    task = service.get_task("1")
    assert task.name == "Renamed"
    assert task.description == "Description1"

    service.update_task("1", description="New description")
    assert task.description == "New description"


def test_update_task_invalid_name_rejected() -> None:
    service = _service()
    service.add_task(Task("1", "Task1", "Description1"))
    with pytest.raises(InvalidArgument, match="Invalid Name"):
        service.update_task("1", name="ThisNameIsTooLong")
    assert service.get_task("1").name == "Task1"


def test_update_and_delete_unknown_task_rejected() -> None:
    service = _service()
    with pytest.raises(InvalidArgument, match="Task ID does not exist"):
        service.update_task("9", name="x")
    with pytest.raises(InvalidArgument, match="Task ID does not exist"):
        service.delete_task("9")


def test_list_and_delete_tasks() -> None:
    service = _service()
    service.add_task(Task("1", "Task1", "Description1"))
    service.add_task(Task("2", "Task2", "Description2"))
    assert len(service.list_tasks()) == 2
    service.delete_task("1")
    assert [t.id for t in service.list_tasks()] == ["2"]
    assert not service.task_exists("1")
