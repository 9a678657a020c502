"""Task add, lookup, update and delete."""

from organizer.application.ports import RecordRepository
from organizer.domain import Task
from organizer.infrastructure.memory_repository import task_repository


class TaskService:
    """CRUD over tasks keyed by task id."""

    def __init__(self, repository: RecordRepository[Task] | None = None) -> None:
        self._repo = repository if repository is not None else task_repository()

    def add_task(self, task: Task) -> None:
        self._repo.add(task)

    def get_task(self, task_id: str) -> Task | None:
        return self._repo.get(task_id)

    def require_task(self, task_id: str) -> Task:
        return self._repo.require(task_id)

    def list_tasks(self) -> list[Task]:
        return self._repo.list_all()

    def update_task(
        self,
        task_id: str,
        name: str | None = None,
        description: str | None = None,
    ) -> None:
        self._repo.update(task_id, name=name, description=description)

    def delete_task(self, task_id: str) -> None:
        self._repo.delete(task_id)

    def task_exists(self, task_id: str) -> bool:
        return self._repo.exists(task_id)
