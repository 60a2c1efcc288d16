"""Task repository: per-owner task lists."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taskboard.models import Task
from taskboard.services.errors import StorageError, ValidationError


class TaskRepository:
    """Tasks scoped to an owning user; every query filters on owner_id."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_tasks(self, owner_id: int) -> list[Task]:
        """All tasks of the owner in insertion order."""
        try:
            return (
                self.session.query(Task)
                .filter(Task.owner_id == owner_id)
                .order_by(Task.id)
                .all()
            )
        except SQLAlchemyError as e:
            raise StorageError("Failed to fetch tasks") from e

    def add_task(self, owner_id: int, text: str | None) -> int:
        if not text:
            raise ValidationError("Task required")
        task = Task(owner_id=owner_id, text=text)
        self.session.add(task)
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageError("Add failed") from e
        return task.id

    def delete_task(self, task_id: int, owner_id: int) -> None:
        """
        Delete the task if the owner matches.

        A task that does not exist and a task owned by someone else are both
        reported as success.
        """
        try:
            (
                self.session.query(Task)
                .filter(Task.id == task_id, Task.owner_id == owner_id)
                .delete(synchronize_session=False)
            )
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StorageError("Delete failed") from e
