"""
Adapter: Task persistence.

Implements the TaskRepository port.
Stores tasks in the ``tasks`` table and their ordered tag links
in ``task_tags``. Each save runs in a single transaction.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection, Engine

from todoapp.domain.tasks.entities import Location, Tag, Task
from todoapp.domain.tasks.ports import TaskRepository
from todoapp.infrastructure.tasks.schema import tags, task_tags, tasks

logger = logging.getLogger(__name__)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive timestamps (SQLite drops the offset)."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _task_values(task: Task) -> dict[str, Any]:
    location = task.location or Location()
    return {
        "title": task.title,
        "description": task.description,
        "user_id": task.user_id,
        "category_id": task.category_id,
        "done": task.done,
        "canceled_at": task.canceled_at,
        "created_at": task.created_at,
        "location_latitude": location.latitude,
        "location_longitude": location.longitude,
        "location_name": location.name,
        "location_description": location.description,
    }


def _row_to_task(row: Any, task_tag_list: list[Tag]) -> Task:
    location = Location(
        latitude=row.location_latitude,
        longitude=row.location_longitude,
        name=row.location_name,
        description=row.location_description,
    )
    return Task(
        id=row.id,
        title=row.title,
        description=row.description,
        user_id=row.user_id,
        category_id=row.category_id,
        done=bool(row.done),
        canceled_at=_as_utc(row.canceled_at),
        created_at=_as_utc(row.created_at),
        location=None if location.is_empty else location,
        tags=task_tag_list,
    )


class TaskRepositoryAdapter(TaskRepository):
    """Persists tasks and their tag links through a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_id(self, task_id: int) -> Optional[Task]:
        """Return a task with its tags, or None if not found."""
        with self._engine.connect() as conn:
            row = conn.execute(select(tasks).where(tasks.c.id == task_id)).first()
            if row is None:
                return None
            tags_by_task = self._load_tags(conn, [task_id])
        return _row_to_task(row, tags_by_task.get(task_id, []))

    def save(self, task: Task) -> Task:
        """Insert or update a task and rewrite its tag links atomically."""
        values = _task_values(task)
        with self._engine.begin() as conn:
            if task.id is None:
                result = conn.execute(insert(tasks).values(**values))
                task.id = result.inserted_primary_key[0]
            else:
                conn.execute(update(tasks).where(tasks.c.id == task.id).values(**values))
                conn.execute(delete(task_tags).where(task_tags.c.task_id == task.id))

            if task.tags:
                conn.execute(
                    insert(task_tags),
                    [
                        {"task_id": task.id, "tag_id": tag.id, "position": position}
                        for position, tag in enumerate(task.tags)
                    ],
                )

        logger.debug("Saved task id=%d with %d tags.", task.id, len(task.tags))
        return task

    def list_active(self, user_id: Optional[int] = None) -> list[Task]:
        """Return non-cancelled tasks ordered by ID, optionally for one user."""
        query = select(tasks).where(tasks.c.canceled_at.is_(None))
        if user_id is not None:
            query = query.where(tasks.c.user_id == user_id)
        query = query.order_by(tasks.c.id)

        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()
            tags_by_task = self._load_tags(conn, [row.id for row in rows])

        return [_row_to_task(row, tags_by_task.get(row.id, [])) for row in rows]

    def delete_all(self) -> None:
        with self._engine.begin() as conn:
            conn.execute(delete(task_tags))
            conn.execute(delete(tasks))

    @staticmethod
    def _load_tags(conn: Connection, task_ids: list[int]) -> dict[int, list[Tag]]:
        if not task_ids:
            return {}
        query = (
            select(task_tags.c.task_id, tags.c.id, tags.c.name, tags.c.user_id)
            .join(tags, tags.c.id == task_tags.c.tag_id)
            .where(task_tags.c.task_id.in_(task_ids))
            .order_by(task_tags.c.task_id, task_tags.c.position)
        )
        result: dict[int, list[Tag]] = {}
        for row in conn.execute(query):
            result.setdefault(row.task_id, []).append(
                Tag(id=row.id, name=row.name, user_id=row.user_id)
            )
        return result
