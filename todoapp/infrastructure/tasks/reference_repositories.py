"""
Adapters: User, category and tag persistence.

Implement the UserRepository, CategoryRepository and TagRepository ports
on top of a SQLAlchemy engine.
"""

import logging
from typing import Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.engine import Engine

from todoapp.domain.tasks.entities import Category, Tag, User
from todoapp.domain.tasks.ports import CategoryRepository, TagRepository, UserRepository
from todoapp.infrastructure.tasks.schema import categories, tags, users

logger = logging.getLogger(__name__)


class UserRepositoryAdapter(UserRepository):
    """Persists users to the ``users`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_id(self, user_id: int) -> Optional[User]:
        with self._engine.connect() as conn:
            row = conn.execute(select(users).where(users.c.id == user_id)).first()
        if row is None:
            return None
        return User(id=row.id, name=row.name, email=row.email)

    def save(self, user: User) -> User:
        with self._engine.begin() as conn:
            result = conn.execute(insert(users).values(name=user.name, email=user.email))
            user_id = result.inserted_primary_key[0]
        logger.debug("Saved user id=%d.", user_id)
        return User(id=user_id, name=user.name, email=user.email)

    def delete_all(self) -> None:
        with self._engine.begin() as conn:
            conn.execute(delete(users))


class CategoryRepositoryAdapter(CategoryRepository):
    """Persists categories to the ``categories`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_id(self, category_id: int) -> Optional[Category]:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(categories).where(categories.c.id == category_id)
            ).first()
        if row is None:
            return None
        return Category(id=row.id, name=row.name, user_id=row.user_id)

    def save(self, category: Category) -> Category:
        with self._engine.begin() as conn:
            result = conn.execute(
                insert(categories).values(name=category.name, user_id=category.user_id)
            )
            category_id = result.inserted_primary_key[0]
        logger.debug("Saved category id=%d.", category_id)
        return Category(id=category_id, name=category.name, user_id=category.user_id)

    def delete_all(self) -> None:
        with self._engine.begin() as conn:
            conn.execute(delete(categories))


class TagRepositoryAdapter(TagRepository):
    """Persists tags to the ``tags`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_id(self, tag_id: int) -> Optional[Tag]:
        with self._engine.connect() as conn:
            row = conn.execute(select(tags).where(tags.c.id == tag_id)).first()
        if row is None:
            return None
        return Tag(id=row.id, name=row.name, user_id=row.user_id)

    def save(self, tag: Tag) -> Tag:
        with self._engine.begin() as conn:
            result = conn.execute(insert(tags).values(name=tag.name, user_id=tag.user_id))
            tag_id = result.inserted_primary_key[0]
        logger.debug("Saved tag id=%d.", tag_id)
        return Tag(id=tag_id, name=tag.name, user_id=tag.user_id)

    def delete_all(self) -> None:
        with self._engine.begin() as conn:
            conn.execute(delete(tags))
