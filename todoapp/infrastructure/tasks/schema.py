"""
Relational schema for the tasks bounded context.

Tables are declared with SQLAlchemy Core and created on start-up
with ``metadata.create_all``. Works on SQLite and PostgreSQL.
"""

import logging

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
)
from sqlalchemy.engine import Engine

from todoapp.domain.tasks.entities import TITLE_MAX_LENGTH

logger = logging.getLogger(__name__)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False),
)

categories = Table(
    "categories",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
)

tags = Table(
    "tags",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
)

tasks = Table(
    "tasks",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(TITLE_MAX_LENGTH), nullable=False),
    Column("description", Text),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False, index=True),
    Column("category_id", Integer, ForeignKey("categories.id"), nullable=False),
    Column("done", Boolean, nullable=False, default=False),
    Column("canceled_at", DateTime(timezone=True)),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("location_latitude", Float),
    Column("location_longitude", Float),
    Column("location_name", String(255)),
    Column("location_description", Text),
)

# position keeps tags in the order they were supplied at creation
task_tags = Table(
    "task_tags",
    metadata,
    Column("task_id", Integer, ForeignKey("tasks.id"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id"), primary_key=True),
    Column("position", Integer, nullable=False),
)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Build a SQLAlchemy engine for the given URL.

    SQLite connections are shared with FastAPI's worker threads,
    so the same-thread check is disabled for them.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def create_schema(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    metadata.create_all(engine)
    logger.info("Database schema ready on %s", engine.url.render_as_string(hide_password=True))
