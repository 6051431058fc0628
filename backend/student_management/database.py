"""
Engine and session setup.

Configured from the environment (a .env file is loaded if present):
- DATABASE_URL: SQLAlchemy URL, defaults to a SQLite file in the working directory
- SQL_ECHO: log every statement when true/1/yes
"""

import os
from pathlib import Path
from typing import Generator, Optional

from dotenv import load_dotenv
from sqlalchemy.engine import Engine, make_url
from sqlmodel import Session, SQLModel, create_engine

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./students.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("true", "1", "yes")


def sqlite_file_path(database_url: str) -> Optional[Path]:
    """
    Return the database file of a SQLite URL.

    None for other backends and for in-memory databases
    (sqlite://, sqlite:///:memory:, and any dialect+driver form of these).
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return None
    if not url.database or url.database == ":memory:":
        return None
    return Path(url.database)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the engine, making the parent directory of a SQLite file if needed"""
    is_sqlite = make_url(database_url).get_backend_name() == "sqlite"
    db_file = sqlite_file_path(database_url)
    if db_file is not None:
        db_file.parent.mkdir(parents=True, exist_ok=True)

    # check_same_thread=False: the threadpool and TestClient share connections
    connect_args = {"check_same_thread": False} if is_sqlite else {}
    return create_engine(database_url, echo=echo, connect_args=connect_args)


engine: Engine = build_engine(DATABASE_URL, echo=SQL_ECHO)


def get_session() -> Generator[Session, None, None]:
    """Get database session"""
    with Session(engine) as session:
        yield session


def init_db() -> None:
    """Create the student table if it does not exist"""
    from student_management.models.student import Student  # noqa: F401

    SQLModel.metadata.create_all(engine)
