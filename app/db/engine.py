# app/db/engine.py

from functools import lru_cache

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from app.core.config import get_settings


def create_db_engine(url: str) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    engine = create_engine(url, future=True)

    if engine.dialect.name == "sqlite":
        # SQLite leaves FK enforcement off unless asked per connection
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_conn, _record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


@lru_cache
def get_engine() -> Engine:
    return create_db_engine(get_settings().database_url)
