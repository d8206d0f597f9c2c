# app/database.py

import os

from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from app.config import get_settings
from app.logger import get_logger

log = get_logger(__name__)


def create_db_engine(url: str):
  """
  Build an engine for the given URL.
  SQLite files get their directory created; in-memory SQLite shares one connection.
  """
  db_url = make_url(url)
  if db_url.get_backend_name() != "sqlite":
    return create_engine(url, echo=False, pool_pre_ping=True)

  connect_args = {"check_same_thread": False}
  if db_url.database in (None, "", ":memory:"):
    return create_engine(url, echo=False, connect_args=connect_args, poolclass=StaticPool)

  directory = os.path.dirname(db_url.database)
  if directory:
    os.makedirs(directory, exist_ok=True)
  return create_engine(url, echo=False, connect_args=connect_args)


engine = create_db_engine(get_settings().DATABASE_URL)


def init_db(bind=None):
  """Creates the products table if missing"""
  from app.db_models import ProductRecord

  bind = bind or engine
  SQLModel.metadata.create_all(bind, tables=[ProductRecord.__table__], checkfirst=True)
  log.info(f"Initialized database ({bind.url.render_as_string(hide_password=True)})")


def clear_database(bind=None):
  """Drop and recreate every table, wiping all products"""
  from app.db_models import ProductRecord

  bind = bind or engine
  try:
    SQLModel.metadata.drop_all(bind, tables=[ProductRecord.__table__], checkfirst=True)
    SQLModel.metadata.create_all(bind, tables=[ProductRecord.__table__])
  except Exception as e:
    log.error(f"Error clearing database: {e}")
    raise
  log.info("Cleared all records from database")


def get_session():
  """FastAPI dependency: one session per request"""
  with Session(engine) as session:
    yield session
