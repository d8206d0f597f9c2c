# tests/conftest.py

import os

# Must be set before app.config is imported and caches the settings
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.database import create_db_engine, get_session, init_db
from app.main import app
from app.models import ProductInput
from app.repository import SQLProductRepository


@pytest.fixture
def engine():
  engine = create_db_engine("sqlite://")
  init_db(engine)
  yield engine
  engine.dispose()


@pytest.fixture
def session(engine):
  with Session(engine) as session:
    yield session


@pytest.fixture
def repo(session):
  return SQLProductRepository(session)


@pytest.fixture
def client(engine):
  def override_get_session():
    with Session(engine) as session:
      yield session

  app.dependency_overrides[get_session] = override_get_session
  yield TestClient(app, raise_server_exceptions=False)
  app.dependency_overrides.clear()


@pytest.fixture
def product(repo):
  return repo.insert(ProductInput(name="Monitor Curvo", price=300))
