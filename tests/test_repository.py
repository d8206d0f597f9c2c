# tests/test_repository.py

import pytest
from sqlmodel import SQLModel, select

from app.db_models import ProductRecord
from app.exceptions import ProductNotFoundError, RepositoryError
from app.models import Product, ProductInput


def test_insert_assigns_id_and_defaults_availability(repo):
  product = repo.insert(ProductInput(name="Mazo", price=1250))
  assert product.id is not None
  assert product.availability is True
  assert repo.find_by_id(product.id) == product


def test_insert_sets_timestamps(repo, session):
  product = repo.insert(ProductInput(name="Mazo", price=1250))
  record = session.exec(select(ProductRecord).where(ProductRecord.id == product.id)).one()
  assert record.created_at is not None
  assert record.updated_at is not None
  assert not hasattr(product, "created_at")


def test_find_all_orders_by_price_descending(repo):
  repo.insert(ProductInput(name="Barato", price=10))
  repo.insert(ProductInput(name="Caro", price=900))
  repo.insert(ProductInput(name="Medio", price=300))
  assert [p.name for p in repo.find_all()] == ["Caro", "Medio", "Barato"]


def test_find_by_id_missing(repo):
  assert repo.find_by_id(2000) is None


def test_replace(repo, product):
  updated = repo.replace(Product(id=product.id, name="Monitor Plano", price=250, availability=False))
  assert updated == Product(id=product.id, name="Monitor Plano", price=250, availability=False)
  assert repo.find_by_id(product.id) == updated


def test_replace_missing_raises(repo):
  with pytest.raises(ProductNotFoundError):
    repo.replace(Product(id=2000, name="Nada", price=1, availability=True))


def test_delete(repo, product):
  repo.delete(product.id)
  assert repo.find_by_id(product.id) is None
  with pytest.raises(ProductNotFoundError):
    repo.delete(product.id)


def test_storage_failure_becomes_repository_error(repo, engine):
  SQLModel.metadata.drop_all(engine, tables=[ProductRecord.__table__])
  with pytest.raises(RepositoryError) as exc_info:
    repo.find_all()
  assert exc_info.value.operation == "find_all"
  with pytest.raises(RepositoryError):
    repo.insert(ProductInput(name="Mazo", price=1))


def test_out_of_range_ids_are_not_found(repo):
  assert repo.find_by_id(2**63) is None
  with pytest.raises(ProductNotFoundError):
    repo.replace(Product(id=2**63, name="Nada", price=1, availability=True))
  with pytest.raises(ProductNotFoundError):
    repo.delete(-2**63 - 1)
