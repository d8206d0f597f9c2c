# app/repository.py

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from app.db_models import MAX_ID, MIN_ID, ProductRecord
from app.exceptions import ProductNotFoundError, RepositoryError
from app.logger import get_logger
from app.models import Product, ProductInput

log = get_logger(__name__)


class ProductRepository(ABC):
  """Storage interface for products. Works on DTOs only."""

  @abstractmethod
  def find_all(self) -> List[Product]:
    """Every product, most expensive first."""

  @abstractmethod
  def find_by_id(self, product_id: int) -> Optional[Product]:
    """The product with this id, or None."""

  @abstractmethod
  def insert(self, data: ProductInput) -> Product:
    """Store a new product; storage assigns the id."""

  @abstractmethod
  def replace(self, product: Product) -> Product:
    """Overwrite name, price and availability of an existing product."""

  @abstractmethod
  def delete(self, product_id: int) -> None:
    """Hard delete."""


def _storable(product_id: int) -> bool:
  return MIN_ID <= product_id <= MAX_ID


def to_dto(record: ProductRecord) -> Product:
  return Product(
    id=record.id,
    name=record.name,
    price=record.price,
    availability=record.availability,
  )


class SQLProductRepository(ProductRepository):
  def __init__(self, session: Session):
    self.session = session

  @contextmanager
  def _storage(self, operation: str):
    try:
      yield
    except SQLAlchemyError as e:
      log.error(f"[Repository] {operation} failed: {e}", exc_info=True)
      self.session.rollback()
      raise RepositoryError(operation) from e

  def find_all(self) -> List[Product]:
    statement = select(ProductRecord).order_by(col(ProductRecord.price).desc(), col(ProductRecord.id))
    with self._storage("find_all"):
      records = self.session.exec(statement).all()
    return [to_dto(record) for record in records]

  def find_by_id(self, product_id: int) -> Optional[Product]:
    if not _storable(product_id):
      return None
    with self._storage("find_by_id"):
      record = self.session.get(ProductRecord, product_id)
    return to_dto(record) if record else None

  def insert(self, data: ProductInput) -> Product:
    record = ProductRecord(name=data.name, price=data.price, availability=data.availability)
    with self._storage("insert"):
      self.session.add(record)
      self.session.commit()
      self.session.refresh(record)
    log.info(f"Inserted product id={record.id}")
    return to_dto(record)

  def replace(self, product: Product) -> Product:
    if not _storable(product.id):
      raise ProductNotFoundError(product.id)
    with self._storage("replace"):
      record = self.session.get(ProductRecord, product.id)
      if record is None:
        raise ProductNotFoundError(product.id)
      record.name = product.name
      record.price = product.price
      record.availability = product.availability
      self.session.add(record)
      self.session.commit()
      self.session.refresh(record)
    log.info(f"Replaced product id={record.id}")
    return to_dto(record)

  def delete(self, product_id: int) -> None:
    if not _storable(product_id):
      raise ProductNotFoundError(product_id)
    with self._storage("delete"):
      record = self.session.get(ProductRecord, product_id)
      if record is None:
        raise ProductNotFoundError(product_id)
      self.session.delete(record)
      self.session.commit()
    log.info(f"Deleted product id={product_id}")
