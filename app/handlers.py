# app/handlers.py

from typing import Any, Dict, Mapping, Optional

from app.exceptions import ProductNotFoundError
from app.logger import get_logger
from app.models import Product
from app.repository import ProductRepository
from app.validation import to_bool, to_product_input

log = get_logger(__name__)

DELETED_MESSAGE = "Producto Eliminado correctemente"


def _find_or_raise(repo: ProductRepository, product_id: Optional[int]) -> Product:
  product = repo.find_by_id(product_id) if product_id is not None else None
  if product is None:
    log.info(f"Product id={product_id} not found")
    raise ProductNotFoundError(product_id)
  return product


def list_products(repo: ProductRepository) -> Dict[str, Any]:
  return {"data": repo.find_all()}


def get_product(repo: ProductRepository, product_id: Optional[int]) -> Dict[str, Any]:
  return {"data": _find_or_raise(repo, product_id)}


def create_product(repo: ProductRepository, body: Mapping[str, Any]) -> Dict[str, Any]:
  """New products always start available."""
  product = repo.insert(to_product_input(body))
  return {"data": product}


def update_product(repo: ProductRepository, product_id: Optional[int], body: Mapping[str, Any]) -> Dict[str, Any]:
  """Full replace of name, price and availability."""
  current = _find_or_raise(repo, product_id)
  data = to_product_input(body, availability=to_bool(body["availability"]))
  product = repo.replace(Product(id=current.id, **data.model_dump()))
  return {"data": product}


def toggle_availability(repo: ProductRepository, product_id: Optional[int]) -> Dict[str, Any]:
  current = _find_or_raise(repo, product_id)
  product = repo.replace(current.model_copy(update={"availability": not current.availability}))
  return {"data": product}


def delete_product(repo: ProductRepository, product_id: Optional[int]) -> Dict[str, Any]:
  current = _find_or_raise(repo, product_id)
  repo.delete(current.id)
  return {"data": DELETED_MESSAGE}
